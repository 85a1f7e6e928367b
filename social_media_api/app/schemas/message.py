"""
Pydantic models for message data.

``MessageCreate`` carries a new post, ``MessageUpdate`` the replacement
text for ``PATCH /messages/{id}`` and ``Message`` is the stored record
returned by the API.  Text constraints live in ``services.validation``
so that both creation and update share one rule set.
"""

from typing import Optional

from pydantic import BaseModel, Field

from social_media_api.app.core.db import SQLITE_INT_MAX, SQLITE_INT_MIN


class MessageCreate(BaseModel):
    """Schema for posting a message.

    A missing ``posted_by`` is not rejected here: the endpoint answers
    it like any unknown author (HTTP 400).
    """

    posted_by: Optional[int] = Field(None, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX, examples=[1])
    message_text: Optional[str] = Field(None, examples=["hi"])
    # Epoch seconds.  Stamped by the database layer when omitted.
    time_posted_epoch: Optional[int] = Field(None, ge=0, le=SQLITE_INT_MAX, examples=[1669947792])


class MessageUpdate(BaseModel):
    """Schema for replacing the text of an existing message."""

    message_text: Optional[str] = Field(None, examples=["hello"])


class Message(BaseModel):
    """Stored message record."""

    message_id: Optional[int] = None
    posted_by: int
    message_text: str
    time_posted_epoch: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
