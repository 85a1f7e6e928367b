"""
Pydantic models for account data.

``AccountCreate`` is the payload for registration and login, ``Account``
is the full stored record and ``AccountRead`` is what the API returns.
The password never appears in ``AccountRead``.

Request fields are deliberately optional: missing or blank values are
rejected by ``AccountService`` with a ``ValidationError`` (HTTP 400)
rather than by pydantic (HTTP 422).
"""

from typing import Optional

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    """Schema for registering an account or logging in."""

    username: Optional[str] = Field(None, examples=["bob"])
    password: Optional[str] = Field(None, examples=["pass1"])


class Account(BaseModel):
    """Stored account record."""

    account_id: Optional[int] = None
    username: str
    password: str

    model_config = {
        "from_attributes": True,
    }


class AccountRead(BaseModel):
    """Schema for reading an account from the API."""

    account_id: int
    username: str

    model_config = {
        "from_attributes": True,
    }
