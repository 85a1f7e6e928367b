"""
Message endpoints for API v1.

These routes create, list, read, update and delete posted messages.
Looking up or deleting a message that does not exist is not an error:
the response is HTTP 200 with an empty body.  Updating a missing
message is an error (HTTP 404).
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Path, Response, status

from social_media_api.app.api.deps import get_account_service, get_message_service
from social_media_api.app.core.db import SQLITE_INT_MAX, SQLITE_INT_MIN
from social_media_api.app.core.exceptions import ValidationError
from social_media_api.app.schemas.message import Message, MessageCreate, MessageUpdate
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


router = APIRouter()


def _empty_response() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("", response_model=Message)
def post_message(
    body: MessageCreate,
    account_service: AccountService = Depends(get_account_service),
    message_service: MessageService = Depends(get_message_service),
) -> Message:
    """Post a new message.

    The author given in ``posted_by`` must be a registered account,
    otherwise HTTP 400 is returned, as it is for blank text or text
    longer than 255 characters.
    """
    if body.posted_by is None or not account_service.exists(body.posted_by):
        raise ValidationError("Author account does not exist.", rule="author_unknown")
    return message_service.post_message(body)


@router.get("", response_model=List[Message])
def list_messages(
    message_service: MessageService = Depends(get_message_service),
) -> List[Message]:
    """Return every message."""
    return message_service.get_all_messages()


@router.get("/{message_id}", response_model=Message)
def get_message(
    message_id: int = Path(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX),
    message_service: MessageService = Depends(get_message_service),
) -> Union[Message, Response]:
    """Retrieve a single message by ID (empty body if it does not exist)."""
    message = message_service.get_message_by_id(message_id)
    if message is None:
        return _empty_response()
    return message


@router.delete("/{message_id}", response_model=Message)
def delete_message(
    message_id: int = Path(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX),
    message_service: MessageService = Depends(get_message_service),
) -> Union[Message, Response]:
    """Delete a message and return what was deleted.

    Deleting a message that does not exist returns an empty body so
    the call is idempotent.
    """
    message = message_service.get_message_by_id(message_id)
    if message is None or not message_service.delete_message(message_id):
        return _empty_response()
    return message


@router.patch("/{message_id}", response_model=Message)
def update_message(
    body: MessageUpdate,
    message_id: int = Path(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX),
    message_service: MessageService = Depends(get_message_service),
) -> Message:
    """Replace the text of a message.

    Returns the full updated message.  Invalid text yields HTTP 400, an
    unknown ``message_id`` HTTP 404.
    """
    return message_service.update_message_text(message_id, body.message_text)
