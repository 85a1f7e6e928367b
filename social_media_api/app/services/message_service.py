"""
Service layer for posted messages.

``MessageService`` validates message text and delegates storage to a
``MessageGateway``.  It does not check that the author exists; the
HTTP layer does that through ``AccountService.exists`` before posting.
"""

import logging
from typing import List, Optional

from social_media_api.app.core.exceptions import NotFoundError
from social_media_api.app.dao.interfaces import MessageGateway
from social_media_api.app.schemas.message import Message, MessageCreate
from social_media_api.app.services.validation import validate_message_text


logger = logging.getLogger(__name__)


class MessageService:
    """Create, read, update and delete messages."""

    def __init__(self, message_dao: MessageGateway) -> None:
        self.message_dao = message_dao

    def post_message(self, candidate: MessageCreate) -> Message:
        """Validate and store a new message.

        Raises ``ValidationError`` if the text is blank or longer than
        255 characters.
        """
        validate_message_text(candidate.message_text).raise_for_error()
        message = self.message_dao.create_message(
            Message(
                posted_by=candidate.posted_by,
                message_text=candidate.message_text,
                time_posted_epoch=candidate.time_posted_epoch,
            )
        )
        logger.info("Account %s posted message %s", message.posted_by, message.message_id)
        return message

    def get_all_messages(self) -> List[Message]:
        return self.message_dao.get_all_messages()

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        return self.message_dao.get_message_by_id(message_id)

    def delete_message(self, message_id: int) -> bool:
        """Delete a message; ``False`` means there was nothing to delete."""
        deleted = self.message_dao.delete_message(message_id)
        if deleted:
            logger.info("Deleted message %s", message_id)
        return deleted

    def update_message_text(self, message_id: int, new_text: Optional[str]) -> Message:
        """Replace the text of a message, keeping its id, author and timestamp.

        Raises ``ValidationError`` for blank or over-long text and
        ``NotFoundError`` if the message does not exist.
        """
        validate_message_text(new_text).raise_for_error()
        existing = self.message_dao.get_message_by_id(message_id)
        if existing is None:
            raise NotFoundError(f"Message {message_id} not found")
        updated = self.message_dao.update_message(
            existing.model_copy(update={"message_text": new_text})
        )
        logger.info("Updated text of message %s", message_id)
        return updated

    def get_messages_by_user_id(self, account_id: int) -> List[Message]:
        return self.message_dao.get_messages_by_user_id(account_id)
