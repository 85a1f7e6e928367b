"""
Persistence contracts consumed by the service layer.

The services depend on these protocols rather than on the SQLite
classes, so tests can hand them in-memory fakes.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message


class AccountGateway(Protocol):
    """
    Abstraction over account persistence.

    Implementations raise ``PersistenceFault`` on store failures and
    ``DuplicateKeyError`` when the username is already stored.
    """

    def create_account(self, account: Account) -> Account:
        """Persist a new account and return it with ``account_id`` set."""

        ...

    def get_account_by_username(self, username: str) -> Optional[Account]:
        ...

    def get_account_by_id(self, account_id: int) -> Optional[Account]:
        ...


class MessageGateway(Protocol):
    """Abstraction over message persistence."""

    def create_message(self, message: Message) -> Message:
        """Persist a new message, assigning its id and timestamp."""

        ...

    def get_all_messages(self) -> List[Message]:
        ...

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        ...

    def delete_message(self, message_id: int) -> bool:
        """Return True if a row was removed."""

        ...

    def update_message(self, message: Message) -> Message:
        """Store the new text of ``message``; raise ``NotFoundError`` if no row matches."""

        ...

    def get_messages_by_user_id(self, account_id: int) -> List[Message]:
        ...
