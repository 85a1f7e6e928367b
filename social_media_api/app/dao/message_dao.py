"""
SQLite data access for the ``message`` table.

All queries use parameterized statements.  Listing queries return rows
in the order SQLite produces them; no sort order is promised.
"""

from __future__ import annotations

import sqlite3
import time
from typing import List, Optional

from social_media_api.app.core.exceptions import NotFoundError, PersistenceFault
from social_media_api.app.dao.base import BaseDAO
from social_media_api.app.schemas.message import Message


_COLUMNS = "message_id, posted_by, message_text, time_posted_epoch"


class MessageDAO(BaseDAO):
    """Maps ``message`` rows to :class:`Message` records."""

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> Message:
        return Message(
            message_id=row["message_id"],
            posted_by=row["posted_by"],
            message_text=row["message_text"],
            time_posted_epoch=row["time_posted_epoch"],
        )

    def create_message(self, message: Message) -> Message:
        """Insert a message and return it with its id and timestamp.

        ``time_posted_epoch`` is taken from the record when the client
        supplied one, otherwise the current time is used.
        """
        posted_at = message.time_posted_epoch or int(time.time())
        with self.cursor() as cursor:
            cursor.execute(
                "INSERT INTO message (posted_by, message_text, time_posted_epoch) VALUES (?, ?, ?)",
                (message.posted_by, message.message_text, posted_at),
            )
            message_id = cursor.lastrowid
        if not message_id:
            raise PersistenceFault("Creating message failed, no ID obtained.")
        return message.model_copy(
            update={"message_id": message_id, "time_posted_epoch": posted_at}
        )

    def get_all_messages(self) -> List[Message]:
        with self.cursor() as cursor:
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM message").fetchall()
        return [self._row_to_message(row) for row in rows]

    def get_message_by_id(self, message_id: int) -> Optional[Message]:
        with self.cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE message_id = ?",
                (message_id,),
            ).fetchone()
        return self._row_to_message(row) if row else None

    def delete_message(self, message_id: int) -> bool:
        """Delete a message by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with self.cursor() as cursor:
            cursor.execute("DELETE FROM message WHERE message_id = ?", (message_id,))
            affected = cursor.rowcount
        return affected > 0

    def update_message(self, message: Message) -> Message:
        """Replace the text of an existing message.

        Only ``message_text`` is written; author and timestamp are left
        untouched.  Raises ``NotFoundError`` if no row matches.
        """
        with self.cursor() as cursor:
            cursor.execute(
                "UPDATE message SET message_text = ? WHERE message_id = ?",
                (message.message_text, message.message_id),
            )
            affected = cursor.rowcount
        if affected == 0:
            raise NotFoundError(f"Message {message.message_id} not found")
        return message

    def get_messages_by_user_id(self, account_id: int) -> List[Message]:
        with self.cursor() as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM message WHERE posted_by = ?",
                (account_id,),
            ).fetchall()
        return [self._row_to_message(row) for row in rows]
