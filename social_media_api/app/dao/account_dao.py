"""
SQLite data access for the ``account`` table.
"""

from __future__ import annotations

import sqlite3
from typing import Optional

from social_media_api.app.core.exceptions import PersistenceFault
from social_media_api.app.dao.base import BaseDAO
from social_media_api.app.schemas.account import Account


class AccountDAO(BaseDAO):
    """Maps ``account`` rows to :class:`Account` records."""

    @staticmethod
    def _row_to_account(row: sqlite3.Row) -> Account:
        return Account(
            account_id=row["account_id"],
            username=row["username"],
            password=row["password"],
        )

    def create_account(self, account: Account) -> Account:
        """Insert a new account and return it with the generated ``account_id``.

        Raises ``DuplicateKeyError`` if the username is already taken.
        """
        with self.cursor() as cursor:
            cursor.execute(
                "INSERT INTO account (username, password) VALUES (?, ?)",
                (account.username, account.password),
            )
            account_id = cursor.lastrowid
        if not account_id:
            raise PersistenceFault("Creating account failed, no ID obtained.")
        return account.model_copy(update={"account_id": account_id})

    def get_account_by_username(self, username: str) -> Optional[Account]:
        with self.cursor() as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE username = ?",
                (username,),
            ).fetchone()
        return self._row_to_account(row) if row else None

    def get_account_by_id(self, account_id: int) -> Optional[Account]:
        with self.cursor() as cursor:
            row = cursor.execute(
                "SELECT account_id, username, password FROM account WHERE account_id = ?",
                (account_id,),
            ).fetchone()
        return self._row_to_account(row) if row else None
