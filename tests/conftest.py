import time

import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.config import settings
from social_media_api.app.core.db import init_db
from social_media_api.app.core.exceptions import DuplicateKeyError, NotFoundError, PersistenceFault
from social_media_api.app.main import app
from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


class InMemoryAccountDAO:
    def __init__(self):
        self.accounts = {}
        self.next_id = 1
        self.fail = False

    def _check(self):
        if self.fail:
            raise PersistenceFault("database is locked")

    def create_account(self, account: Account) -> Account:
        self._check()
        if any(a.username == account.username for a in self.accounts.values()):
            raise DuplicateKeyError("UNIQUE constraint failed: account.username")
        stored = account.model_copy(update={"account_id": self.next_id})
        self.accounts[self.next_id] = stored
        self.next_id += 1
        return stored

    def get_account_by_username(self, username):
        self._check()
        for account in self.accounts.values():
            if account.username == username:
                return account
        return None

    def get_account_by_id(self, account_id):
        self._check()
        return self.accounts.get(account_id)


class InMemoryMessageDAO:
    def __init__(self):
        self.messages = {}
        self.next_id = 1

    def create_message(self, message: Message) -> Message:
        stored = message.model_copy(
            update={
                "message_id": self.next_id,
                "time_posted_epoch": message.time_posted_epoch or int(time.time()),
            }
        )
        self.messages[self.next_id] = stored
        self.next_id += 1
        return stored

    def get_all_messages(self):
        return list(self.messages.values())

    def get_message_by_id(self, message_id):
        return self.messages.get(message_id)

    def delete_message(self, message_id):
        return self.messages.pop(message_id, None) is not None

    def update_message(self, message: Message) -> Message:
        if message.message_id not in self.messages:
            raise NotFoundError(f"Message {message.message_id} not found")
        self.messages[message.message_id] = message
        return message

    def get_messages_by_user_id(self, account_id):
        return [m for m in self.messages.values() if m.posted_by == account_id]


@pytest.fixture
def account_dao():
    return InMemoryAccountDAO()


@pytest.fixture
def message_dao():
    return InMemoryMessageDAO()


@pytest.fixture
def account_service(account_dao):
    return AccountService(account_dao)


@pytest.fixture
def message_service(message_dao):
    return MessageService(message_dao)


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file for each test."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def client(temp_db):
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
