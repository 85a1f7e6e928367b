"""
FastAPI dependencies that build the services for each request.

Services are cheap to construct and hold no state between requests;
each DAO opens its own connection per call.  Tests replace these
providers through ``app.dependency_overrides``.
"""

from social_media_api.app.dao import AccountDAO, MessageDAO
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


def get_account_service() -> AccountService:
    return AccountService(AccountDAO())


def get_message_service() -> MessageService:
    return MessageService(MessageDAO())
