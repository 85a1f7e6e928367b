"""
Account endpoints for API v1.

Provide registration, login and the per-account message listing.
Login is a single stateless credential check: no token or session is
issued, the matching account is simply returned.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from social_media_api.app.api.deps import get_account_service, get_message_service
from social_media_api.app.core.db import SQLITE_INT_MAX, SQLITE_INT_MIN
from social_media_api.app.schemas.account import AccountCreate, AccountRead
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


router = APIRouter()


@router.post("/register", response_model=AccountRead)
def register_account(
    account: AccountCreate,
    account_service: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Register a new account.

    Returns the created account (without its password).  A blank
    username, a password shorter than four characters or a taken
    username yields HTTP 400.
    """
    created = account_service.register(account)
    return AccountRead.model_validate(created)


@router.post("/login", response_model=AccountRead)
def login(
    credentials: AccountCreate,
    account_service: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Check a username/password pair and return the matching account."""
    account = account_service.login(credentials.username, credentials.password)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return AccountRead.model_validate(account)


@router.get("/accounts/{account_id}/messages", response_model=List[Message])
def list_account_messages(
    account_id: int = Path(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX),
    message_service: MessageService = Depends(get_message_service),
) -> List[Message]:
    """List every message posted by an account.

    An unknown account or an account without posts both give an empty
    list.
    """
    return message_service.get_messages_by_user_id(account_id)
