"""
Top-level router for version 1 of the API.

This router aggregates the domain-specific routers.  The account
router declares ``/register``, ``/login`` and
``/accounts/{account_id}/messages`` itself, so it is included without
a prefix.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])


@router.get("/health", tags=["health"])
def health() -> dict:
    """Liveness probe."""
    return {"status": "ok"}
