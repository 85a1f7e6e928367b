"""
Error taxonomy for the social media API.

Services raise these exceptions; the HTTP layer maps them to status
codes in ``api.errors``.  Lookups that merely find nothing do not
raise: they return ``None`` (or ``False`` for deletes).
"""

from typing import Optional


class SocialMediaError(Exception):
    """Base class for all application errors."""


class ValidationError(SocialMediaError):
    """Caller-supplied data violates a rule (blank text, weak password, taken username)."""

    def __init__(self, message: str, rule: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.rule = rule


class NotFoundError(SocialMediaError):
    """A referenced entity does not exist for an operation that requires it."""


class PersistenceFault(SocialMediaError):
    """The database could not complete an operation."""


class DuplicateKeyError(PersistenceFault):
    """A unique constraint rejected an insert."""
