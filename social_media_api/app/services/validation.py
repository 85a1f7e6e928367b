"""
Validation rules for accounts and messages.

Each entity has exactly one validation function.  It returns a
``ValidationResult`` naming the first violated rule instead of raising,
so callers decide how to surface it; the services turn a failed result
into ``ValidationError`` via ``ValidationResult.raise_for_error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from social_media_api.app.core.exceptions import ValidationError


MIN_PASSWORD_LENGTH = 4
MAX_MESSAGE_LENGTH = 255

USERNAME_BLANK = "username_blank"
PASSWORD_TOO_SHORT = "password_too_short"
TEXT_BLANK = "text_blank"
TEXT_TOO_LONG = "text_too_long"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation check."""

    ok: bool
    rule: Optional[str] = None
    message: Optional[str] = None

    def raise_for_error(self) -> None:
        if not self.ok:
            raise ValidationError(self.message or "Invalid data", rule=self.rule)


VALID = ValidationResult(ok=True)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_account(username: Optional[str], password: Optional[str]) -> ValidationResult:
    """Check a registration candidate: non-blank username, password of 4+ characters."""
    if _is_blank(username):
        return ValidationResult(False, USERNAME_BLANK, "Username cannot be empty.")
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        return ValidationResult(
            False,
            PASSWORD_TOO_SHORT,
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.",
        )
    return VALID


def validate_message_text(text: Optional[str]) -> ValidationResult:
    """Check message text: not blank and at most 255 characters."""
    if _is_blank(text):
        return ValidationResult(False, TEXT_BLANK, "Message text cannot be empty.")
    if len(text) > MAX_MESSAGE_LENGTH:
        return ValidationResult(
            False,
            TEXT_TOO_LONG,
            f"Message text cannot exceed {MAX_MESSAGE_LENGTH} characters.",
        )
    return VALID
