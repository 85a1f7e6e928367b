"""
Business logic for accounts.

Passwords are stored and compared in plain text.  Use a strong hashing
algorithm (e.g. bcrypt) before exposing this service to real users.
"""

import logging
from typing import Optional

from social_media_api.app.core.exceptions import DuplicateKeyError, PersistenceFault, ValidationError
from social_media_api.app.dao.interfaces import AccountGateway
from social_media_api.app.schemas.account import Account, AccountCreate
from social_media_api.app.services.validation import validate_account


logger = logging.getLogger(__name__)

USERNAME_TAKEN = "username_taken"


class AccountService:
    """Registration, login and existence checks for accounts."""

    def __init__(self, account_dao: AccountGateway) -> None:
        self.account_dao = account_dao

    def register(self, candidate: AccountCreate) -> Account:
        """Validate and create a new account.

        Raises ``ValidationError`` if the username is blank, the
        password is shorter than four characters or the username is
        already taken.  Returns the stored account with its id.
        """
        result = validate_account(candidate.username, candidate.password)
        if not result.ok:
            logger.warning("Rejected registration: %s", result.rule)
            result.raise_for_error()

        if self.account_dao.get_account_by_username(candidate.username) is not None:
            logger.warning("Rejected registration: username %s is taken", candidate.username)
            raise ValidationError("Username is already taken.", rule=USERNAME_TAKEN)

        try:
            account = self.account_dao.create_account(
                Account(username=candidate.username, password=candidate.password)
            )
        except DuplicateKeyError as exc:
            # Lost a race with a concurrent registration of the same name.
            raise ValidationError("Username is already taken.", rule=USERNAME_TAKEN) from exc
        logger.info("Registered account %s (%s)", account.account_id, account.username)
        return account

    def login(self, username: Optional[str], password: Optional[str]) -> Optional[Account]:
        """Return the account if the credentials match, otherwise ``None``."""
        if username is None:
            return None
        account = self.account_dao.get_account_by_username(username)
        if account is not None and account.password == password:
            return account
        return None

    def exists(self, account_id: int) -> bool:
        """Return True if an account with this id is stored.

        Database failures are logged and reported as ``False``.
        """
        try:
            return self.account_dao.get_account_by_id(account_id) is not None
        except PersistenceFault:
            logger.exception("Could not check whether account %s exists", account_id)
            return False
