"""
Data access objects.

Each DAO owns one table and maps its rows to the pydantic records in
``schemas``.  DAOs contain no business rules; validation lives in the
service layer.
"""

from .account_dao import AccountDAO  # noqa: F401
from .message_dao import MessageDAO  # noqa: F401
