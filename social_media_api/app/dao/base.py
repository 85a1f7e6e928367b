"""
Shared plumbing for the SQLite data access objects.

``BaseDAO.cursor`` wraps ``core.db.get_cursor`` and converts driver
exceptions into the application's error taxonomy so that services never
see ``sqlite3`` types.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

from social_media_api.app.core.db import get_cursor
from social_media_api.app.core.exceptions import DuplicateKeyError, PersistenceFault


logger = logging.getLogger(__name__)


class BaseDAO:
    """Base class giving DAOs a cursor with translated errors."""

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor() as cursor:
                yield cursor
        except sqlite3.IntegrityError as exc:
            if "UNIQUE" in str(exc):
                raise DuplicateKeyError(str(exc)) from exc
            raise PersistenceFault(str(exc)) from exc
        except sqlite3.Error as exc:
            logger.error("Database error: %s", exc)
            raise PersistenceFault(str(exc)) from exc
        except OverflowError as exc:
            # Parameter outside the 64-bit INTEGER range.
            raise PersistenceFault(str(exc)) from exc
