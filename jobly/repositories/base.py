from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import Executable
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

# SQLSTATE raised by PostgreSQL on foreign key violations
FOREIGN_KEY_VIOLATION = "23503"


class BaseRepository:
    """
    Base class for repositories providing common helpers.

    Note:
      Repositories commit their own writes. On failure they roll back before
      re-raising so the session stays usable for the caller.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        logger.debug("Executing %s statement", type(statement).__name__)
        return await self.session.execute(statement, params or {})

    async def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = await self.execute(statement, params)
        return result.scalars()

    async def scalar_one_or_none(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return a single scalar or None."""
        result = await self.execute(statement, params)
        return result.scalar_one_or_none()

    async def commit(self) -> None:
        """Commit current transaction."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Roll back current transaction."""
        await self.session.rollback()

    async def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)


# PUBLIC_INTERFACE
def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """
    Return True when the IntegrityError was caused by a foreign key violation.

    Recognizes PostgreSQL (asyncpg/psycopg SQLSTATE 23503) and SQLite messages.
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == FOREIGN_KEY_VIOLATION:
        return True
    cause = getattr(orig, "__cause__", None)
    if getattr(cause, "sqlstate", None) == FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY constraint failed" in str(orig)
