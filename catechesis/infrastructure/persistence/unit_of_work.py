"""SQLAlchemy unit of work over a request session opened with get_db."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork:
    """Commits or rolls back the session's current transaction on request.

    The session must not be inside session.begin(); each commit ends the
    transaction and the next statement autobegins a new one.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
        logger.debug("Session rolled back to last commit")
