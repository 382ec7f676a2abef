"""Base repository: generic get/create/update/delete and unique-violation detection."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.infrastructure.persistence.database import Base

# PostgreSQL SQLSTATE for unique_violation.
_UNIQUE_VIOLATION = "23505"

ModelType = TypeVar("ModelType", bound=Base)


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the IntegrityError is a unique-constraint violation.

    Drivers that do not expose a SQLSTATE are treated as unique violations.
    """
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return code is None or code == _UNIQUE_VIOLATION


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create, update and delete.

    Writes flush immediately so constraint violations surface at the call
    site; callers that must survive a violation wrap the call in
    db.begin_nested().
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(self, entity_id: str) -> ModelType | None:
        """Return a single ORM row by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and refresh server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and refresh it."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()
