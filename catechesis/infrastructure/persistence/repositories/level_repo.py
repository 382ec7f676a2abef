"""Level repository. Returns application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.level import LevelResult
from catechesis.infrastructure.persistence.models.level import Level
from catechesis.infrastructure.persistence.repositories.base import BaseRepository


class LevelRepository(BaseRepository[Level]):
    """Curriculum level lookups."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Level)

    async def get_by_id(self, level_id: str) -> LevelResult | None:
        level = await self._get(level_id)
        return LevelResult(id=level.id, name=level.name, order=level.order) if level else None
