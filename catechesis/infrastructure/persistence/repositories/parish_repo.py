"""Parish repository. Returns application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.parish import ParishResult
from catechesis.infrastructure.persistence.models.parish import Parish
from catechesis.infrastructure.persistence.repositories.base import BaseRepository


class ParishRepository(BaseRepository[Parish]):
    """Parish lookups."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Parish)

    async def get_by_id(self, parish_id: str) -> ParishResult | None:
        parish = await self._get(parish_id)
        return ParishResult(id=parish.id, name=parish.name) if parish else None
