"""Group repository. Returns application DTOs."""

from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.group import GroupResult
from catechesis.infrastructure.persistence.models.group import Group
from catechesis.infrastructure.persistence.repositories.base import BaseRepository


def _group_to_result(g: Group) -> GroupResult:
    return GroupResult(
        id=g.id,
        tenant_id=g.tenant_id,
        level_id=g.level_id,
        name=g.name,
        period=g.period,
    )


class GroupRepository(BaseRepository[Group]):
    """Group lookups (parish ownership is checked by the access guard, not here)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Group)

    async def get_by_id(self, group_id: str) -> GroupResult | None:
        group = await self._get(group_id)
        return _group_to_result(group) if group else None
