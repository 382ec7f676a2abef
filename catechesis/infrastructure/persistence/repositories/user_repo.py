"""User repository. Interface methods return application DTOs."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.user import UserCreate, UserResult
from catechesis.domain.enums import Role
from catechesis.domain.exceptions import UserAlreadyExistsException
from catechesis.infrastructure.persistence.models.user import User
from catechesis.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        username=u.username,
        role=Role(u.role),
        tenant_id=u.tenant_id,
        is_active=u.is_active,
    )


class UserRepository(BaseRepository[User]):
    """User repository: lookups, create_user, role changes, activation."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self._get(user_id)
        return _user_to_result(user) if user else None

    async def get_by_username(self, username: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    async def create_user(self, data: UserCreate) -> UserResult:
        """Create user; raise UserAlreadyExistsException on unique constraint violation."""
        user = User(
            username=data.username,
            role=data.role.value,
            tenant_id=data.tenant_id,
            is_active=True,
        )
        try:
            async with self.db.begin_nested():
                created = await self.create(user)
        except IntegrityError:
            raise UserAlreadyExistsException(data.username)
        return _user_to_result(created)

    async def update_role(
        self, user_id: str, role: Role, tenant_id: str | None
    ) -> UserResult | None:
        user = await self._get(user_id)
        if not user:
            return None
        user.role = role.value
        user.tenant_id = tenant_id
        return _user_to_result(await self.update(user))

    async def set_active(self, user_id: str, is_active: bool) -> UserResult | None:
        user = await self._get(user_id)
        if not user:
            return None
        user.is_active = is_active
        return _user_to_result(await self.update(user))
