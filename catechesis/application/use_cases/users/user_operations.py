"""User operations: creation, role changes and deactivation through the access guard."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catechesis.application.dtos.user import UserCreate, UserResult
from catechesis.domain.entities.principal import Principal, validate_role_tenant
from catechesis.domain.enums import Capability, Role
from catechesis.domain.exceptions import (
    ParishNotFoundException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)

if TYPE_CHECKING:
    from catechesis.application.interfaces.repositories import (
        IParishRepository,
        IUserRepository,
    )
    from catechesis.application.services.access_guard import AccessGuard

logger = logging.getLogger(__name__)


class UserOperations:
    """Administrative user management; self-demotion and self-deactivation are refused."""

    def __init__(
        self,
        guard: AccessGuard,
        user_repo: IUserRepository,
        parish_repo: IParishRepository,
    ) -> None:
        self.guard = guard
        self.user_repo = user_repo
        self.parish_repo = parish_repo

    async def _ensure_parish(self, tenant_id: str | None) -> None:
        if tenant_id is not None and not await self.parish_repo.get_by_id(tenant_id):
            raise ParishNotFoundException(tenant_id)

    async def _resolve_user(
        self, principal: Principal, user_id: str, capability: Capability
    ) -> UserResult:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise self.guard.missing_resource(
                principal, capability, UserNotFoundException(user_id)
            )
        return user

    async def get_user(self, principal: Principal, user_id: str) -> UserResult:
        """Return a user; parish admins may read users of their own parish."""
        user = await self._resolve_user(principal, user_id, Capability.USER_READ)
        self.guard.require(principal, user.tenant_id, Capability.USER_READ)
        return user

    async def create_user(self, principal: Principal, data: UserCreate) -> UserResult:
        """Create a user after enforcing the role/parish pairing.

        Raises:
            ParishRequiredException: non-admin role without parish.
            AdminCannotHaveParishException: admin role with parish.
            UserAlreadyExistsException: username taken.
        """
        self.guard.require(principal, data.tenant_id, Capability.USER_CREATE)
        username = data.username.strip()
        if not username:
            raise ValidationException("Username is required", field="username")
        validate_role_tenant(data.role, data.tenant_id)
        await self._ensure_parish(data.tenant_id)
        if await self.user_repo.get_by_username(username):
            raise UserAlreadyExistsException(username)
        user = await self.user_repo.create_user(
            UserCreate(username=username, role=data.role, tenant_id=data.tenant_id)
        )
        logger.info(
            "User created: id=%s role=%s tenant=%s by=%s",
            user.id,
            user.role.value,
            user.tenant_id,
            principal.user_id,
        )
        return user

    async def change_role(
        self,
        principal: Principal,
        user_id: str,
        role: Role,
        tenant_id: str | None,
    ) -> UserResult:
        """Set a user's role and parish together (the pair is validated as a unit)."""
        target = await self._resolve_user(principal, user_id, Capability.USER_UPDATE)
        self.guard.require(
            principal, target.tenant_id, Capability.USER_UPDATE, target_user_id=target.id
        )
        validate_role_tenant(role, tenant_id)
        await self._ensure_parish(tenant_id)
        updated = await self.user_repo.update_role(target.id, role, tenant_id)
        if not updated:
            raise UserNotFoundException(user_id)
        logger.info(
            "User role changed: id=%s %s->%s by=%s",
            target.id,
            target.role.value,
            role.value,
            principal.user_id,
        )
        return updated

    async def deactivate_user(self, principal: Principal, user_id: str) -> UserResult:
        """Deactivate a user; the user can no longer authenticate."""
        target = await self._resolve_user(principal, user_id, Capability.USER_DEACTIVATE)
        self.guard.require(
            principal,
            target.tenant_id,
            Capability.USER_DEACTIVATE,
            target_user_id=target.id,
        )
        updated = await self.user_repo.set_active(target.id, False)
        if not updated:
            raise UserNotFoundException(user_id)
        logger.info("User deactivated: id=%s by=%s", target.id, principal.user_id)
        return updated
