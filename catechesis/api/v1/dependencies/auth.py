"""Authentication dependency: bearer JWT -> Principal (composition root)."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.interfaces.repositories import IUserRepository
from catechesis.domain.entities.principal import Principal
from catechesis.domain.exceptions import AuthenticationException, CatechesisException
from catechesis.infrastructure.persistence.database import get_db
from catechesis.infrastructure.persistence.repositories import UserRepository
from catechesis.infrastructure.security.access_tokens import read_access_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IUserRepository:
    """User repository for read operations (principal resolution)."""
    return UserRepository(db)


async def get_principal_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[IUserRepository, Depends(get_user_repo)],
) -> Principal | None:
    """Return the caller's Principal from a valid JWT for an active user; else None.

    Role and parish come from the user row, so a role change takes effect
    without waiting for old tokens to expire.
    """
    if not credentials:
        return None
    try:
        claims = read_access_token(credentials.credentials)
    except AuthenticationException as exc:
        logger.debug("Bearer token rejected: %s", exc.message)
        return None
    user = await user_repo.get_by_id(claims.user_id)
    if not user or not user.is_active:
        return None
    if claims.tenant_id != user.tenant_id:
        logger.warning("Token parish claim is stale for user=%s", user.id)
        return None
    try:
        return Principal(user_id=user.id, role=user.role, tenant_id=user.tenant_id)
    except CatechesisException:
        logger.warning("User %s has an inconsistent role/parish pairing", user.id)
        return None


async def get_principal(
    principal: Annotated[Principal | None, Depends(get_principal_optional)],
) -> Principal:
    """Return the caller's Principal; raise 401 if missing or invalid."""
    if principal is None:
        raise AuthenticationException("Not authenticated")
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_principal)]
