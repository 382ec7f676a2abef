"""Bearer access tokens: signed (sub, role, tenant_id, exp) claims.

Tokens are minted by the parish sign-on service that owns credentials; this
service only reads them. issue_access_token produces the same format and is
what that service's integration and the test suite use to mint tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from catechesis.core.config import get_settings
from catechesis.domain.enums import Role
from catechesis.domain.exceptions import AuthenticationException
from catechesis.shared.utils.datetime import utc_now


@dataclass(frozen=True)
class AccessClaims:
    """Verified claims of one access token."""

    user_id: str
    role: Role
    tenant_id: str | None
    expires_at: datetime


def issue_access_token(
    user_id: str,
    role: Role,
    tenant_id: str | None,
    *,
    ttl: timedelta | None = None,
) -> str:
    """Sign a token for the user; ttl defaults to settings.access_token_expire_minutes."""
    settings = get_settings()
    lifetime = ttl if ttl is not None else timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": user_id,
        "role": role.value,
        "tenant_id": tenant_id,
        "exp": utc_now() + lifetime,
    }
    return jwt.encode(
        claims, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def read_access_token(token: str) -> AccessClaims:
    """Verify signature and expiry, then type the claims.

    Raises:
        AuthenticationException: bad signature, expired, or sub/role/tenant_id
            missing or malformed.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as exc:
        raise AuthenticationException(f"Invalid token: {exc!s}") from exc

    try:
        role = Role(payload.get("role"))
    except ValueError as exc:
        raise AuthenticationException("Token has no valid role claim") from exc
    tenant_id = payload.get("tenant_id")
    if tenant_id is not None and not isinstance(tenant_id, str):
        raise AuthenticationException("Token has a malformed tenant_id claim")

    return AccessClaims(
        user_id=payload["sub"],
        role=role,
        tenant_id=tenant_id,
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
