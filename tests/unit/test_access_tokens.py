"""Tests for issuing and reading bearer access tokens."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from catechesis.core.config import get_settings
from catechesis.domain.enums import Role
from catechesis.domain.exceptions import AuthenticationException
from catechesis.infrastructure.security.access_tokens import (
    issue_access_token,
    read_access_token,
)


def _sign(claims: dict) -> str:
    settings = get_settings()
    return jwt.encode(
        claims, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def test_issued_token_reads_back_as_typed_claims() -> None:
    token = issue_access_token("u1", Role.SECRETARY, "t1")
    claims = read_access_token(token)
    assert claims.user_id == "u1"
    assert claims.role is Role.SECRETARY
    assert claims.tenant_id == "t1"
    assert claims.expires_at > datetime.now(UTC)


def test_admin_token_has_no_parish() -> None:
    claims = read_access_token(issue_access_token("root", Role.ADMIN, None))
    assert claims.role is Role.ADMIN
    assert claims.tenant_id is None


def test_expired_token_rejected() -> None:
    token = issue_access_token("u1", Role.ADMIN, None, ttl=timedelta(seconds=-5))
    with pytest.raises(AuthenticationException):
        read_access_token(token)


def test_missing_role_rejected() -> None:
    token = _sign({"sub": "u1", "exp": datetime.now(UTC) + timedelta(minutes=5)})
    with pytest.raises(AuthenticationException, match="role"):
        read_access_token(token)


def test_unknown_role_rejected() -> None:
    token = _sign(
        {"sub": "u1", "role": "bishop", "exp": datetime.now(UTC) + timedelta(minutes=5)}
    )
    with pytest.raises(AuthenticationException, match="role"):
        read_access_token(token)


def test_token_without_expiry_rejected() -> None:
    with pytest.raises(AuthenticationException):
        read_access_token(_sign({"sub": "u1", "role": "admin"}))


def test_tampered_token_rejected() -> None:
    token = issue_access_token("u1", Role.ADMIN, None)
    with pytest.raises(AuthenticationException):
        read_access_token(token[:-2] + ("AA" if not token.endswith("AA") else "BB"))
