"""Tests for AccessGuard (role, parish and capability checks)."""

import pytest

from catechesis.application.services.access_guard import (
    CAPABILITY_TABLE,
    AccessGuard,
)
from catechesis.domain.entities.principal import Principal
from catechesis.domain.enums import Capability, DenialReason, Role
from catechesis.domain.exceptions import AuthorizationException, GroupNotFoundException

guard = AccessGuard()


def _p(role: Role, tenant: str | None = "t1", user_id: str = "u1") -> Principal:
    return Principal(user_id=user_id, role=role, tenant_id=tenant if role is not Role.ADMIN else None)


def test_every_capability_has_a_table_entry() -> None:
    """The capability table covers every capability."""
    assert set(CAPABILITY_TABLE) == set(Capability)


def test_admin_allowed_for_any_parish_and_capability() -> None:
    """admin bypasses parish and capability checks."""
    admin = _p(Role.ADMIN)
    for capability in Capability:
        assert guard.authorize(admin, "t1", capability).allowed
        assert guard.authorize(admin, None, capability).allowed


def test_secretary_creates_enrollment_in_own_parish() -> None:
    d = guard.authorize(_p(Role.SECRETARY), "t1", Capability.ENROLLMENT_CREATE)
    assert d.allowed
    assert d.reason is None


def test_catechist_cannot_create_enrollment() -> None:
    """Catechist lacks enrollment:create even within its parish."""
    d = guard.authorize(_p(Role.CATECHIST), "t1", Capability.ENROLLMENT_CREATE)
    assert not d.allowed
    assert d.reason is DenialReason.MISSING_CAPABILITY


def test_foreign_parish_is_cross_tenant_before_capability() -> None:
    """Parish mismatch is reported even when the capability is also missing."""
    d = guard.authorize(_p(Role.READONLY, "t2"), "t1", Capability.ENROLLMENT_DELETE)
    assert d.reason is DenialReason.CROSS_TENANT


def test_parishless_resource_denied_to_tenant_roles() -> None:
    d = guard.authorize(_p(Role.PARISH_ADMIN), None, Capability.LEVEL_READ)
    assert d.reason is DenialReason.CROSS_TENANT


@pytest.mark.parametrize(
    ("role", "capability", "allowed"),
    [
        (Role.CATECHIST, Capability.ATTENDANCE_RECORD, True),
        (Role.CATECHIST, Capability.ATTENDANCE_UPDATE, True),
        (Role.CATECHIST, Capability.ATTENDANCE_DELETE, False),
        (Role.READONLY, Capability.ATTENDANCE_READ, True),
        (Role.READONLY, Capability.ATTENDANCE_RECORD, False),
        (Role.SECRETARY, Capability.ENROLLMENT_DELETE, False),
        (Role.PARISH_ADMIN, Capability.ENROLLMENT_DELETE, True),
        (Role.SECRETARY, Capability.REPORT_EXPORT, True),
        (Role.CATECHIST, Capability.REPORT_EXPORT, False),
        (Role.PARISH_ADMIN, Capability.USER_READ, True),
        (Role.PARISH_ADMIN, Capability.USER_CREATE, False),
    ],
)
def test_capability_table(role: Role, capability: Capability, allowed: bool) -> None:
    assert guard.authorize(_p(role), "t1", capability).allowed is allowed


def test_self_deactivation_denied_even_for_admin() -> None:
    """No principal may deactivate or demote its own user."""
    admin = _p(Role.ADMIN, user_id="boss")
    for capability in (Capability.USER_DEACTIVATE, Capability.USER_UPDATE, Capability.USER_DELETE):
        d = guard.authorize(admin, None, capability, target_user_id="boss")
        assert d.reason is DenialReason.SELF_ACTION
    assert guard.authorize(admin, None, Capability.USER_DEACTIVATE, target_user_id="other").allowed


def test_self_read_is_not_guarded() -> None:
    admin = _p(Role.ADMIN, user_id="boss")
    assert guard.authorize(admin, None, Capability.USER_READ, target_user_id="boss").allowed


def test_require_raises_with_reason_and_capability() -> None:
    """require raises AuthorizationException carrying reason and capability."""
    with pytest.raises(AuthorizationException) as exc_info:
        guard.require(_p(Role.SECRETARY, "t2"), "t1", Capability.ENROLLMENT_CREATE)
    exc = exc_info.value
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.reason == "CROSS_TENANT"
    assert exc.capability == "enrollment:create"
    assert exc.details == {"reason": "CROSS_TENANT", "capability": "enrollment:create"}


def test_require_logs_denial(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"), pytest.raises(AuthorizationException):
        guard.require(_p(Role.CATECHIST), "t1", Capability.ENROLLMENT_CREATE)
    assert "MISSING_CAPABILITY" in caplog.text


def test_can() -> None:
    assert guard.can(_p(Role.READONLY), "t1", Capability.GROUP_READ)
    assert not guard.can(_p(Role.READONLY), "t1", Capability.GROUP_CREATE)


def test_custom_capability_table() -> None:
    """A guard built with its own table consults only that table."""
    strict = AccessGuard({Capability.GROUP_READ: frozenset()})
    assert not strict.can(_p(Role.READONLY), "t1", Capability.GROUP_READ)
    assert not strict.can(_p(Role.READONLY), "t1", Capability.PARISH_READ)


def test_missing_resource_is_not_found_only_for_admin(caplog: pytest.LogCaptureFixture) -> None:
    not_found = GroupNotFoundException("g-404")
    assert guard.missing_resource(_p(Role.ADMIN), Capability.GROUP_READ, not_found) is not_found

    with caplog.at_level("WARNING"):
        denial = guard.missing_resource(_p(Role.SECRETARY), Capability.GROUP_READ, not_found)
    assert isinstance(denial, AuthorizationException)
    with pytest.raises(AuthorizationException) as exc_info:
        guard.require(_p(Role.SECRETARY, "t2"), "t1", Capability.GROUP_READ)
    assert denial.to_dict() == exc_info.value.to_dict()
    assert "CROSS_TENANT" in caplog.text
