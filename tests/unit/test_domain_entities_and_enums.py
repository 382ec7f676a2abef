"""Tests for Principal and domain enums."""

import pytest

from catechesis.domain.entities.principal import Principal, validate_role_tenant
from catechesis.domain.enums import Capability, EligibilityReason, Role
from catechesis.domain.exceptions import AdminCannotHaveParishException, ParishRequiredException


def test_admin_principal_without_parish() -> None:
    p = Principal(user_id="u1", role=Role.ADMIN)
    assert p.is_admin
    assert p.tenant_id is None


def test_admin_principal_with_parish_rejected() -> None:
    with pytest.raises(AdminCannotHaveParishException):
        Principal(user_id="u1", role=Role.ADMIN, tenant_id="t1")


@pytest.mark.parametrize("role", [Role.PARISH_ADMIN, Role.SECRETARY, Role.CATECHIST, Role.READONLY])
def test_tenant_roles_require_parish(role: Role) -> None:
    with pytest.raises(ParishRequiredException) as exc_info:
        Principal(user_id="u1", role=role)
    assert exc_info.value.details == {"role": role.value}
    assert not Principal(user_id="u1", role=role, tenant_id="t1").is_admin


def test_validate_role_tenant_rejects_empty_parish() -> None:
    with pytest.raises(ParishRequiredException):
        validate_role_tenant(Role.CATECHIST, "")


def test_role_requires_tenant() -> None:
    assert not Role.ADMIN.requires_tenant
    assert Role.READONLY.requires_tenant


def test_enum_values() -> None:
    assert Role.values() == ["admin", "parish_admin", "secretary", "catechist", "readonly"]
    assert "attendance:record" in Capability.values()
    assert EligibilityReason.AGE_FLOOR.value == "AGE_FLOOR"
