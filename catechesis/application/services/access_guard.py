"""Access guard: role, parish and capability checks applied to every guarded operation.

Order of checks:
1. admin is allowed for any parish and any capability;
2. other roles must act within their own parish (CROSS_TENANT otherwise);
3. the (role, capability) pair must be in CAPABILITY_TABLE (MISSING_CAPABILITY);
4. on user resources, nobody may demote, deactivate or delete themselves (SELF_ACTION).

The parish check runs before anything about the resource's contents is
revealed, so a foreign-parish resource is always a 403, never a 404. For
non-admins a missing resource is reported the same way (see missing_resource).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from catechesis.domain.entities.principal import Principal
from catechesis.domain.enums import Capability, DenialReason, Role
from catechesis.domain.exceptions import AuthorizationException, ResourceNotFoundException

logger = logging.getLogger(__name__)

_ALL_TENANT_ROLES = frozenset(
    {Role.PARISH_ADMIN, Role.SECRETARY, Role.CATECHIST, Role.READONLY}
)
_OFFICE = frozenset({Role.PARISH_ADMIN, Role.SECRETARY})
_CLASSROOM = frozenset({Role.PARISH_ADMIN, Role.SECRETARY, Role.CATECHIST})
_PARISH_ADMIN = frozenset({Role.PARISH_ADMIN})
_ADMIN_ONLY: frozenset[Role] = frozenset()

# Roles besides admin that hold each capability.
CAPABILITY_TABLE: dict[Capability, frozenset[Role]] = {
    Capability.PARISH_READ: _ALL_TENANT_ROLES,
    Capability.PARISH_CREATE: _ADMIN_ONLY,
    Capability.PARISH_UPDATE: _PARISH_ADMIN,
    Capability.PARISH_DELETE: _ADMIN_ONLY,
    Capability.LEVEL_READ: _ALL_TENANT_ROLES,
    Capability.LEVEL_MANAGE: _ADMIN_ONLY,
    Capability.GROUP_READ: _ALL_TENANT_ROLES,
    Capability.GROUP_CREATE: _OFFICE,
    Capability.GROUP_UPDATE: _OFFICE,
    Capability.GROUP_DELETE: _PARISH_ADMIN,
    Capability.PERSON_READ: _ALL_TENANT_ROLES,
    Capability.ENROLLMENT_READ: _ALL_TENANT_ROLES,
    Capability.ENROLLMENT_CREATE: _OFFICE,
    Capability.ENROLLMENT_UPDATE: _OFFICE,
    Capability.ENROLLMENT_PAYMENT: _OFFICE,
    Capability.ENROLLMENT_TRANSFER: _OFFICE,
    Capability.ENROLLMENT_DELETE: _PARISH_ADMIN,
    Capability.ELIGIBILITY_READ: _ALL_TENANT_ROLES,
    Capability.ATTENDANCE_READ: _ALL_TENANT_ROLES,
    Capability.ATTENDANCE_RECORD: _CLASSROOM,
    Capability.ATTENDANCE_UPDATE: _CLASSROOM,
    Capability.ATTENDANCE_DELETE: _OFFICE,
    Capability.REPORT_EXPORT: _OFFICE,
    Capability.USER_READ: _PARISH_ADMIN,
    Capability.USER_CREATE: _ADMIN_ONLY,
    Capability.USER_UPDATE: _ADMIN_ONLY,
    Capability.USER_DEACTIVATE: _ADMIN_ONLY,
    Capability.USER_DELETE: _ADMIN_ONLY,
}

# Capabilities a principal may not exercise on its own user record.
SELF_GUARDED_CAPABILITIES = frozenset(
    {Capability.USER_UPDATE, Capability.USER_DEACTIVATE, Capability.USER_DELETE}
)


@dataclass(frozen=True)
class AccessDecision:
    """Allowed, or denied with a reason."""

    allowed: bool
    reason: DenialReason | None = None

    @classmethod
    def allow(cls) -> AccessDecision:
        return cls(True)

    @classmethod
    def deny(cls, reason: DenialReason) -> AccessDecision:
        return cls(False, reason)


class AccessGuard:
    """Evaluates the capability table for a principal against a resource's parish."""

    def __init__(
        self, capability_table: dict[Capability, frozenset[Role]] | None = None
    ) -> None:
        self.capability_table = (
            capability_table if capability_table is not None else CAPABILITY_TABLE
        )

    def authorize(
        self,
        principal: Principal,
        resource_tenant_id: str | None,
        capability: Capability,
        *,
        target_user_id: str | None = None,
    ) -> AccessDecision:
        """Return the access decision for capability on a resource owned by resource_tenant_id.

        Args:
            principal: Caller identity.
            resource_tenant_id: Parish that owns the resource (None for parish-less resources).
            capability: Capability being exercised.
            target_user_id: For user resources, the user acted upon.
        """
        if not principal.is_admin:
            if resource_tenant_id is None or resource_tenant_id != principal.tenant_id:
                return AccessDecision.deny(DenialReason.CROSS_TENANT)
            if principal.role not in self.capability_table.get(capability, _ADMIN_ONLY):
                return AccessDecision.deny(DenialReason.MISSING_CAPABILITY)
        if (
            target_user_id is not None
            and target_user_id == principal.user_id
            and capability in SELF_GUARDED_CAPABILITIES
        ):
            return AccessDecision.deny(DenialReason.SELF_ACTION)
        return AccessDecision.allow()

    def require(
        self,
        principal: Principal,
        resource_tenant_id: str | None,
        capability: Capability,
        *,
        target_user_id: str | None = None,
    ) -> None:
        """Raise AuthorizationException (403) carrying the denial reason if not allowed."""
        decision = self.authorize(
            principal, resource_tenant_id, capability, target_user_id=target_user_id
        )
        if decision.allowed:
            return
        raise self._denial(
            principal,
            resource_tenant_id,
            capability,
            decision.reason or DenialReason.MISSING_CAPABILITY,
        )

    def missing_resource(
        self,
        principal: Principal,
        capability: Capability,
        not_found: ResourceNotFoundException,
    ) -> Exception:
        """Return the exception to raise when the resource to authorize against does not exist.

        Admin gets the 404. Everyone else gets the same CROSS_TENANT denial as for
        a resource of another parish, so a missing id and a foreign id look alike.
        """
        if principal.is_admin:
            return not_found
        return self._denial(principal, None, capability, DenialReason.CROSS_TENANT)

    def _denial(
        self,
        principal: Principal,
        resource_tenant_id: str | None,
        capability: Capability,
        reason: DenialReason,
    ) -> AuthorizationException:
        logger.warning(
            "Access denied: user=%s role=%s tenant=%s capability=%s resource_tenant=%s reason=%s",
            principal.user_id,
            principal.role.value,
            principal.tenant_id,
            capability.value,
            resource_tenant_id,
            reason.value,
        )
        return AuthorizationException(reason=reason.value, capability=capability.value)

    def can(
        self,
        principal: Principal,
        resource_tenant_id: str | None,
        capability: Capability,
    ) -> bool:
        """Return True if allowed (no self-action context)."""
        return self.authorize(principal, resource_tenant_id, capability).allowed
