"""Principal domain entity (the authenticated identity of a request).

Built once per request from a verified token and the user row, then
passed explicitly to every guarded operation.
"""

from dataclasses import dataclass

from catechesis.domain.enums import Role
from catechesis.domain.exceptions import (
    AdminCannotHaveParishException,
    ParishRequiredException,
)


def validate_role_tenant(role: Role, tenant_id: str | None) -> None:
    """Enforce the role/parish pairing: admin has no parish, every other role has one.

    Raises:
        AdminCannotHaveParishException: admin with a parish.
        ParishRequiredException: non-admin role without a parish.
    """
    if role is Role.ADMIN:
        if tenant_id is not None:
            raise AdminCannotHaveParishException()
    elif not tenant_id:
        raise ParishRequiredException(role.value)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller: user id, role, and parish (None only for admin).

    Validation runs on construction so an inconsistent principal can never
    reach the access guard.
    """

    user_id: str
    role: Role
    tenant_id: str | None = None

    def __post_init__(self) -> None:
        validate_role_tenant(self.role, self.tenant_id)

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
