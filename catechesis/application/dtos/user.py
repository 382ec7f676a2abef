"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass

from catechesis.domain.enums import Role


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, etc.). No credentials."""

    id: str
    username: str
    role: Role
    tenant_id: str | None
    is_active: bool


@dataclass(frozen=True)
class UserCreate:
    """Input for creating a user; role/parish pairing is validated by the use case."""

    username: str
    role: Role
    tenant_id: str | None = None
