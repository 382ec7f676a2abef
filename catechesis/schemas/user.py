"""User API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from catechesis.domain.enums import Role


class UserCreateRequest(BaseModel):
    """Request body for creating a user. admin has no parish; other roles require one."""

    username: str = Field(..., min_length=1, max_length=128)
    role: Role
    tenant_id: str | None = None


class RoleChangeRequest(BaseModel):
    """Request body for PATCH /users/{id}/role (role and parish change together)."""

    role: Role
    tenant_id: str | None = None


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    role: Role
    tenant_id: str | None
    is_active: bool
