"""User API: thin routes delegating to UserOperations."""

from typing import Annotated

from fastapi import APIRouter, Depends

from catechesis.api.v1.dependencies import CurrentPrincipal, get_user_operations
from catechesis.application.dtos.user import UserCreate
from catechesis.application.use_cases.users import UserOperations
from catechesis.schemas.user import RoleChangeRequest, UserCreateRequest, UserResponse

router = APIRouter()

Operations = Annotated[UserOperations, Depends(get_user_operations)]


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    body: UserCreateRequest,
    principal: CurrentPrincipal,
    operations: Operations,
) -> UserResponse:
    """Create a user (admin only)."""
    user = await operations.create_user(
        principal,
        UserCreate(username=body.username, role=body.role, tenant_id=body.tenant_id),
    )
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    principal: CurrentPrincipal,
    operations: Operations,
) -> UserResponse:
    """Get a user (admin, or parish admin within the parish)."""
    return UserResponse.model_validate(await operations.get_user(principal, user_id))


@router.patch("/{user_id}/role", response_model=UserResponse)
async def change_role(
    user_id: str,
    body: RoleChangeRequest,
    principal: CurrentPrincipal,
    operations: Operations,
) -> UserResponse:
    """Change a user's role and parish."""
    user = await operations.change_role(principal, user_id, body.role, body.tenant_id)
    return UserResponse.model_validate(user)


@router.post("/{user_id}/deactivate", response_model=UserResponse)
async def deactivate_user(
    user_id: str,
    principal: CurrentPrincipal,
    operations: Operations,
) -> UserResponse:
    """Deactivate a user."""
    return UserResponse.model_validate(await operations.deactivate_user(principal, user_id))
