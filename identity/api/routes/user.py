from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from identity.app.services.authorization import AccessRule, CallerContext, authorize
from identity.app.services.password_hasher import IPasswordHasher
from identity.app.services.unit_of_work import UnitOfWork
from identity.app.use_cases.users import (
    AddRoleUseCase,
    DeleteUserUseCase,
    GetUserByEmailUseCase,
    GetUserByIdUseCase,
    GetUserByUsernameUseCase,
    ListUsersUseCase,
    RemoveRoleUseCase,
    SearchUsersByCompanyUseCase,
    SearchUsersByNameUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    UpdateStatusUseCase,
    UserResponse,
)
from identity.api.utils.auth import get_current_caller, require_admin
from identity.depends import get_password_hasher, get_unit_of_work

router = APIRouter(prefix="/users", tags=["User"])

# Static paths are declared before /{user_id} so they are not parsed as IDs.


@router.get("/me", response_model=UserResponse)
async def get_me(
    caller: CallerContext = Depends(get_current_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current user's own profile"""
    return await GetUserByIdUseCase(uow).execute(caller.user_id)


@router.get("/search/name", response_model=List[UserResponse])
async def search_users_by_name(
    name: str = Query(..., min_length=1),
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Search users by first or last name (admin only)"""
    return await SearchUsersByNameUseCase(uow).execute(name)


@router.get("/search/company", response_model=List[UserResponse])
async def search_users_by_company(
    company: str = Query(..., min_length=1),
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Search users by company name (admin only)"""
    return await SearchUsersByCompanyUseCase(uow).execute(company)


@router.get("/username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await GetUserByUsernameUseCase(uow).execute(username)


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await GetUserByEmailUseCase(uow).execute(email)


@router.get("", response_model=List[UserResponse])
async def list_users(
    user_type: Optional[str] = None,
    status: Optional[str] = None,
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get all users (admin only)

    Optional filters: user_type (INTERNAL/EXTERNAL) or status
    (ACTIVE/INACTIVE/SUSPENDED/PENDING), not both.
    """
    return await ListUsersUseCase(uow).execute(user_type=user_type, status=status)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    caller: CallerContext = Depends(get_current_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Get user by ID (self or admin)"""
    authorize(caller, AccessRule.SELF_OR_ADMIN, user_id)
    return await GetUserByIdUseCase(uow).execute(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    command: UpdateProfileCommand,
    caller: CallerContext = Depends(get_current_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Update user profile (self or admin)

    Raises:
        - 403 Forbidden: Caller is neither the user nor an admin
        - 404 Not Found: User does not exist
        - 409 Conflict: New email already taken
    """
    authorize(caller, AccessRule.SELF_OR_ADMIN, user_id)
    return await UpdateProfileUseCase(uow, password_hasher).execute(user_id, command)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete user (admin only)"""
    await DeleteUserUseCase(uow).execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{user_id}/status", response_model=UserResponse)
async def update_user_status(
    user_id: int,
    status: str = Query(...),
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Update user status (admin only)"""
    return await UpdateStatusUseCase(uow).execute(user_id, status)


@router.post("/{user_id}/roles", response_model=UserResponse)
async def add_role_to_user(
    user_id: int,
    role: str = Query(...),
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Add role to user (admin only); adding a held role is a no-op"""
    return await AddRoleUseCase(uow).execute(user_id, role)


@router.delete("/{user_id}/roles", response_model=UserResponse)
async def remove_role_from_user(
    user_id: int,
    role: str = Query(...),
    _: CallerContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Remove role from user (admin only); removing an absent role is a no-op"""
    return await RemoveRoleUseCase(uow).execute(user_id, role)
