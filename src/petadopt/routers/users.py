"""User endpoints."""

from fastapi import APIRouter, Query

from petadopt.dependencies import Users
from petadopt.errors import resource_not_found
from petadopt.repositories.base import MAX_PAGE_SIZE
from petadopt.schemas.base import SuccessResponse
from petadopt.schemas.user import UserCreate, UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=SuccessResponse[UserResponse], status_code=201)
async def create_user(body: UserCreate, users: Users) -> SuccessResponse[UserResponse]:
    user = await users.create(body)
    return SuccessResponse(
        message=f"User {user.first_name} {user.last_name} created successfully",
        payload=UserResponse.model_validate(user),
    )


@router.get("", response_model=SuccessResponse[list[UserResponse]], status_code=200)
async def list_users(
    users: Users,
    skip: int = Query(0, ge=0),
    limit: int = Query(MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> SuccessResponse[list[UserResponse]]:
    items = await users.list_all(skip, limit)
    return SuccessResponse(
        message="Users fetched successfully",
        payload=[UserResponse.model_validate(user) for user in items],
    )


@router.get("/{user_id}", response_model=SuccessResponse[UserResponse], status_code=200)
async def get_user(user_id: str, users: Users) -> SuccessResponse[UserResponse]:
    user = await users.get_by_id(user_id)
    if user is None:
        raise resource_not_found("User", user_id, {"id": user_id})
    return SuccessResponse(
        message=f"User {user.email} fetched successfully",
        payload=UserResponse.model_validate(user),
    )


@router.put("/{user_id}", response_model=SuccessResponse[UserResponse], status_code=200)
async def update_user(
    user_id: str, body: UserUpdate, users: Users
) -> SuccessResponse[UserResponse]:
    user = await users.update(user_id, body)
    if user is None:
        raise resource_not_found("User", user_id, {"id": user_id})
    return SuccessResponse(
        message=f"User {user.first_name} {user.last_name} updated successfully",
        payload=UserResponse.model_validate(user),
    )


@router.delete("/{user_id}", response_model=SuccessResponse[UserResponse], status_code=200)
async def delete_user(user_id: str, users: Users) -> SuccessResponse[UserResponse]:
    user = await users.delete(user_id)
    if user is None:
        raise resource_not_found("User", user_id, {"id": user_id})
    return SuccessResponse(
        message=f"User {user.first_name} {user.last_name} deleted successfully",
        payload=UserResponse.model_validate(user),
    )
