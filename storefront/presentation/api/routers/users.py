"""API router for user management."""

from typing import List, Literal, Optional, Union

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic.alias_generators import to_snake

from ....core.config import Settings
from ....core.dependencies import get_settings, get_user_service
from ....domain.models import ApiResponse, CreateUserDto, PaginationParams, UpdateUserDto
from ....services.user_service import USER_NOT_FOUND, UserService
from ..responses import with_status
from ..schemas.common import ApiEnvelope, PaginatedSchema
from ..schemas.user_schemas import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter(prefix="/api/users", tags=["users"])

UserEnvelope = ApiEnvelope[UserResponse]
UserListEnvelope = Union[ApiEnvelope[PaginatedSchema[UserResponse]], ApiEnvelope[List[UserResponse]]]


@router.get("", response_model=UserListEnvelope, response_model_exclude_none=True)
async def list_users(
    response: Response,
    search: Optional[str] = None,
    role: Optional[str] = None,
    page: int = 1,
    limit: Optional[int] = None,
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_order: Optional[Literal["asc", "desc"]] = Query(default=None, alias="sortOrder"),
    user_service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
) -> ApiResponse:
    """Search by text, filter by role, or page through every user."""
    if search:
        return with_status(response, await user_service.search_users(search))
    if role:
        return with_status(response, await user_service.get_users_by_role(role))

    params = PaginationParams(
        page=page,
        limit=limit or settings.default_page_size,
        sort_by=to_snake(sort_by or settings.default_sort_by),
        sort_order=sort_order or settings.default_sort_order,
    )
    return with_status(response, await user_service.get_all_users(params))


@router.post("", response_model=UserEnvelope, response_model_exclude_none=True)
async def create_user(
    payload: UserCreateRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse:
    result = await user_service.create_user(
        CreateUserDto(email=payload.email, name=payload.name, role=payload.role)
    )
    return with_status(response, result, success_status=status.HTTP_201_CREATED)


@router.get("/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True)
async def get_user(
    user_id: str,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse:
    result = await user_service.get_user_by_id(user_id)
    return with_status(response, result, failure_status=status.HTTP_404_NOT_FOUND)


@router.put("/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True)
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse:
    dto = UpdateUserDto(**payload.model_dump(exclude_unset=True))
    result = await user_service.update_user(user_id, dto)
    return with_status(response, result, not_found_error=USER_NOT_FOUND)


@router.delete("/{user_id}", response_model=ApiEnvelope[bool], response_model_exclude_none=True)
async def delete_user(
    user_id: str,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse:
    result = await user_service.delete_user(user_id)
    return with_status(response, result, not_found_error=USER_NOT_FOUND)


@router.post("/{user_id}/activate", response_model=UserEnvelope, response_model_exclude_none=True)
async def activate_user(
    user_id: str,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse:
    result = await user_service.activate_user(user_id)
    return with_status(response, result, not_found_error=USER_NOT_FOUND)


@router.post("/{user_id}/deactivate", response_model=UserEnvelope, response_model_exclude_none=True)
async def deactivate_user(
    user_id: str,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse:
    result = await user_service.deactivate_user(user_id)
    return with_status(response, result, not_found_error=USER_NOT_FOUND)
