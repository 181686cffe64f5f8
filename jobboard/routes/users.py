"""
Job Board — User Route Handlers
================================

What:  /v1/users endpoints (list, get, create, update, delete).
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, Response, Security
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.database import get_db_session
from jobboard.routes import API_PREFIX, COMMON_ERROR_RESPONSES
from jobboard.schemas.common import ErrorResponse, Page
from jobboard.schemas.user import UserCreate, UserResponse, UserUpdate
from jobboard.security import verify_api_key
from jobboard.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=API_PREFIX,
    tags=["users"],
    dependencies=[Security(verify_api_key)],
    responses=COMMON_ERROR_RESPONSES,
)

NOT_FOUND = {404: {"description": "User not found", "model": ErrorResponse}}


@router.get(
    "/users",
    response_model=Page[UserResponse],
    summary="List users with pagination",
)
async def list_users(
    response: Response,
    limit: int = Query(default=10, ge=1, le=100, description="Maximum number of items to return"),
    offset: int = Query(default=0, ge=0, description="Offset for pagination"),
    db: AsyncSession = Depends(get_db_session),
) -> Page[UserResponse]:
    result = await user_service.list_users(db, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(result.count)
    return result


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Get a user by id",
)
async def get_user(
    user_id: int = Path(description="Unique ID of the user", examples=[1]),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.get_user(db, user_id)


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid user data", "model": ErrorResponse},
        409: {"description": "Email already registered", "model": ErrorResponse},
    },
    summary="Create a user",
)
async def create_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.create_user(db, body)


@router.put(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        **NOT_FOUND,
        400: {"description": "Invalid user update data", "model": ErrorResponse},
        409: {"description": "Email already registered, or role change for a user who owns jobs or applications", "model": ErrorResponse},
    },
    summary="Update a user",
    description="Partial update: fields left out of the body keep their current value.",
)
async def update_user(
    body: UserUpdate,
    user_id: int = Path(description="Unique ID of the user", examples=[1]),
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.update_user(db, user_id, body)


@router.delete(
    "/users/{user_id}",
    status_code=204,
    response_class=Response,
    responses={
        **NOT_FOUND,
        409: {"description": "User still referenced by jobs or applications", "model": ErrorResponse},
    },
    summary="Delete a user",
)
async def delete_user(
    user_id: int = Path(description="Unique ID of the user", examples=[1]),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await user_service.delete_user(db, user_id)
    return Response(status_code=204)
