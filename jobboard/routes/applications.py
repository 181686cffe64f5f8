"""
Job Board — Application Route Handlers
=======================================

What:  /v1/applications endpoints.
Who:   Job seekers apply to postings; employers move applications through
       pending → reviewed → accepted | rejected.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, Security
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.database import get_db_session
from jobboard.routes import API_PREFIX, COMMON_ERROR_RESPONSES
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
)
from jobboard.schemas.common import ErrorResponse, Page
from jobboard.security import verify_api_key
from jobboard.services.application_service import application_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=API_PREFIX,
    tags=["applications"],
    dependencies=[Security(verify_api_key)],
    responses=COMMON_ERROR_RESPONSES,
)

ApplicationId = Annotated[int, Path(description="Unique ID of the application", examples=[1])]
NOT_FOUND = {404: {"description": "Application not found", "model": ErrorResponse}}


@router.get(
    "/applications",
    response_model=Page[ApplicationResponse],
    summary="List applications with pagination",
)
async def list_applications(
    response: Response,
    limit: int = Query(default=10, ge=1, le=100, description="Maximum number of items to return"),
    offset: int = Query(default=0, ge=0, description="Offset for pagination"),
    db: AsyncSession = Depends(get_db_session),
) -> Page[ApplicationResponse]:
    result = await application_service.list_applications(db, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(result.count)
    return result


@router.get(
    "/applications/{application_id}",
    response_model=ApplicationResponse,
    responses=NOT_FOUND,
    summary="Get an application by id",
)
async def get_application(
    application_id: ApplicationId,
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    return await application_service.get_application(db, application_id)


@router.post(
    "/applications",
    status_code=201,
    response_model=ApplicationResponse,
    responses={400: {"description": "Invalid application data", "model": ErrorResponse}},
    summary="Submit an application",
)
async def create_application(
    body: ApplicationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    return await application_service.create_application(db, body)


@router.put(
    "/applications/{application_id}",
    response_model=ApplicationResponse,
    responses={
        **NOT_FOUND,
        400: {"description": "Invalid application update data", "model": ErrorResponse},
    },
    summary="Update an application",
)
async def update_application(
    body: ApplicationUpdate,
    application_id: ApplicationId,
    db: AsyncSession = Depends(get_db_session),
) -> ApplicationResponse:
    return await application_service.update_application(db, application_id, body)


@router.delete(
    "/applications/{application_id}",
    status_code=204,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Withdraw an application",
)
async def delete_application(
    application_id: ApplicationId,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await application_service.delete_application(db, application_id)
    return Response(status_code=204)
