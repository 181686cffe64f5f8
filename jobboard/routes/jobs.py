"""
Job Board — Job Route Handlers
===============================

What:  /v1/jobs endpoints for job postings.
Who:   Employers publish and edit postings; job seekers browse them.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, Security
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.database import get_db_session
from jobboard.routes import API_PREFIX, COMMON_ERROR_RESPONSES
from jobboard.schemas.common import ErrorResponse, Page
from jobboard.schemas.job import JobCreate, JobResponse, JobUpdate
from jobboard.security import verify_api_key
from jobboard.services.job_service import job_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=API_PREFIX,
    tags=["jobs"],
    dependencies=[Security(verify_api_key)],
    responses=COMMON_ERROR_RESPONSES,
)

JobId = Annotated[int, Path(description="Unique ID of the job", examples=[1])]


@router.get(
    "/jobs",
    response_model=Page[JobResponse],
    summary="List jobs with pagination",
    description="Lists job postings ordered by id. The total is also sent as X-Total-Count.",
)
async def list_jobs(
    response: Response,
    limit: int = Query(default=10, ge=1, le=100, description="Maximum number of items to return"),
    offset: int = Query(default=0, ge=0, description="Offset for pagination"),
    db: AsyncSession = Depends(get_db_session),
) -> Page[JobResponse]:
    result = await job_service.list_jobs(db, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(result.count)
    return result


@router.get(
    "/jobs/{job_id}",
    response_model=JobResponse,
    responses={404: {"description": "Job not found", "model": ErrorResponse}},
    summary="Get a job by id",
)
async def get_job(
    job_id: JobId,
    db: AsyncSession = Depends(get_db_session),
) -> JobResponse:
    return await job_service.get_job(db, job_id)


@router.post(
    "/jobs",
    status_code=201,
    response_model=JobResponse,
    responses={
        400: {"description": "Invalid job data or employer_id is not an employer", "model": ErrorResponse},
    },
    summary="Create a job",
)
async def create_job(
    body: JobCreate,
    db: AsyncSession = Depends(get_db_session),
) -> JobResponse:
    return await job_service.create_job(db, body)


@router.put(
    "/jobs/{job_id}",
    response_model=JobResponse,
    responses={
        400: {"description": "Invalid job update data", "model": ErrorResponse},
        404: {"description": "Job not found", "model": ErrorResponse},
    },
    summary="Update a job",
    description=(
        "Partial update: omitted fields keep their value; null clears salary "
        "or employment_type. updated_at is refreshed."
    ),
)
async def update_job(
    body: JobUpdate,
    job_id: JobId,
    db: AsyncSession = Depends(get_db_session),
) -> JobResponse:
    return await job_service.update_job(db, job_id, body)


@router.delete(
    "/jobs/{job_id}",
    status_code=204,
    response_class=Response,
    responses={
        404: {"description": "Job not found", "model": ErrorResponse},
        409: {"description": "Job still has applications", "model": ErrorResponse},
    },
    summary="Delete a job",
)
async def delete_job(
    job_id: JobId,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await job_service.delete_job(db, job_id)
    return Response(status_code=204)
