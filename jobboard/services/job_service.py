"""
Job Board — Job Service
========================

What:  CRUD for job postings.
Rules:
    - employer_id must reference an existing user whose role is 'employer'
    - posted_at is set once; updated_at moves on every update
    - the employer of a posting cannot be changed
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.database import utcnow
from jobboard.exceptions import ValidationError
from jobboard.models.job import Job
from jobboard.models.user import User, UserRole
from jobboard.schemas.common import Page
from jobboard.schemas.job import JobCreate, JobResponse, JobUpdate
from jobboard.services.base import BaseService, page_number

logger = logging.getLogger(__name__)

# Columns that may not be set to null through an update
REQUIRED_FIELDS = {"title", "description", "location"}


class JobService(BaseService[Job]):
    """Business logic for /v1/jobs."""

    model = Job
    resource = "job"

    async def list_jobs(
        self, db: AsyncSession, limit: int = 10, offset: int = 0
    ) -> Page[JobResponse]:
        with self.database_errors("list jobs"):
            jobs, total = await self._fetch_page(db, limit, offset)
        return Page[JobResponse](
            page=page_number(limit, offset),
            count=total,
            items=[JobResponse.model_validate(j) for j in jobs],
        )

    async def get_job(self, db: AsyncSession, job_id: int) -> JobResponse:
        with self.database_errors("retrieve the job", job_id=job_id):
            job = await self._get_or_404(db, job_id)
        return JobResponse.model_validate(job)

    async def create_job(self, db: AsyncSession, data: JobCreate) -> JobResponse:
        with self.database_errors("create job"):
            employer = await db.get(User, data.employer_id)
            if employer is None or employer.role != UserRole.EMPLOYER:
                raise ValidationError(
                    message="employer_id must reference an existing user with role 'employer'",
                    field="employer_id",
                )
            job = Job(**data.model_dump())
            db.add(job)
            await db.flush()
        logger.info("Job created: %s by employer %s", job.id, job.employer_id)
        return JobResponse.model_validate(job)

    async def update_job(
        self, db: AsyncSession, job_id: int, data: JobUpdate
    ) -> JobResponse:
        """
        Apply a partial update.

        An explicit null clears salary or employment_type; it is rejected for
        title, description and location.
        """
        changes = data.model_dump(exclude_unset=True)
        nulled = sorted(f for f in REQUIRED_FIELDS if f in changes and changes[f] is None)
        if nulled:
            raise ValidationError(
                message=f"{', '.join(nulled)} cannot be null",
                field=nulled[0],
            )
        with self.database_errors("update job", job_id=job_id):
            job = await self._get_or_404(db, job_id)
            for field, value in changes.items():
                setattr(job, field, value)
            job.updated_at = utcnow()
            await db.flush()
        logger.info("Job %s updated: %s", job_id, sorted(changes))
        return JobResponse.model_validate(job)

    async def delete_job(self, db: AsyncSession, job_id: int) -> None:
        await self._delete(db, job_id)


job_service = JobService()
