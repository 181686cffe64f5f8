"""
Job Board — Application Service
================================

What:  CRUD for job applications.
Rules:
    - job_seeker_id must reference a user whose role is 'job_seeker'
    - job_id must reference an existing job
    - new applications default to status 'pending'
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.exceptions import ValidationError
from jobboard.models.application import Application
from jobboard.models.job import Job
from jobboard.models.user import User, UserRole
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
)
from jobboard.schemas.common import Page
from jobboard.services.base import BaseService, page_number

logger = logging.getLogger(__name__)


class ApplicationService(BaseService[Application]):
    """Business logic for /v1/applications."""

    model = Application
    resource = "application"

    async def list_applications(
        self, db: AsyncSession, limit: int = 10, offset: int = 0
    ) -> Page[ApplicationResponse]:
        with self.database_errors("list applications"):
            applications, total = await self._fetch_page(db, limit, offset)
        return Page[ApplicationResponse](
            page=page_number(limit, offset),
            count=total,
            items=[ApplicationResponse.model_validate(a) for a in applications],
        )

    async def get_application(
        self, db: AsyncSession, application_id: int
    ) -> ApplicationResponse:
        with self.database_errors("retrieve the application", application_id=application_id):
            application = await self._get_or_404(db, application_id)
        return ApplicationResponse.model_validate(application)

    async def create_application(
        self, db: AsyncSession, data: ApplicationCreate
    ) -> ApplicationResponse:
        with self.database_errors("create application"):
            seeker = await db.get(User, data.job_seeker_id)
            if seeker is None or seeker.role != UserRole.JOB_SEEKER:
                raise ValidationError(
                    message="job_seeker_id must reference an existing user with role 'job_seeker'",
                    field="job_seeker_id",
                )
            if await db.get(Job, data.job_id) is None:
                raise ValidationError(
                    message="job_id must reference an existing job",
                    field="job_id",
                )
            application = Application(**data.model_dump())
            db.add(application)
            await db.flush()
        logger.info(
            "Application created: %s (job=%s, seeker=%s)",
            application.id, application.job_id, application.job_seeker_id,
        )
        return ApplicationResponse.model_validate(application)

    async def update_application(
        self, db: AsyncSession, application_id: int, data: ApplicationUpdate
    ) -> ApplicationResponse:
        """
        Apply a partial update. An explicit null clears cover_letter or resume;
        a null status is ignored.
        """
        changes = data.model_dump(exclude_unset=True)
        if changes.get("status", ...) is None:
            del changes["status"]
        with self.database_errors("update application", application_id=application_id):
            application = await self._get_or_404(db, application_id)
            for field, value in changes.items():
                setattr(application, field, value)
            await db.flush()
        logger.info("Application %s updated: %s", application_id, sorted(changes))
        return ApplicationResponse.model_validate(application)

    async def delete_application(self, db: AsyncSession, application_id: int) -> None:
        await self._delete(db, application_id)


application_service = ApplicationService()
