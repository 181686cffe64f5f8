"""
Job Board — User Service
=========================

What:  CRUD for users.
Rules:
    - email is unique (checked up front, and again by the UNIQUE constraint)
    - passwords are hashed before they reach the database
    - a user still referenced by jobs or applications cannot be deleted
    - a user who owns jobs or applications keeps their role
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.database import utcnow
from jobboard.exceptions import ConflictError
from jobboard.models.application import Application
from jobboard.models.job import Job
from jobboard.models.user import User
from jobboard.schemas.common import Page
from jobboard.schemas.user import UserCreate, UserResponse, UserUpdate
from jobboard.security import hash_password
from jobboard.services.base import BaseService, page_number

logger = logging.getLogger(__name__)


class UserService(BaseService[User]):
    """Business logic for /v1/users."""

    model = User
    resource = "user"

    async def list_users(
        self, db: AsyncSession, limit: int = 10, offset: int = 0
    ) -> Page[UserResponse]:
        with self.database_errors("list users"):
            users, total = await self._fetch_page(db, limit, offset)
        return Page[UserResponse](
            page=page_number(limit, offset),
            count=total,
            items=[UserResponse.model_validate(u) for u in users],
        )

    async def get_user(self, db: AsyncSession, user_id: int) -> UserResponse:
        with self.database_errors("retrieve the user", user_id=user_id):
            user = await self._get_or_404(db, user_id)
        return UserResponse.model_validate(user)

    async def create_user(self, db: AsyncSession, data: UserCreate) -> UserResponse:
        conflict = f"A user with email '{data.email}' already exists"
        with self.database_errors("create user", conflict_message=conflict):
            await self._ensure_email_free(db, data.email)
            user = User(
                name=data.name,
                email=data.email,
                password=hash_password(data.password),
                role=data.role,
            )
            db.add(user)
            await db.flush()
        logger.info("User created: %s (role=%s)", user.id, user.role.value)
        return UserResponse.model_validate(user)

    async def update_user(
        self, db: AsyncSession, user_id: int, data: UserUpdate
    ) -> UserResponse:
        """
        Apply a partial update. Fields absent from the request body are left
        untouched; the password is re-hashed when present.
        """
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        conflict = f"A user with email '{changes.get('email')}' already exists"
        with self.database_errors("update user", conflict_message=conflict, user_id=user_id):
            user = await self._get_or_404(db, user_id)
            if "email" in changes and changes["email"] != user.email:
                await self._ensure_email_free(db, changes["email"])
            if "role" in changes and changes["role"] != user.role:
                await self._ensure_role_change_allowed(db, user)
            if "password" in changes:
                changes["password"] = hash_password(changes["password"])
            for field, value in changes.items():
                setattr(user, field, value)
            user.updated_at = utcnow()
            await db.flush()
        logger.info("User %s updated: %s", user_id, sorted(changes))
        return UserResponse.model_validate(user)

    async def delete_user(self, db: AsyncSession, user_id: int) -> None:
        await self._delete(db, user_id)

    async def _ensure_role_change_allowed(self, db: AsyncSession, user: User) -> None:
        """Jobs need an employer and applications a job seeker; owners keep their role."""
        jobs = await db.execute(select(func.count(Job.id)).where(Job.employer_id == user.id))
        applications = await db.execute(
            select(func.count(Application.id)).where(Application.job_seeker_id == user.id)
        )
        if jobs.scalar() or applications.scalar():
            raise ConflictError(
                message=(
                    f"The role of user with ID '{user.id}' cannot change while they "
                    "own job postings or applications"
                ),
                context={"field": "role"},
            )

    async def _ensure_email_free(self, db: AsyncSession, email: str) -> None:
        result = await db.execute(select(User.id).where(User.email == email))
        if result.scalar_one_or_none() is not None:
            raise ConflictError(
                message=f"A user with email '{email}' already exists",
                context={"field": "email"},
            )


user_service = UserService()
