"""
Job Board Backend — User Service Tests
=======================================

What:  UserService against a real SQLite file (one per test).

What we test:
    ✅ Create stores a hash, never the plain password
    ✅ Duplicate email raises ConflictError (create and update)
    ✅ Partial update leaves omitted fields alone and moves updated_at
    ✅ Missing users raise NotFoundError
    ✅ Offset pagination: page number and total count
    ✅ Deleting a user that still owns a job raises ConflictError
    ✅ Users who own jobs or applications cannot change role
"""

import pytest
from sqlalchemy import select

from jobboard.exceptions import ConflictError, NotFoundError
from jobboard.models.user import User, UserRole
from jobboard.schemas.application import ApplicationCreate
from jobboard.schemas.user import UserCreate, UserUpdate
from jobboard.security import verify_password
from jobboard.services.application_service import application_service
from jobboard.services.user_service import user_service


def _user(n: int, **kwargs) -> UserCreate:
    return UserCreate(name=f"User {n}", email=f"user{n}@example.com", password="pw", **kwargs)


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_defaults_to_job_seeker(self, db_session):
        created = await user_service.create_user(db_session, _user(1))
        assert created.id is not None
        assert created.role == UserRole.JOB_SEEKER
        assert created.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, db_session):
        created = await user_service.create_user(db_session, _user(1))
        row = (await db_session.execute(select(User).where(User.id == created.id))).scalar_one()
        assert row.password != "pw"
        assert verify_password(row.password, "pw")
        assert "password" not in created.model_dump()

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, db_session):
        await user_service.create_user(db_session, _user(1))
        with pytest.raises(ConflictError, match="user1@example.com"):
            await user_service.create_user(db_session, _user(1, role=UserRole.EMPLOYER))


class TestGetUser:

    @pytest.mark.asyncio
    async def test_get_existing(self, db_session, job_seeker):
        fetched = await user_service.get_user(db_session, job_seeker.id)
        assert fetched.email == "john.doe@example.com"

    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError, match="user with ID '999' was not found"):
            await user_service.get_user(db_session, 999)


class TestListUsers:

    @pytest.mark.asyncio
    async def test_empty(self, db_session):
        page = await user_service.list_users(db_session)
        assert page.page == 1
        assert page.count == 0
        assert page.items == []

    @pytest.mark.asyncio
    async def test_offset_pagination(self, db_session):
        for n in range(5):
            await user_service.create_user(db_session, _user(n))

        page = await user_service.list_users(db_session, limit=2, offset=2)
        assert page.page == 2
        assert page.count == 5
        assert [u.email for u in page.items] == ["user2@example.com", "user3@example.com"]

    @pytest.mark.asyncio
    async def test_offset_past_end(self, db_session):
        await user_service.create_user(db_session, _user(1))
        page = await user_service.list_users(db_session, limit=10, offset=20)
        assert page.page == 3
        assert page.count == 1
        assert page.items == []


class TestUpdateUser:

    @pytest.mark.asyncio
    async def test_partial_update(self, db_session, job_seeker):
        updated = await user_service.update_user(
            db_session, job_seeker.id, UserUpdate(name="Jane Doe")
        )
        assert updated.name == "Jane Doe"
        assert updated.email == job_seeker.email
        assert updated.role == job_seeker.role
        assert updated.updated_at >= job_seeker.updated_at

    @pytest.mark.asyncio
    async def test_password_change_is_rehashed(self, db_session, job_seeker):
        await user_service.update_user(db_session, job_seeker.id, UserUpdate(password="new-pw"))
        row = await db_session.get(User, job_seeker.id)
        assert verify_password(row.password, "new-pw")

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user(self, db_session, job_seeker, employer):
        with pytest.raises(ConflictError):
            await user_service.update_user(
                db_session, job_seeker.id, UserUpdate(email=employer.email)
            )

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_allowed(self, db_session, job_seeker):
        updated = await user_service.update_user(
            db_session, job_seeker.id, UserUpdate(email=job_seeker.email, name="Same Mail")
        )
        assert updated.name == "Same Mail"

    @pytest.mark.asyncio
    async def test_missing_user(self, db_session):
        with pytest.raises(NotFoundError):
            await user_service.update_user(db_session, 42, UserUpdate(name="Nobody"))


class TestDeleteUser:

    @pytest.mark.asyncio
    async def test_delete(self, db_session, job_seeker):
        await user_service.delete_user(db_session, job_seeker.id)
        with pytest.raises(NotFoundError):
            await user_service.get_user(db_session, job_seeker.id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, db_session):
        with pytest.raises(NotFoundError):
            await user_service.delete_user(db_session, 7)

    @pytest.mark.asyncio
    async def test_employer_with_jobs_cannot_be_deleted(self, db_session, employer, job):
        with pytest.raises(ConflictError, match="still referenced"):
            await user_service.delete_user(db_session, employer.id)


class TestRoleChanges:

    @pytest.mark.asyncio
    async def test_role_change_without_ownership(self, db_session, job_seeker):
        updated = await user_service.update_user(
            db_session, job_seeker.id, UserUpdate(role=UserRole.EMPLOYER)
        )
        assert updated.role == UserRole.EMPLOYER

    @pytest.mark.asyncio
    async def test_employer_with_jobs_keeps_role(self, db_session, employer, job):
        with pytest.raises(ConflictError, match="cannot change"):
            await user_service.update_user(
                db_session, employer.id, UserUpdate(role=UserRole.JOB_SEEKER)
            )
        row = await db_session.get(User, employer.id)
        assert row.role == UserRole.EMPLOYER

    @pytest.mark.asyncio
    async def test_job_seeker_with_applications_keeps_role(self, db_session, job, job_seeker):
        await application_service.create_application(
            db_session, ApplicationCreate(job_seeker_id=job_seeker.id, job_id=job.id)
        )
        with pytest.raises(ConflictError):
            await user_service.update_user(
                db_session, job_seeker.id, UserUpdate(role=UserRole.EMPLOYER)
            )

    @pytest.mark.asyncio
    async def test_same_role_with_jobs_is_allowed(self, db_session, employer, job):
        updated = await user_service.update_user(
            db_session, employer.id, UserUpdate(role=UserRole.EMPLOYER, name="Acme Talent")
        )
        assert updated.name == "Acme Talent"
