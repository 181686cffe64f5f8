"""
Job Board — User SQLAlchemy Model
==================================

What:  ORM model for the `users` table.
Who:   Used by UserService for CRUD and referenced by jobs and applications.

Table Design:
    - INTEGER primary key (SQLite rowid alias)
    - email is UNIQUE; duplicates surface as IntegrityError → 409
    - password holds a salted hash, never the plain value
    - role is stored as text with a CHECK constraint (job_seeker | employer)
"""

import enum
from datetime import datetime

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.database import Base, UTCDateTime, utcnow


class UserRole(str, enum.Enum):
    JOB_SEEKER = "job_seeker"
    EMPLOYER = "employer"


class User(Base):
    """A registered account: either a job seeker or an employer."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(
            UserRole,
            name="user_role",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=UserRole.JOB_SEEKER,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role.value}')>"
