"""
Job Board — Job SQLAlchemy Model
=================================

What:  ORM model for the `jobs` table (job postings).
Who:   Used by JobService; referenced by applications.

Constraints:
    - employer_id → users.id (foreign key, enforced by PRAGMA foreign_keys)
    - employment_type is optional; when set it is one of
      full_time | part_time | contract
    - posted_at is fixed at creation; updated_at moves on every change
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.database import Base, UTCDateTime, utcnow


class EmploymentType(str, enum.Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"


class Job(Base):
    """A job posting published by an employer."""

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    employment_type: Mapped[Optional[EmploymentType]] = mapped_column(
        Enum(
            EmploymentType,
            name="employment_type",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda types: [t.value for t in types],
        ),
        nullable=True,
    )
    posted_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        Index("idx_jobs_employer_id", "employer_id"),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}', employer_id={self.employer_id})>"
