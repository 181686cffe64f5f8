"""
Job Board — Application SQLAlchemy Model
=========================================

What:  ORM model for the `applications` table.

Lifecycle:
    Created as 'pending'; an employer moves it to 'reviewed', then
    'accepted' or 'rejected'. The API does not enforce transition order.
"""

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobboard.database import Base, UTCDateTime, utcnow


class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Application(Base):
    """A job seeker's application to a job posting."""

    __tablename__ = "applications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    job_seeker_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False
    )
    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("jobs.id"), nullable=False
    )
    cover_letter: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Link to the resume file, not the file itself
    resume: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    status: Mapped[ApplicationStatus] = mapped_column(
        Enum(
            ApplicationStatus,
            name="application_status",
            native_enum=False,
            create_constraint=True,
            length=20,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=ApplicationStatus.PENDING,
    )
    applied_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utcnow
    )

    __table_args__ = (
        Index("idx_applications_job_id", "job_id"),
        Index("idx_applications_job_seeker_id", "job_seeker_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Application(id={self.id}, job_id={self.job_id}, "
            f"job_seeker_id={self.job_seeker_id}, status='{self.status.value}')>"
        )
