"""
Job Board — ORM Models
=======================

Importing this package registers every table on `Base.metadata`.

Tables:
    users         Job seekers and employers
    jobs          Job postings owned by an employer
    applications  A job seeker's application to a job
"""

from jobboard.models.user import User, UserRole
from jobboard.models.job import Job, EmploymentType
from jobboard.models.application import Application, ApplicationStatus

__all__ = [
    "User",
    "UserRole",
    "Job",
    "EmploymentType",
    "Application",
    "ApplicationStatus",
]
