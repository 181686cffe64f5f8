"""
Job Board — Application Schemas
================================

Request and response models for /v1/applications.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from jobboard.models.application import ApplicationStatus


class ApplicationCreate(BaseModel):
    """Body of POST /v1/applications."""
    job_seeker_id: int = Field(description="User id of the applying job seeker", examples=[2])
    job_id: int = Field(description="Id of the job applied for", examples=[1])
    cover_letter: Optional[str] = Field(default=None, examples=["I am very excited about this opportunity."])
    resume: Optional[str] = Field(default=None, max_length=1024, examples=["https://example.com/resume.pdf"])
    status: ApplicationStatus = Field(default=ApplicationStatus.PENDING)


class ApplicationUpdate(BaseModel):
    """Body of PUT /v1/applications/{id}. Omitted fields keep their value."""
    cover_letter: Optional[str] = Field(default=None, examples=["Updated cover letter here."])
    resume: Optional[str] = Field(default=None, max_length=1024, examples=["https://example.com/updated_resume.pdf"])
    status: Optional[ApplicationStatus] = Field(default=None, examples=["reviewed"])


class ApplicationResponse(BaseModel):
    """An application as returned by the API."""
    id: int = Field(examples=[1])
    job_seeker_id: int = Field(examples=[2])
    job_id: int = Field(examples=[1])
    cover_letter: Optional[str] = None
    resume: Optional[str] = None
    status: ApplicationStatus = Field(examples=["pending"])
    applied_at: datetime = Field(description="When the application was submitted (UTC)")

    model_config = {"from_attributes": True}
