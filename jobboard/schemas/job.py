"""
Job Board — Job Schemas
========================

Request and response models for /v1/jobs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from jobboard.models.job import EmploymentType


class JobCreate(BaseModel):
    """Body of POST /v1/jobs."""
    employer_id: int = Field(description="User id of the posting employer", examples=[1])
    title: str = Field(min_length=1, max_length=255, examples=["Software Engineer"])
    description: str = Field(
        min_length=1,
        examples=["Responsible for developing and maintaining software applications."],
    )
    location: str = Field(min_length=1, max_length=255, examples=["San Francisco, CA"])
    salary: Optional[str] = Field(default=None, max_length=255, examples=["$120,000 - $150,000"])
    employment_type: Optional[EmploymentType] = Field(default=None, examples=["full_time"])


class JobUpdate(BaseModel):
    """
    Body of PUT /v1/jobs/{id}.

    Omitted fields keep their value; an explicit null clears the optional
    fields (salary, employment_type). The employer cannot be changed.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=255, examples=["Senior Software Engineer"])
    description: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1, max_length=255, examples=["New York, NY"])
    salary: Optional[str] = Field(default=None, max_length=255, examples=["$130,000 - $160,000"])
    employment_type: Optional[EmploymentType] = Field(default=None, examples=["contract"])


class JobResponse(BaseModel):
    """A job posting as returned by the API."""
    id: int = Field(examples=[1])
    employer_id: int = Field(examples=[1])
    title: str
    description: str
    location: str
    salary: Optional[str] = None
    employment_type: Optional[EmploymentType] = None
    posted_at: datetime = Field(description="When the job was posted (UTC)")
    updated_at: datetime = Field(description="Last change to the posting (UTC)")

    model_config = {"from_attributes": True}
