"""
Job Board — User Schemas
=========================

Request and response models for /v1/users. The password is write-only:
it is accepted on create/update and never serialized back.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from jobboard.models.user import UserRole

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserCreate(BaseModel):
    """Body of POST /v1/users."""
    name: str = Field(min_length=1, max_length=255, description="Full name of the user", examples=["John Doe"])
    email: str = Field(
        max_length=255,
        pattern=EMAIL_PATTERN,
        description="Email address; unique across users",
        examples=["john.doe@example.com"],
    )
    password: str = Field(min_length=1, max_length=255, description="Password; stored hashed")
    role: UserRole = Field(default=UserRole.JOB_SEEKER, description="job_seeker or employer")


class UserUpdate(BaseModel):
    """Body of PUT /v1/users/{id}. Omitted fields keep their current value."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255, examples=["Jane Doe"])
    email: Optional[str] = Field(
        default=None, max_length=255, pattern=EMAIL_PATTERN, examples=["jane.doe@example.com"]
    )
    password: Optional[str] = Field(default=None, min_length=1, max_length=255)
    role: Optional[UserRole] = Field(default=None, examples=["employer"])


class UserResponse(BaseModel):
    """A user as returned by the API."""
    id: int = Field(examples=[1])
    name: str = Field(examples=["John Doe"])
    email: str = Field(examples=["john.doe@example.com"])
    role: UserRole = Field(examples=["job_seeker"])
    created_at: datetime = Field(description="When the user registered (UTC)")
    updated_at: datetime = Field(description="Last profile update (UTC)")

    model_config = {"from_attributes": True}
