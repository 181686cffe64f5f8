"""
Job Board — Shared Response Schemas
====================================

What:  Pagination wrapper, error body and health payload used by every router.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    What:  Offset-paginated list response.
    How:   page = offset // limit + 1; count is the total number of rows,
           independent of limit/offset.

    Example:
        {"page": 2, "count": 37, "items": [...]}
    """
    page: int = Field(description="1-based page number derived from offset and limit", examples=[1])
    count: int = Field(description="Total number of items in the collection", examples=[37])
    items: List[T] = Field(description="Items on this page")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code", examples=["not_found"])
    message: str = Field(description="Human-readable error description", examples=["job with ID '1' was not found"])
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
