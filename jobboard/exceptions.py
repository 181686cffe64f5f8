"""
Job Board — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the error cases the API reports.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into JSON error
       responses with the matching HTTP status code.
Who:   Raised by services and the API-key dependency; caught by global handlers.

Exception Hierarchy:
    JobBoardError (base)
    ├── ValidationError     → 400 Bad Request
    ├── UnauthorizedError   → 401 Unauthorized
    ├── NotFoundError       → 404 Not Found
    ├── ConflictError       → 409 Conflict
    └── DatabaseError       → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class JobBoardError(Exception):
    """
    Base exception for all Job Board application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(JobBoardError):
    """
    Raised when client input fails a business rule.

    When:    Referenced user does not exist or has the wrong role, referenced
             job does not exist, malformed request body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "employer_id must reference a user with role 'employer'",
            "details": {"field": "employer_id"}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(JobBoardError):
    """
    Raised when the X-API-Key header is missing or wrong.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Missing API Key",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(JobBoardError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /v1/<resource>/{id} with an unknown id.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class ConflictError(JobBoardError):
    """
    Raised when a write collides with existing data.

    When:    Duplicate user email; deleting a row other rows still reference.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "The request conflicts with existing data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(JobBoardError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the context
    (original exception type, ids) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
