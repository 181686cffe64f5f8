# Routes package init
"""
Job Board — API Routes Package
===============================

Route Inventory:
    - health.py:        GET  /health
    - users.py:         GET/POST /v1/users, GET/PUT/DELETE /v1/users/{id}
    - jobs.py:          GET/POST /v1/jobs, GET/PUT/DELETE /v1/jobs/{id}
    - applications.py:  GET/POST /v1/applications,
                        GET/PUT/DELETE /v1/applications/{id}

Routes are thin: they extract parameters, call a service, and set status
codes and headers. The /v1 routers carry the API-key security dependency.
"""

from jobboard.schemas.common import ErrorResponse

API_PREFIX = "/v1"

# Error responses every /v1 endpoint can produce
COMMON_ERROR_RESPONSES = {
    401: {"description": "Missing or incorrect API key", "model": ErrorResponse},
    500: {"description": "Internal server error", "model": ErrorResponse},
}
