# Middleware package init
"""
Job Board — Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID for logs and error bodies
    2. Logging: method, path, status and duration, tagged with the request ID
    3. CORS: FastAPI's CORSMiddleware (answers preflight requests)

The API-key check is not middleware: it is a security dependency on the
/v1 routers so it shows up in the OpenAPI document.
"""
