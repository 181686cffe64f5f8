"""
Job Board — Security Helpers
=============================

What:  API-key check for the /v1 routes and password hashing for users.

API key (X-API-Key header):
    Declared with FastAPI's APIKeyHeader so the scheme is published in the
    OpenAPI document. Behaviour follows Settings.api_key_mode:
        off      no check
        log      missing/invalid keys are logged, the request goes through
        require  missing/invalid keys are rejected with 401

Passwords:
    Stored as salted hashes produced by werkzeug.security; plain passwords
    are never persisted or returned.
"""

import logging
import secrets
from typing import Optional

from fastapi import Request, Security
from fastapi.security import APIKeyHeader
from werkzeug.security import check_password_hash, generate_password_hash

from jobboard.config import Settings
from jobboard.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-Key"

api_key_header = APIKeyHeader(
    name=API_KEY_HEADER,
    auto_error=False,
    description="API key; enforced when API_KEY_MODE=require",
)


async def verify_api_key(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
) -> Optional[str]:
    """
    Verify the X-API-Key header against the configured key.

    Returns:
        The accepted key, or None when the check is off or only logging.

    Raises:
        UnauthorizedError: Key missing or wrong while API_KEY_MODE=require.
    """
    settings: Settings = request.app.state.settings
    mode = settings.api_key_mode
    if mode == "off":
        return None

    if api_key is None:
        if mode == "log":
            logger.debug("API key missing in request to %s", request.url.path)
            return None
        logger.info("Rejected request to %s: API key missing", request.url.path)
        raise UnauthorizedError(message="Missing API Key")

    expected = settings.api_key
    if not expected or not secrets.compare_digest(api_key.encode(), expected.encode()):
        if mode == "log":
            logger.debug("Incorrect API key provided for %s", request.url.path)
            return None
        logger.warning("Rejected request to %s: incorrect API key", request.url.path)
        raise UnauthorizedError(message="Incorrect API Key")

    return api_key


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)
