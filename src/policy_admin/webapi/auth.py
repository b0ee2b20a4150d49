"""Admin authentication: bearer token or session cookie."""

import hashlib
import hmac
from typing import Optional

from fastapi import HTTPException, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config.logging import get_logger
from ..config.settings import get_settings
from .exceptions import ConfigurationError, LoginRequiredError

logger = get_logger(__name__)

# auto_error=False so page routes can redirect instead of answering 403
bearer_scheme = HTTPBearer(auto_error=False)

_SESSION_SALT = b"policy-admin-session"


def _constant_time_equals(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def session_digest(token: str) -> str:
    """Cookie value for a session opened with ``token``; the token itself never leaves the server."""
    return hmac.new(token.encode("utf-8"), _SESSION_SALT, hashlib.sha256).hexdigest()


def verify_admin_token(token: Optional[str]) -> bool:
    """Check a raw token against the configured admin token."""
    expected = get_settings().admin_auth_token
    if not expected:
        logger.error("Admin auth token not configured")
        return False
    if not token:
        return False
    return _constant_time_equals(token, expected)


def is_authenticated(
    request: Request, credentials: Optional[HTTPAuthorizationCredentials]
) -> bool:
    """Whether the request carries a valid bearer token or session cookie."""
    settings = get_settings()
    expected = settings.admin_auth_token
    if not expected:
        logger.error("Admin auth token not configured")
        return False

    if credentials is not None and _constant_time_equals(
        credentials.credentials, expected
    ):
        return True

    cookie = request.cookies.get(settings.session_cookie_name)
    if cookie and _constant_time_equals(cookie, session_digest(expected)):
        return True

    return False


async def require_admin_page(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> None:
    """
    Guard for admin page routes.

    Raises:
        LoginRequiredError: If the request is not authenticated
    """
    if not is_authenticated(request, credentials):
        raise LoginRequiredError(
            request.url.path, request_id=getattr(request.state, "request_id", None)
        )


async def require_api_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> None:
    """
    Guard for JSON API routes.

    Raises:
        ConfigurationError: If no admin token is configured
        HTTPException: If the request is not authenticated
    """
    if not get_settings().admin_auth_token:
        raise ConfigurationError("admin_auth_token", "ADMIN_AUTH_TOKEN not configured")

    if not is_authenticated(request, credentials):
        logger.warning(
            "Invalid authentication attempt",
            path=request.url.path,
            has_bearer=credentials is not None,
        )
        raise HTTPException(
            status_code=401,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.debug("Authentication successful", path=request.url.path)
