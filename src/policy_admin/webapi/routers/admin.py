"""Admin shell routes: login, logout, guarded party layout and redirects."""

from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse

from ...config.logging import get_logger, log_audit_event
from ...config.settings import get_settings
from ...services import PartyCache, get_party_cache
from ..auth import require_admin_page, session_digest, verify_admin_token
from ..exceptions import LOGIN_PATH, ExternalServiceError, NotFoundError
from ..models.requests import LoginRequest
from ..models.responses import PartySchema, StatusResponse

logger = get_logger(__name__)

router = APIRouter()

DEFAULT_SECTION = "dashboard"


def party_admin_path(party_id: str) -> str:
    return f"/admin/party/{quote(party_id, safe='')}/"


@router.get("/", include_in_schema=False)
async def root_redirect() -> RedirectResponse:
    """The site root always lands on the login view."""
    return RedirectResponse(url=LOGIN_PATH, status_code=307)


@router.get(
    "/admin/login",
    response_model=StatusResponse,
    summary="Login View",
    description="Describe the admin login form",
)
async def login_view(request: Request) -> StatusResponse:
    """Login view."""
    return StatusResponse.create(
        data={
            "view": "login",
            "action": LOGIN_PATH,
            "method": "POST",
            "fields": ["token", "party_id"],
        },
        request_id=getattr(request.state, "request_id", None),
    )


@router.post(
    "/admin/login",
    summary="Log In",
    description="Open an admin session and redirect to the party panel",
    status_code=303,
)
async def login(login_request: LoginRequest, request: Request) -> RedirectResponse:
    """
    Open an admin session.

    - **token**: admin access token
    - **party_id**: party whose panel is opened after login
    """
    request_id = getattr(request.state, "request_id", None)

    if not verify_admin_token(login_request.token):
        log_audit_event(
            "login_failed", party_id=login_request.party_id, request_id=request_id
        )
        raise HTTPException(status_code=401, detail="Invalid authentication token")

    settings = get_settings()
    response = RedirectResponse(
        url=party_admin_path(login_request.party_id), status_code=303
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_digest(login_request.token),
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    log_audit_event("login", party_id=login_request.party_id, request_id=request_id)
    return response


@router.post(
    "/admin/logout",
    summary="Log Out",
    description="Close the admin session",
    status_code=303,
)
async def logout(request: Request) -> RedirectResponse:
    """Clear the session cookie and go back to the login view."""
    settings = get_settings()
    response = RedirectResponse(url=LOGIN_PATH, status_code=303)
    response.delete_cookie(settings.session_cookie_name)
    log_audit_event("logout", request_id=getattr(request.state, "request_id", None))
    return response


@router.get("/admin", include_in_schema=False)
async def admin_redirect() -> RedirectResponse:
    """Bare /admin has no view of its own."""
    return RedirectResponse(url=LOGIN_PATH, status_code=307)


@router.get(
    "/admin/party/{party_id}",
    response_model=StatusResponse,
    summary="Party Admin Layout",
    dependencies=[Depends(require_admin_page)],
)
@router.get(
    "/admin/party/{party_id}/{section:path}",
    response_model=StatusResponse,
    summary="Party Admin Layout Section",
    dependencies=[Depends(require_admin_page)],
)
async def party_admin_layout(
    party_id: str,
    request: Request,
    section: Optional[str] = None,
    party_cache: PartyCache = Depends(get_party_cache),
) -> StatusResponse:
    """Admin layout for one party; requires an authenticated session."""
    request_id = getattr(request.state, "request_id", None)

    result = await party_cache.get_party_by_id(party_id)
    if not result.success:
        raise ExternalServiceError(
            "Firestore", "fetch parties", result.error, request_id=request_id
        )
    if result.data is None:
        raise NotFoundError("Party", party_id, request_id=request_id)

    return StatusResponse.create(
        data={
            "view": "party_admin",
            "party": PartySchema.model_validate(result.data).model_dump(),
            "section": (section or "").strip("/") or DEFAULT_SECTION,
        },
        request_id=request_id,
    )


@router.get("/{full_path:path}", include_in_schema=False)
async def fallback_redirect(full_path: str, request: Request) -> RedirectResponse:
    """Unknown pages go back to the root; unknown API paths stay JSON 404s."""
    if full_path.startswith("api/"):
        raise NotFoundError(
            "Route",
            request.url.path,
            request_id=getattr(request.state, "request_id", None),
        )
    return RedirectResponse(url="/", status_code=307)
