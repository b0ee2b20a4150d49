"""FastAPI application for the policy admin panel."""

import uuid
from contextlib import asynccontextmanager

import structlog

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config.logging import get_logger
from ..config.settings import get_settings
from ..db.database import reset_client
from ..services import get_party_cache
from .auth import require_api_auth
from .exceptions import setup_exception_handlers
from .health import router as health_router
from .routers import admin_router, parties_router, policies_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info(
        "Starting policy admin API",
        environment=settings.environment,
        party_cache_ttl_seconds=settings.party_cache_ttl_seconds,
    )

    if settings.party_cache_warm_on_startup:
        result = await get_party_cache().process_parties_data()
        if result.success:
            logger.info("Party cache warmed", party_count=len(result.data))
        else:
            # Not fatal: the cache retries on the first request
            logger.warning("Party cache warm-up failed", error=result.error)

    yield

    logger.info("Shutting down policy admin API")
    reset_client()
    logger.info("Policy admin API shutdown completed")


async def add_request_id_middleware(request: Request, call_next):
    """Add unique request ID to each request for tracking."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    logger.info(
        "Request started",
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        query_params=str(request.query_params),
        user_agent=request.headers.get("user-agent"),
        remote_addr=request.client.host if request.client else None,
    )

    response = await call_next(request)

    response.headers["X-Request-ID"] = request_id

    logger.info(
        "Request completed",
        request_id=request_id,
        status_code=response.status_code,
        method=request.method,
        path=request.url.path,
    )

    return response


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Policy Admin API",
        description="""
        Administration panel backend for policy and party records.

        ## Features

        * **Policies**: filter by category or party, sort by support or
          opposition, search title and description, cursor pagination
        * **Parties**: cached party list with derived support rates
        * **Admin shell**: login, logout and the guarded party admin layout
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
    )

    app.middleware("http")(add_request_id_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development() else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1", tags=["Health & Status"])

    api_auth = [Depends(require_api_auth)]
    app.include_router(
        policies_router,
        prefix="/api/v1/policies",
        tags=["Policies"],
        dependencies=api_auth,
    )
    app.include_router(
        parties_router,
        prefix="/api/v1/parties",
        tags=["Parties"],
        dependencies=api_auth,
    )

    # Holds the catch-all route, so it must be registered last
    app.include_router(admin_router, tags=["Admin Shell"])

    logger.info("FastAPI application created")
    return app


# Create the app instance
app = create_app()
