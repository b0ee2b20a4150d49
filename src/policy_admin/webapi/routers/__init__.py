"""API routers for the policy admin service."""

from .admin import router as admin_router
from .parties import router as parties_router
from .policies import router as policies_router

__all__ = ["admin_router", "parties_router", "policies_router"]
