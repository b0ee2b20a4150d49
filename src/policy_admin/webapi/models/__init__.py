"""API Models package for request/response schemas."""

from .requests import LoginRequest
from .responses import (
    BaseResponse,
    ErrorResponse,
    HealthResponse,
    PartyListResponse,
    PartyResponse,
    PartySchema,
    PolicyPageData,
    PolicyPageResponse,
    PolicySchema,
    StatusResponse,
    SuccessResponse,
)

__all__ = [
    # Response models
    "BaseResponse",
    "SuccessResponse",
    "ErrorResponse",
    "HealthResponse",
    "StatusResponse",
    "PolicySchema",
    "PolicyPageData",
    "PolicyPageResponse",
    "PartySchema",
    "PartyResponse",
    "PartyListResponse",
    # Request models
    "LoginRequest",
]
