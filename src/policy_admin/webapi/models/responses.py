"""Response models for the policy admin API."""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ...services.policy.models import Trend

# Generic type for data responses
T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseResponse(BaseModel):
    """Base response model for all API responses."""

    success: bool = Field(..., description="Whether the request was successful")
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Response timestamp"
    )
    request_id: Optional[str] = Field(
        None, description="Unique request identifier for tracking"
    )

    model_config = ConfigDict(
        use_enum_values=True,
        arbitrary_types_allowed=True,
    )

    @field_serializer("timestamp")
    def serialize_timestamp(self, dt: datetime) -> str:
        """Serialize datetime to ISO format with Z suffix."""
        return dt.astimezone(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


class SuccessResponse(BaseResponse, Generic[T]):
    """Generic success response with typed data."""

    success: bool = Field(True, description="Always true for success responses")
    data: T = Field(..., description="Response data")
    message: Optional[str] = Field(None, description="Optional success message")


class ErrorResponse(BaseResponse):
    """Error response model."""

    success: bool = Field(False, description="Always false for error responses")
    error: Dict[str, Any] = Field(..., description="Error details")


class HealthStatus(BaseModel):
    """Health status model."""

    status: str = Field(
        ..., description="Overall health status: healthy, degraded, unhealthy"
    )
    services: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, description="Individual service statuses"
    )
    uptime_seconds: float = Field(..., description="Application uptime in seconds")
    version: Optional[str] = Field(None, description="Application version")


class HealthResponse(BaseResponse):
    """Health check response."""

    success: bool = Field(True, description="Always true for health responses")
    health: HealthStatus = Field(..., description="Detailed health information")


class ProposingPartySchema(BaseModel):
    """Proposer badge of a policy."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    color: str = Field(..., description="Hex colour of the party badge")


class PartyClaimSchema(BaseModel):
    """One party's position on a policy."""

    model_config = ConfigDict(from_attributes=True)

    party_name: str
    claims: str


class PolicySchema(BaseModel):
    """Policy as returned by the API."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: str
    title: str
    description: str
    category: str
    status: str
    proposed_date: str
    support_rate: int = Field(..., ge=0, le=100)
    oppose_rate: int = Field(..., ge=0, le=100)
    total_votes: float
    trending: Trend = Field(..., description="up, down or none")
    total_comment_count: int
    proposing_party: ProposingPartySchema
    affected_fields: List[str]
    key_points: List[str]
    economic_impact: str
    life_impact: str
    political_parties: List[PartyClaimSchema]


class PolicyPageData(BaseModel):
    """One page of policies and its cursor."""

    model_config = ConfigDict(from_attributes=True)

    policies: List[PolicySchema]
    last_document_id: Optional[str] = Field(
        None, description="Cursor to pass back for the next page"
    )
    has_more: bool = Field(..., description="Whether another page may exist")


class PolicyPageResponse(SuccessResponse[PolicyPageData]):
    """Response model for a page of policies."""

    data: PolicyPageData = Field(..., description="Policy page")


class PartySchema(BaseModel):
    """Party as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    color: str
    support_rate: int = Field(..., ge=0, le=100)
    oppose_rate: int = Field(..., ge=0, le=100)
    total_votes: int
    members: int
    key_policies: List[str]
    description: str
    image: str


class PartyResponse(SuccessResponse[PartySchema]):
    """Response model for a single party."""

    data: PartySchema = Field(..., description="Party data")


class PartyListResponse(SuccessResponse[List[PartySchema]]):
    """Response model for all parties."""

    data: List[PartySchema] = Field(..., description="List of parties")


# Utility response models
class StatusResponse(SuccessResponse[Dict[str, Any]]):
    """Generic status response."""

    data: Dict[str, Any] = Field(..., description="Status data")

    @classmethod
    def create(
        cls,
        data: Dict[str, Any],
        message: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> "StatusResponse":
        """Create a status response."""
        return cls(success=True, data=data, message=message, request_id=request_id)
