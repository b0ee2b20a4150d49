"""Party endpoints backed by the party cache."""

from fastapi import APIRouter, Depends, Request

from ...config.logging import get_logger, log_audit_event
from ...services import PartyCache, get_party_cache
from ..exceptions import ExternalServiceError, NotFoundError
from ..models.responses import PartyListResponse, PartyResponse, PartySchema

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=PartyListResponse,
    summary="List Parties",
    description="All parties with derived support and opposition rates",
)
async def list_parties(
    request: Request,
    party_cache: PartyCache = Depends(get_party_cache),
) -> PartyListResponse:
    """List every party, served from the cache when it is fresh."""
    request_id = getattr(request.state, "request_id", None)

    result = await party_cache.process_parties_data()
    if not result.success:
        raise ExternalServiceError(
            "Firestore", "fetch parties", result.error, request_id=request_id
        )

    return PartyListResponse(
        data=[PartySchema.model_validate(party) for party in result.data],
        request_id=request_id,
    )


@router.post(
    "/refresh",
    response_model=PartyListResponse,
    summary="Refresh Party Cache",
    description="Drop cached parties and reload them from Firestore",
)
async def refresh_parties(
    request: Request,
    party_cache: PartyCache = Depends(get_party_cache),
) -> PartyListResponse:
    """Force a reload of the party cache."""
    request_id = getattr(request.state, "request_id", None)

    result = await party_cache.refresh()
    log_audit_event(
        "party_cache_refresh", success=result.success, request_id=request_id
    )
    if not result.success:
        raise ExternalServiceError(
            "Firestore", "refresh parties", result.error, request_id=request_id
        )

    return PartyListResponse(
        data=[PartySchema.model_validate(party) for party in result.data],
        message=f"Reloaded {len(result.data)} parties",
        request_id=request_id,
    )


@router.get(
    "/{party_id}",
    response_model=PartyResponse,
    summary="Get Party",
    description="Look up a single party by document id",
)
async def get_party(
    party_id: str,
    request: Request,
    party_cache: PartyCache = Depends(get_party_cache),
) -> PartyResponse:
    """Get one party by id."""
    request_id = getattr(request.state, "request_id", None)

    result = await party_cache.get_party_by_id(party_id)
    if not result.success:
        raise ExternalServiceError(
            "Firestore", "fetch parties", result.error, request_id=request_id
        )
    if result.data is None:
        raise NotFoundError("Party", party_id, request_id=request_id)

    return PartyResponse(
        data=PartySchema.model_validate(result.data), request_id=request_id
    )
