"""Policy list endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ...config.logging import get_logger
from ...config.settings import get_settings
from ...db.repositories import ALL_FILTER
from ...services import PolicyService
from ..exceptions import ExternalServiceError, ValidationException
from ..models.responses import PolicyPageData, PolicyPageResponse

logger = get_logger(__name__)

router = APIRouter()


def get_policy_service() -> PolicyService:
    """Dependency to get policy service instance."""
    return PolicyService()


@router.get(
    "",
    response_model=PolicyPageResponse,
    summary="List Policies",
    description="Filtered, sorted and cursor-paginated list of policies",
)
async def list_policies(
    request: Request,
    category: str = Query(ALL_FILTER, description='Category filter, "all" for any'),
    party: str = Query(ALL_FILTER, description='Party name filter, "all" for any'),
    sort: str = Query(
        "supportDesc", description="supportDesc, supportAsc or opposeDesc"
    ),
    search: str = Query("", description="Substring over title and description"),
    cursor: Optional[str] = Query(
        None, description="last_document_id from the previous page"
    ),
    limit: Optional[int] = Query(None, ge=1, description="Page size"),
    policy_service: PolicyService = Depends(get_policy_service),
) -> PolicyPageResponse:
    """
    List policies.

    - **category**: matched against AffectedFields
    - **party**: matched against the policy's party name
    - **sort**: unknown values fall back to supportDesc
    - **search**: applied after the page is fetched, so a page can come back
      shorter than **limit** while has_more is still true
    - **cursor**: resume after this document id
    """
    request_id = getattr(request.state, "request_id", None)
    settings = get_settings()
    limit_count = limit or settings.policy_page_size

    if limit_count > settings.policy_max_page_size:
        raise ValidationException(
            f"limit must not exceed {settings.policy_max_page_size}",
            field_errors={"limit": "too large"},
            request_id=request_id,
        )

    logger.info(
        "Policy list requested",
        category=category,
        party=party,
        sort=sort,
        has_search=bool(search.strip()),
        cursor=cursor,
        limit=limit_count,
        request_id=request_id,
    )

    try:
        result = await policy_service.fetch_policies(
            category_filter=category,
            party_filter=party,
            sort_method=sort,
            search_term=search,
            last_document_id=cursor,
            limit_count=limit_count,
        )
    except ValueError as e:
        raise ValidationException(str(e), request_id=request_id)

    if not result.success:
        raise ExternalServiceError(
            "Firestore", "fetch policies", result.error, request_id=request_id
        )

    return PolicyPageResponse(
        data=PolicyPageData.model_validate(result.data),
        request_id=request_id,
    )
