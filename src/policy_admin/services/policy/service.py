"""Policy query service: filtering, sorting, cursor pagination and search."""

import random
import time
from typing import Any, Optional

from ...config.logging import get_logger, log_performance
from ...db.repositories import ALL_FILTER, PolicyRepository
from ..results import FetchResult
from .converter import convert_to_policy, filter_by_search_term
from .models import PolicyPage, resolve_sort_order

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 5


class PolicyService:
    """Service for reading pages of policies from the document store."""

    def __init__(
        self,
        repository: Optional[PolicyRepository] = None,
        rng: Optional[random.Random] = None,
    ):
        self.logger = logger.bind(service="policy_service")
        self.repository = repository or PolicyRepository()
        self.rng = rng or random.Random()

    async def fetch_policies(
        self,
        category_filter: str = ALL_FILTER,
        party_filter: str = ALL_FILTER,
        sort_method: str = "supportDesc",
        search_term: str = "",
        last_document_id: Optional[str] = None,
        limit_count: int = DEFAULT_PAGE_SIZE,
    ) -> FetchResult[PolicyPage]:
        """
        Fetch one page of policies.

        Args:
            category_filter: Category to match in AffectedFields ("all" for any)
            party_filter: Party name to match ("all" for any)
            sort_method: supportDesc, supportAsc or opposeDesc
            search_term: Substring matched against title and description
            last_document_id: Id of the last document of the previous page
            limit_count: Number of documents to request

        Returns:
            FetchResult wrapping the page. ``has_more`` reflects the raw
            document count, so a search can shorten a page that still has
            successors.

        Raises:
            ValueError: If limit_count is less than 1
        """
        if limit_count < 1:
            raise ValueError("limit_count must be at least 1")

        order_field, descending = resolve_sort_order(sort_method)
        started = time.perf_counter()

        try:
            start_after = None
            if last_document_id:
                start_after = await self._resolve_cursor(last_document_id)

            snapshots = await self.repository.query_policies(
                category_filter,
                party_filter,
                order_field,
                descending,
                limit_count,
                start_after=start_after,
            )
            policies = [
                convert_to_policy(snapshot.id, snapshot.to_dict(), rng=self.rng)
                for snapshot in snapshots
            ]
        except Exception as e:
            self.logger.error(
                "Failed to fetch policies",
                category_filter=category_filter,
                party_filter=party_filter,
                sort_method=sort_method,
                error=str(e),
                exc_info=True,
            )
            return FetchResult.failure(f"Failed to fetch policies: {e}")

        matched = filter_by_search_term(policies, search_term)

        page = PolicyPage(
            policies=matched,
            last_document_id=snapshots[-1].id if snapshots else None,
            has_more=len(snapshots) == limit_count,
        )

        log_performance(
            "fetch_policies",
            (time.perf_counter() - started) * 1000,
            fetched=len(snapshots),
            returned=len(matched),
            has_more=page.has_more,
        )
        return FetchResult.ok(page)

    async def _resolve_cursor(self, document_id: str) -> Optional[Any]:
        """Turn a cursor id into a snapshot; None means paginate from the start."""
        try:
            snapshot = await self.repository.get_snapshot(document_id)
        except Exception as e:
            self.logger.error(
                "Cursor document lookup failed",
                document_id=document_id,
                error=str(e),
                exc_info=True,
            )
            return None

        if not snapshot.exists:
            self.logger.warning("Cursor document not found", document_id=document_id)
            return None

        return snapshot
