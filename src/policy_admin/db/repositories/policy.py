"""Repository for policy document reads."""

from typing import Any, List, Optional

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ..database import POLICY_COLLECTION
from .base import BaseRepository

# Filter value meaning "no constraint"
ALL_FILTER = "all"

CATEGORY_FIELD = "AffectedFields"
PARTY_FIELD = "name"


class PolicyRepository(BaseRepository):
    """Repository for policy collection queries."""

    collection_name = POLICY_COLLECTION

    async def get_snapshot(self, document_id: str) -> firestore.DocumentSnapshot:
        """Fetch a single policy snapshot; check ``.exists`` on the result."""
        return await self.collection.document(document_id).get()

    def build_query(
        self,
        category_filter: str,
        party_filter: str,
        order_field: str,
        descending: bool,
        limit_count: int,
        start_after: Optional[Any] = None,
    ) -> firestore.AsyncQuery:
        """Build a filtered, ordered and limited query over the collection."""
        query = self.collection

        if category_filter and category_filter != ALL_FILTER:
            query = query.where(
                filter=FieldFilter(CATEGORY_FIELD, "array_contains", category_filter)
            )

        if party_filter and party_filter != ALL_FILTER:
            query = query.where(filter=FieldFilter(PARTY_FIELD, "==", party_filter))

        direction = (
            firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
        )
        query = query.order_by(order_field, direction=direction)

        if start_after is not None:
            query = query.start_after(start_after)

        return query.limit(limit_count)

    async def query_policies(
        self,
        category_filter: str,
        party_filter: str,
        order_field: str,
        descending: bool,
        limit_count: int,
        start_after: Optional[Any] = None,
    ) -> List[firestore.DocumentSnapshot]:
        """Run the page query and return the raw snapshots."""
        query = self.build_query(
            category_filter,
            party_filter,
            order_field,
            descending,
            limit_count,
            start_after=start_after,
        )
        snapshots = await query.get()
        self.logger.debug(
            "Policy query executed",
            category_filter=category_filter,
            party_filter=party_filter,
            order_field=order_field,
            descending=descending,
            limit_count=limit_count,
            paginated=start_after is not None,
            returned=len(snapshots),
        )
        return snapshots
