"""Repository for party document reads."""

from typing import List

from google.cloud import firestore

from ..database import PARTIES_COLLECTION
from .base import BaseRepository


class PartyRepository(BaseRepository):
    """Repository for the parties collection."""

    collection_name = PARTIES_COLLECTION

    async def get_all_parties(self) -> List[firestore.DocumentSnapshot]:
        """Fetch every document in the parties collection."""
        snapshots = await self.collection.get()
        self.logger.debug("Parties fetched", count=len(snapshots))
        return snapshots
