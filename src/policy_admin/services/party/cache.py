"""In-memory cache of party records with explicit invalidation."""

import asyncio
import time
from functools import lru_cache
from typing import Callable, List, Optional

from ...config.logging import get_logger
from ...config.settings import get_settings
from ...db.repositories import PartyRepository
from ..results import FetchResult
from .converter import convert_to_party
from .models import Party

logger = get_logger(__name__)


class PartyCache:
    """
    Owns the list of parties read from the document store.

    The list is fetched on first use and served from memory until it
    expires (``ttl_seconds``; ``None`` or 0 means never) or is invalidated.
    A failed fetch leaves the cache empty so the next call retries.
    """

    def __init__(
        self,
        repository: Optional[PartyRepository] = None,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.logger = logger.bind(service="party_cache")
        self.repository = repository or PartyRepository()
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._parties: Optional[List[Party]] = None
        self._loaded_at: Optional[float] = None
        self._lock = asyncio.Lock()
        self.fetch_count = 0
        self.last_error: Optional[str] = None

    @property
    def is_populated(self) -> bool:
        return self._parties is not None

    def is_fresh(self) -> bool:
        """Whether cached data exists and has not outlived the TTL."""
        if self._parties is None:
            return False
        if not self.ttl_seconds:
            return True
        return self._clock() - self._loaded_at < self.ttl_seconds

    async def process_parties_data(self) -> FetchResult[List[Party]]:
        """
        Return all parties, fetching them only when the cache is stale.

        Returns:
            FetchResult with the party list, or a failure after a fetch error
        """
        if self.is_fresh():
            return FetchResult.ok(self._parties)

        async with self._lock:
            # Another caller may have populated the cache while we waited
            if self.is_fresh():
                return FetchResult.ok(self._parties)
            return await self._load()

    async def get_party_by_id(self, party_id: str) -> FetchResult[Optional[Party]]:
        """
        Look up one party, populating the cache first if needed.

        Returns:
            FetchResult whose data is the party, or None when no party has the id
        """
        result = await self.process_parties_data()
        if not result.success:
            return FetchResult.failure(result.error)

        party = next((p for p in result.data if p.id == party_id), None)
        if party is None:
            self.logger.debug("Party not found in cache", party_id=party_id)
        return FetchResult.ok(party)

    def invalidate(self) -> None:
        """Drop cached data; the next read fetches again."""
        self._parties = None
        self._loaded_at = None
        self.logger.info("Party cache invalidated")

    async def refresh(self) -> FetchResult[List[Party]]:
        """
        Reload immediately, ignoring freshness.

        The cached list is only replaced once the new fetch succeeds, so a
        failed refresh keeps serving the previous data.
        """
        async with self._lock:
            return await self._load()

    def stats(self) -> dict:
        """Cache state for health reporting."""
        age = None
        if self._loaded_at is not None:
            age = round(self._clock() - self._loaded_at, 3)
        return {
            "populated": self.is_populated,
            "fresh": self.is_fresh(),
            "party_count": len(self._parties) if self._parties is not None else 0,
            "age_seconds": age,
            "ttl_seconds": self.ttl_seconds or None,
            "fetch_count": self.fetch_count,
            "last_error": self.last_error,
        }

    async def _load(self) -> FetchResult[List[Party]]:
        self.fetch_count += 1
        try:
            snapshots = await self.repository.get_all_parties()
            parties = [
                convert_to_party(snapshot.id, snapshot.to_dict())
                for snapshot in snapshots
            ]
        except Exception as e:
            self.logger.error(
                "Failed to fetch parties from Firestore", error=str(e), exc_info=True
            )
            self.last_error = str(e)
            return FetchResult.failure(f"Failed to fetch parties: {e}")

        self._parties = parties
        self._loaded_at = self._clock()
        self.last_error = None
        self.logger.info("Party cache populated", party_count=len(parties))
        return FetchResult.ok(parties)


@lru_cache()
def get_party_cache() -> PartyCache:
    """Process-wide party cache configured from settings."""
    settings = get_settings()
    return PartyCache(ttl_seconds=settings.party_cache_ttl_seconds)
