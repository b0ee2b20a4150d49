"""Service layer for business logic encapsulation."""

from .party import PartyCache, get_party_cache
from .policy import PolicyService
from .results import FetchResult

__all__ = [
    "FetchResult",
    "PartyCache",
    "PolicyService",
    "get_party_cache",
]
