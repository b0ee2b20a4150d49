"""Repository classes for Firestore collection access."""

from .base import BaseRepository
from .party import PartyRepository
from .policy import ALL_FILTER, PolicyRepository

__all__ = [
    "ALL_FILTER",
    "BaseRepository",
    "PartyRepository",
    "PolicyRepository",
]
