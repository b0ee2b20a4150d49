"""Party cache service module."""

from .cache import PartyCache, get_party_cache
from .converter import convert_to_party, get_party_image_path
from .models import Party

__all__ = [
    "Party",
    "PartyCache",
    "convert_to_party",
    "get_party_cache",
    "get_party_image_path",
]
