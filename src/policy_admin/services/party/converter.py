"""Conversion of raw party documents into display models."""

from typing import Any, Dict, Optional
from urllib.parse import quote

from ..colors import PARTY_COLORS, get_party_color, split_rates
from .models import Party

PARTY_IMAGE_DIR = "/cm_parly_images"
PLACEHOLDER_IMAGE = "/api/placeholder/80/80"
UNKNOWN_PARTY_NAME = "不明"

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def get_party_image_path(party_name: Optional[str]) -> str:
    """Static image path for a party, placeholder when the name is missing."""
    if not party_name:
        return PLACEHOLDER_IMAGE
    return f"{PARTY_IMAGE_DIR}/{quote(party_name, safe=_URI_COMPONENT_SAFE)}.jpg"


def convert_to_party(document_id: str, data: Optional[Dict[str, Any]]) -> Party:
    """Build a Party from a Firestore document with derived vote rates."""
    data = data or {}
    raw_name = data.get("name")
    name = raw_name or UNKNOWN_PARTY_NAME

    support_count = data.get("supportCount") or 0
    opposition_count = data.get("oppositionCount") or 0
    total_votes = support_count + opposition_count
    support_rate, oppose_rate = split_rates(support_count, total_votes)

    return Party(
        id=document_id,
        name=name,
        color=get_party_color(raw_name, PARTY_COLORS),
        support_rate=support_rate,
        oppose_rate=oppose_rate,
        total_votes=total_votes,
        members=data.get("memberCount") or 0,
        key_policies=list(data.get("majorPolicies") or []),
        description=data.get("overview") or f"{name}の政策と理念に基づいた政党です。",
        image=get_party_image_path(raw_name),
    )
