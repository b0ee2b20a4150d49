"""Conversion of raw policy documents into display models."""

import random
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from ..colors import POLICY_PARTY_COLORS, UNKNOWN_PARTY_COLOR, get_party_color, split_rates
from .models import PartyClaim, Policy, ProposingParty, Trend

DEFAULT_TITLE = "不明なタイトル"
DEFAULT_DESCRIPTION = "説明なし"
DEFAULT_CATEGORY = "その他"
DEFAULT_STATUS = "審議中"
DEFAULT_PROPOSED_DATE = "2023年"
DEFAULT_RATE = 50
UNKNOWN_PARTY_NAME = "不明"

TREND_UP_THRESHOLD = 60
TREND_DOWN_THRESHOLD = 40


def determine_trend(support_rate: int, rng: Optional[random.Random] = None) -> Trend:
    """
    Pick the trend indicator for a normalized support rate.

    Above 60% is up and below 40% is down. Documents carry no history, so
    the band in between gets a random indicator.
    """
    if support_rate > TREND_UP_THRESHOLD:
        return Trend.UP
    if support_rate < TREND_DOWN_THRESHOLD:
        return Trend.DOWN
    return (rng or random).choice([Trend.UP, Trend.DOWN, Trend.NONE])


def _convert_party_claims(raw_parties: Any) -> List[PartyClaim]:
    if not isinstance(raw_parties, (list, tuple)):
        return []
    claims = []
    for party in raw_parties:
        # Entries without the PartyName/Claims map are skipped
        if not isinstance(party, Mapping):
            continue
        claims.append(
            PartyClaim(
                party_name=party.get("PartyName") or UNKNOWN_PARTY_NAME,
                claims=party.get("Claims") or "",
            )
        )
    return claims


def convert_to_policy(
    document_id: str,
    data: Optional[Dict[str, Any]],
    rng: Optional[random.Random] = None,
) -> Policy:
    """Build a Policy from a Firestore document, defaulting every missing field."""
    data = data or {}

    support = data.get("SupportRate") or DEFAULT_RATE
    oppose = data.get("NonSupportRate") or DEFAULT_RATE
    total_votes = support + oppose
    support_rate, oppose_rate = split_rates(support, total_votes, DEFAULT_RATE)

    political_parties = _convert_party_claims(data.get("PoliticalParties"))

    # The first listed party is treated as the proposer
    if political_parties:
        proposer_name = political_parties[0].party_name
        proposing_party = ProposingParty(
            name=proposer_name,
            color=get_party_color(proposer_name, POLICY_PARTY_COLORS),
        )
    else:
        proposing_party = ProposingParty(
            name=UNKNOWN_PARTY_NAME, color=UNKNOWN_PARTY_COLOR
        )

    affected_fields = list(data.get("AffectedFields") or [])

    return Policy(
        id=document_id,
        title=data.get("Title") or DEFAULT_TITLE,
        description=data.get("Description") or DEFAULT_DESCRIPTION,
        category=affected_fields[0] if affected_fields else DEFAULT_CATEGORY,
        status=data.get("Status") or DEFAULT_STATUS,
        proposed_date=data.get("ProposedDate") or DEFAULT_PROPOSED_DATE,
        support_rate=support_rate,
        oppose_rate=oppose_rate,
        total_votes=total_votes,
        trending=determine_trend(support_rate, rng),
        total_comment_count=data.get("totalCommentCount") or 0,
        proposing_party=proposing_party,
        affected_fields=affected_fields,
        key_points=list(data.get("KeyPoints") or []),
        economic_impact=data.get("EconomicImpact") or "",
        life_impact=data.get("LifeImpact") or "",
        political_parties=political_parties,
    )


def filter_by_search_term(policies: List[Policy], search_term: Optional[str]) -> List[Policy]:
    """Case-insensitive substring match over title and description."""
    term = (search_term or "").strip().lower()
    if not term:
        return policies
    return [
        policy
        for policy in policies
        if term in policy.title.lower() or term in policy.description.lower()
    ]
