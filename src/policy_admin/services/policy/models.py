"""Data models for the policy query service."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Trend(str, Enum):
    """Direction indicator shown next to a policy's support rate."""

    UP = "up"
    DOWN = "down"
    NONE = "none"


class SortMethod(str, Enum):
    """Sort tags accepted by the policy list."""

    SUPPORT_DESC = "supportDesc"
    SUPPORT_ASC = "supportAsc"
    OPPOSE_DESC = "opposeDesc"


# (document field, descending)
SORT_ORDERS: dict[SortMethod, Tuple[str, bool]] = {
    SortMethod.SUPPORT_DESC: ("SupportRate", True),
    SortMethod.SUPPORT_ASC: ("SupportRate", False),
    SortMethod.OPPOSE_DESC: ("NonSupportRate", True),
}

DEFAULT_SORT_METHOD = SortMethod.SUPPORT_DESC


def resolve_sort_order(sort_method: Optional[str]) -> Tuple[str, bool]:
    """Map a sort tag to (field, descending); unknown tags use the default."""
    try:
        method = SortMethod(sort_method)
    except ValueError:
        method = DEFAULT_SORT_METHOD
    return SORT_ORDERS[method]


@dataclass
class ProposingParty:
    """Party shown as the proposer of a policy."""

    name: str
    color: str


@dataclass
class PartyClaim:
    """One party's stated position on a policy."""

    party_name: str
    claims: str


@dataclass
class Policy:
    """Display model for a policy document."""

    id: str
    title: str
    description: str
    category: str
    status: str
    proposed_date: str
    support_rate: int
    oppose_rate: int
    total_votes: float
    trending: Trend
    total_comment_count: int
    proposing_party: ProposingParty
    affected_fields: List[str] = field(default_factory=list)
    key_points: List[str] = field(default_factory=list)
    economic_impact: str = ""
    life_impact: str = ""
    political_parties: List[PartyClaim] = field(default_factory=list)


@dataclass
class PolicyPage:
    """One page of policies plus the cursor for the next one."""

    policies: List[Policy]
    last_document_id: Optional[str]
    has_more: bool
