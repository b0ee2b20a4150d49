"""Policy query service module."""

from .converter import convert_to_policy, determine_trend, filter_by_search_term
from .models import (
    PartyClaim,
    Policy,
    PolicyPage,
    ProposingParty,
    SortMethod,
    Trend,
    resolve_sort_order,
)
from .service import PolicyService

__all__ = [
    "PartyClaim",
    "Policy",
    "PolicyPage",
    "PolicyService",
    "ProposingParty",
    "SortMethod",
    "Trend",
    "convert_to_policy",
    "determine_trend",
    "filter_by_search_term",
    "resolve_sort_order",
]
