"""Data models for the party cache."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Party:
    """Display model for a party document."""

    id: str
    name: str
    color: str
    support_rate: int
    oppose_rate: int
    total_votes: int
    members: int
    description: str
    image: str
    key_policies: List[str] = field(default_factory=list)
