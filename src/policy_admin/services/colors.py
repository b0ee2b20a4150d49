"""Party colour palettes and shared rate helpers."""

import math
from typing import Dict, Optional

UNKNOWN_PARTY_COLOR = "#808080"

# Colours used on party records and the party admin screens
PARTY_COLORS: Dict[str, str] = {
    "自由民主党": "#555555",
    "立憲民主党": "#4361EE",
    "公明党": "#7209B7",
    "日本維新の会": "#228B22",
    "国民民主党": "#000080",
    "日本共産党": "#E63946",
    "れいわ新選組": "#F72585",
    "社民党": "#118AB2",
    "参政党": "#FF4500",
}

# Colours used for the proposing-party badge on policy cards
POLICY_PARTY_COLORS: Dict[str, str] = {
    "自由民主党": "#E60012",
    "立憲民主党": "#FFD900",
    "日本維新の会": "#FF4500",
    "公明党": "#00A0E9",
    "国民民主党": "#009944",
    "日本共産党": "#A40000",
    "れいわ新選組": "#800080",
    "社会民主党": "#800000",
}


def get_party_color(
    party_name: Optional[str], palette: Optional[Dict[str, str]] = None
) -> str:
    """Return the hex colour for a party name, grey for unknown parties."""
    if palette is None:
        palette = PARTY_COLORS
    return palette.get(party_name or "", UNKNOWN_PARTY_COLOR)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (built-in round is banker's)."""
    return int(math.floor(value + 0.5))


def split_rates(support: float, total: float, default: int = 50) -> tuple[int, int]:
    """Percentages of support and opposition that always sum to 100."""
    if total <= 0:
        return default, 100 - default
    support_rate = round_half_up(support / total * 100)
    return support_rate, 100 - support_rate
