"""Color utilities for chart visualization."""
from typing import List, Optional, Tuple

UP_COLOR = "#0ECB81"
DOWN_COLOR = "#F6465D"
NEUTRAL_COLOR = "#8A91B5"

# Fear & Greed gauge bands: (upper bound, color)
SENTIMENT_BANDS: List[Tuple[int, str]] = [
    (25, "#F6465D"),   # Extreme Fear
    (45, "#F5A05A"),   # Fear
    (55, "#F0B90B"),   # Neutral
    (75, "#7BD389"),   # Greed
    (100, "#0ECB81"),  # Extreme Greed
]


def trend_color(change: Optional[float]) -> str:
    """
    Get the line/text color for a 24h change.

    Zero counts as up; a missing change is neutral.
    """
    if change is None:
        return NEUTRAL_COLOR
    return UP_COLOR if change >= 0 else DOWN_COLOR


def sentiment_color(value: int) -> str:
    """Color of the gauge band a Fear & Greed value falls in."""
    for upper, color in SENTIMENT_BANDS:
        if value <= upper:
            return color
    return SENTIMENT_BANDS[-1][1]
