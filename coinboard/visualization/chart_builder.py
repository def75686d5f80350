"""Chart building utilities for visualization."""
import base64
from typing import Optional, Sequence

import plotly.graph_objects as go

from coinboard.constants import SPARKLINE_HEIGHT, SPARKLINE_WIDTH
from coinboard.models import Sentiment
from coinboard.visualization.colors import NEUTRAL_COLOR, SENTIMENT_BANDS, sentiment_color


def sparkline_path(
    prices: Optional[Sequence[float]],
    width: float = SPARKLINE_WIDTH,
    height: float = SPARKLINE_HEIGHT,
) -> str:
    """
    Convert a price series into SVG path commands.

    X maps the index onto 0..width; Y maps the price onto height..0
    because SVG y grows downward. A flat series (including a single
    point) is drawn at mid-height.

    Args:
        prices: Prices in chronological order
        width: Canvas width (viewBox units)
        height: Canvas height (viewBox units)

    Returns:
        Path string such as "M 0.0 50.0 L 84.0 0.0 L 168.0 25.0",
        or "" for an empty series
    """
    if not prices:
        return ""

    low = min(prices)
    high = max(prices)
    price_range = high - low
    step_x = width / (len(prices) - 1) if len(prices) > 1 else 0.0

    commands = []
    for i, price in enumerate(prices):
        x = i * step_x
        y = height / 2 if price_range == 0 else height - ((price - low) / price_range) * height
        commands.append(f"{'M' if i == 0 else 'L'} {x:.1f} {y:.1f}")

    return " ".join(commands)


def sparkline_svg(
    prices: Optional[Sequence[float]],
    color: str,
    width: float = SPARKLINE_WIDTH,
    height: float = SPARKLINE_HEIGHT,
) -> str:
    """Wrap a sparkline path in a standalone SVG document."""
    path = sparkline_path(prices, width, height)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
        f'preserveAspectRatio="none">'
        f'<path d="{path}" fill="none" stroke="{color}" stroke-width="1.5" '
        f'stroke-linejoin="round" stroke-linecap="round"/>'
        f"</svg>"
    )


def sparkline_data_uri(prices: Optional[Sequence[float]], color: str) -> str:
    """Sparkline as a base64 data URI, usable as an <img> src."""
    svg = sparkline_svg(prices, color)
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def create_sentiment_gauge(sentiment: Optional[Sentiment]) -> go.Figure:
    """
    Create a Fear & Greed gauge.

    Args:
        sentiment: Latest reading, or None when the index is unavailable

    Returns:
        Plotly Figure with a 0-100 gauge indicator
    """
    steps = []
    lower = 0
    for upper, color in SENTIMENT_BANDS:
        steps.append({"range": [lower, upper], "color": color + "55"})
        lower = upper

    if sentiment is None:
        value = None
        title = "Fear & Greed (unavailable)"
        bar_color = NEUTRAL_COLOR
    else:
        value = sentiment.value
        title = f"Fear & Greed: {sentiment.classification}"
        bar_color = sentiment_color(sentiment.value)

    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=value,
            title={"text": title, "font": {"size": 14}},
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": bar_color, "thickness": 0.3},
                "steps": steps,
            },
        )
    )
    fig.update_layout(
        height=160,
        margin=dict(l=20, r=20, t=40, b=10),
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
