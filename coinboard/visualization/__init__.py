"""Visualization modules for charts and colors."""
from coinboard.visualization.chart_builder import (
    create_sentiment_gauge,
    sparkline_data_uri,
    sparkline_path,
    sparkline_svg,
)
from coinboard.visualization.colors import sentiment_color, trend_color

__all__ = [
    "create_sentiment_gauge",
    "sentiment_color",
    "sparkline_data_uri",
    "sparkline_path",
    "sparkline_svg",
    "trend_color",
]
