import base64

import pytest

from coinboard.models import Sentiment
from coinboard.visualization import (
    create_sentiment_gauge,
    sparkline_data_uri,
    sparkline_path,
    sentiment_color,
    trend_color,
)
from coinboard.visualization.colors import DOWN_COLOR, NEUTRAL_COLOR, UP_COLOR


def _points(path):
    """Split "M x y L x y ..." into (command, x, y) tuples."""
    tokens = path.split()
    assert len(tokens) % 3 == 0
    return [
        (tokens[i], float(tokens[i + 1]), float(tokens[i + 2]))
        for i in range(0, len(tokens), 3)
    ]


class TestSparklinePath:

    def test_empty_series(self):
        assert sparkline_path([]) == ""
        assert sparkline_path(None) == ""

    def test_spans_full_width(self):
        points = _points(sparkline_path([5.0, 3.0, 9.0, 4.0, 7.0, 1.0, 8.0]))
        assert points[0][1] == 0.0
        assert points[-1][1] == pytest.approx(168.0, abs=0.05)

    def test_commands(self):
        points = _points(sparkline_path([1.0, 2.0, 3.0, 4.0]))
        assert [p[0] for p in points] == ["M", "L", "L", "L"]

    def test_exact_output(self):
        assert sparkline_path([1.0, 2.0, 3.0]) == "M 0.0 50.0 L 84.0 25.0 L 168.0 0.0"

    def test_min_at_bottom_max_at_top(self):
        points = _points(sparkline_path([10.0, 30.0, 20.0]))
        assert points[0][2] == 50.0
        assert points[1][2] == 0.0
        assert points[2][2] == 25.0

    def test_flat_series_is_mid_height(self):
        points = _points(sparkline_path([42.0] * 10))
        assert len(points) == 10
        assert all(y == 25.0 for _, _, y in points)

    def test_single_point(self):
        assert sparkline_path([123.45]) == "M 0.0 25.0"

    def test_custom_canvas(self):
        points = _points(sparkline_path([0.0, 1.0], width=100, height=20))
        assert points == [("M", 0.0, 20.0), ("L", 100.0, 0.0)]

    def test_deterministic(self):
        prices = [3.3, 1.1, 2.2, 5.5]
        assert sparkline_path(prices) == sparkline_path(list(prices))


def test_sparkline_data_uri_embeds_path():
    uri = sparkline_data_uri([1.0, 2.0, 3.0], UP_COLOR)
    prefix = "data:image/svg+xml;base64,"
    assert uri.startswith(prefix)
    svg = base64.b64decode(uri[len(prefix):]).decode("utf-8")
    assert 'd="M 0.0 50.0 L 84.0 25.0 L 168.0 0.0"' in svg
    assert UP_COLOR in svg
    assert 'viewBox="0 0 168 50"' in svg


def test_trend_color():
    assert trend_color(2.0) == UP_COLOR
    assert trend_color(0.0) == UP_COLOR
    assert trend_color(-0.1) == DOWN_COLOR
    assert trend_color(None) == NEUTRAL_COLOR


def test_sentiment_color_bands():
    assert sentiment_color(10) != sentiment_color(90)
    assert sentiment_color(100) == sentiment_color(80)


def test_sentiment_gauge():
    fig = create_sentiment_gauge(Sentiment(value=72, classification="Greed"))
    indicator = fig.data[0]
    assert indicator.value == 72
    assert "Greed" in indicator.title.text


def test_sentiment_gauge_unavailable():
    fig = create_sentiment_gauge(None)
    assert fig.data[0].value is None
    assert "unavailable" in fig.data[0].title.text
