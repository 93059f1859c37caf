"""
Shared fixtures for the chart_layout tests.
"""

import pytest

from chart_layout.layout.text_metrics import TextMeasurer
from chart_layout.utils.config import ChartConfig


class FixedWidthMeasurer(TextMeasurer):
    """
    Measurer where every character is half the font size wide and a line is
    exactly the font size high, so layouts can be checked with exact numbers.
    """

    def text_width(self, text, font):
        return len(text) * font.size * 0.5

    def font_height(self, font):
        return float(font.size)


@pytest.fixture
def measurer():
    return FixedWidthMeasurer()


@pytest.fixture
def config():
    return ChartConfig()


@pytest.fixture
def three_series():
    return [
        {"label": "North", "data": [{"name": "Q1", "value": 4}, {"name": "Q2", "value": 7}]},
        {"label": "South", "data": [{"name": "Q2", "value": 5}, {"name": "Q3", "value": 12}]},
        {"label": "West", "data": [{"name": "Q1", "value": 1}, {"name": "Q4", "value": 3}]},
    ]
