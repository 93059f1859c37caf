"""
Tests for the data series helpers.
"""

import logging

import pytest

from chart_layout.data.series import (
    compute_max_value, format_value_labels, get_categories, get_series_data, get_series_totals,
    get_unique_values, sort_categories,
)
from chart_layout.errors import ConfigurationError


def test_unique_values_in_first_seen_order(three_series):
    assert get_unique_values(three_series) == ["Q1", "Q2", "Q3", "Q4"]


def test_unique_values_of_other_keys(three_series):
    assert get_unique_values(three_series, "value") == [4, 7, 5, 12, 1, 3]


def test_unique_values_skip_missing_data():
    assert get_unique_values([{"label": "a"}, {"data": [{"value": 1}, {"name": "x"}]}]) == ["x"]


@pytest.mark.parametrize("sort, expected", [
    ("firstSeries", ["b", "c", "a"]),
    (None, ["b", "c", "a"]),
    ("asc", ["a", "b", "c"]),
    ("desc", ["c", "b", "a"]),
])
def test_sort_categories(sort, expected):
    assert sort_categories(["b", "c", "a"], sort) == expected


def test_sort_with_comparator():
    by_length = lambda left, right: len(left) - len(right)  # noqa: E731
    assert sort_categories(["ccc", "a", "bb"], by_length) == ["a", "bb", "ccc"]


def test_invalid_sort_keeps_order_and_warns(caplog, three_series):
    with caplog.at_level(logging.WARNING):
        categories = get_categories(list(reversed(three_series)), "bogus")

    assert categories == ["Q1", "Q4", "Q2", "Q3"]
    assert "Invalid 'categoryAxisSort' value: bogus" in caplog.text


def test_sort_does_not_modify_input():
    categories = ["b", "a"]
    sort_categories(categories, "asc")
    assert categories == ["b", "a"]


def test_max_value(three_series):
    assert compute_max_value(three_series) == 12


def test_max_value_of_nested_series(three_series):
    assert compute_max_value([{"data": three_series}]) == 12


def test_max_value_skips_missing_values():
    assert compute_max_value([{"data": [{"name": "a", "value": None}, {"name": "b", "value": -2}]}]) == -2


def test_max_value_of_nothing():
    assert compute_max_value([]) is None
    assert compute_max_value([{"data": []}]) is None


def test_non_numeric_value_raises():
    with pytest.raises(ConfigurationError, match="'a'"):
        compute_max_value([{"data": [{"name": "a", "value": "12"}]}])


def test_series_data_lookup():
    data = [{"name": "Q2", "value": 7}, {"name": "Q1", "value": 4}]
    assert get_series_data(data, ["Q1", "Q2", "Q3"], value_key="value") == [4, 7, None]
    assert get_series_data(data, ["Q2"]) == [{"name": "Q2", "value": 7}]
    assert get_series_data(None, ["Q1"]) == [None]


def test_series_totals(three_series):
    assert get_series_totals(three_series, ["Q1", "Q2", "Q3", "Q4", "Q5"]) == [5, 12, 12, 3, None]


def test_series_totals_reject_text():
    with pytest.raises(ConfigurationError):
        get_series_totals([{"data": [{"name": "a", "value": "x"}]}], ["a"])


def test_format_value_labels():
    assert format_value_labels([1, 2.0, 2.5, None]) == ["1", "2", "2.5", ""]
