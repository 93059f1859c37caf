"""
Data series helpers.
This module reduces data series into the categories and values the layout
engine measures. A series is a mapping with a ``data`` list of points; each
point is a mapping with a ``name`` and a ``value``, or a nested series of its
own (with ``label`` and ``data``) for grouped and stacked charts.
"""

import functools
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from ..errors import ConfigurationError
from ..style.values import format_number

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_SORT = 'firstSeries'

Series = Mapping[str, Any]
CategorySort = Union[str, Callable[[Any, Any], int], None]


def _points(series: Series) -> Sequence[Mapping[str, Any]]:
    return series.get('data') or []


def get_unique_values(series: Sequence[Series], key: str = 'name') -> List[Any]:
    """
    Get the distinct values of ``key`` across the data of every series.

    Args:
        series: The data series
        key: The point key to collect

    Returns:
        The distinct values in the order they first appear
    """
    seen = set()
    values = []
    for item in series:
        for point in _points(item):
            value = point.get(key)
            if value is None or value in seen:
                continue
            seen.add(value)
            values.append(value)
    return values


def sort_categories(categories: Sequence[Any], sort: CategorySort = DEFAULT_CATEGORY_SORT) -> List[Any]:
    """
    Sort category labels for the category axis.

    Args:
        categories: Categories in first-seen order
        sort: ``firstSeries`` (keep the order), ``asc``, ``desc`` or a
            comparator function returning a negative, zero or positive number

    Returns:
        A new list of sorted categories. Invalid sort values log a warning and
        keep the input order.
    """
    categories = list(categories)

    if sort is None or sort == DEFAULT_CATEGORY_SORT:
        return categories
    if callable(sort):
        return sorted(categories, key=functools.cmp_to_key(sort))
    if sort == 'asc':
        return sorted(categories, key=str)
    if sort == 'desc':
        return sorted(categories, key=str, reverse=True)

    logger.warning(f"Invalid 'categoryAxisSort' value: {sort}")
    return categories


def get_categories(series: Sequence[Series], sort: CategorySort = DEFAULT_CATEGORY_SORT) -> List[Any]:
    """Get the categories of ``series`` in render order."""
    return sort_categories(get_unique_values(series, 'name'), sort)


def _require_number(value: Any, where: str) -> Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"Value of {where} must be a number, got {value!r}")
    return value


def compute_max_value(series: Sequence[Series], key: str = 'value') -> Optional[Union[int, float]]:
    """
    Find the largest value across all points of all series.

    Nested series are searched too. Missing values are skipped.

    Args:
        series: The data series
        key: The point key holding the value

    Returns:
        The maximum, or None if there are no values

    Raises:
        ConfigurationError: If a value is not a number
    """
    maximum = None
    for item in series:
        for point in _points(item):
            if 'data' in point:
                value = compute_max_value([point], key)
            else:
                value = point.get(key)
                if value is not None:
                    value = _require_number(value, f"point {point.get('name')!r}")

            if value is not None and (maximum is None or value > maximum):
                maximum = value
    return maximum


def get_series_data(data: Sequence[Mapping[str, Any]],
                    categories: Sequence[Any],
                    name_key: str = 'name',
                    value_key: Optional[str] = None) -> List[Any]:
    """
    Look up the point for each category.

    Args:
        data: The points of one series
        categories: Categories in render order
        name_key: The point key holding the category
        value_key: If given, return this key of each point instead of the point

    Returns:
        One entry per category, None where the series has no point for it
    """
    lookup: Dict[Any, Mapping[str, Any]] = {}
    for point in data or []:
        lookup.setdefault(point.get(name_key), point)

    result = []
    for category in categories:
        point = lookup.get(category)
        if point is None:
            result.append(None)
        elif value_key is None:
            result.append(point)
        else:
            result.append(point.get(value_key))
    return result


def get_series_totals(series: Sequence[Series],
                      categories: Sequence[Any],
                      name_key: str = 'name',
                      value_key: str = 'value') -> List[Optional[Union[int, float]]]:
    """
    Sum the values of several series per category.

    Args:
        series: The series to total, such as the groups of a stacked chart
        categories: Categories in render order
        name_key: The point key holding the category
        value_key: The point key holding the value

    Returns:
        One total per category, None where no series has a value for it
    """
    totals: List[Optional[Union[int, float]]] = [None] * len(categories)
    for item in series:
        values = get_series_data(_points(item), categories, name_key, value_key)
        for index, value in enumerate(values):
            if value is None:
                continue
            value = _require_number(value, f"category {categories[index]!r}")
            totals[index] = value if totals[index] is None else totals[index] + value
    return totals


def format_value_labels(values: Sequence[Any]) -> List[str]:
    """
    Turn values into label texts for measuring.

    Args:
        values: The values, None for missing ones

    Returns:
        The label texts, empty for missing values
    """
    labels = []
    for value in values:
        if value is None:
            labels.append('')
        elif isinstance(value, float):
            labels.append(format_number(value))
        else:
            labels.append(str(value))
    return labels
