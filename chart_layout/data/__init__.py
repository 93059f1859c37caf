"""
Data series helpers.
"""

from .series import (
    compute_max_value, format_value_labels, get_categories, get_series_data, get_series_totals,
    get_unique_values, sort_categories,
)

__all__ = [
    'compute_max_value', 'format_value_labels', 'get_categories', 'get_series_data',
    'get_series_totals', 'get_unique_values', 'sort_categories',
]
