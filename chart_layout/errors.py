"""
Exception types raised by the layout engine.
"""


class ChartLayoutError(Exception):
    """Base class for errors raised by chart_layout."""


class ConfigurationError(ChartLayoutError, ValueError):
    """
    Raised when an input has the wrong shape for layout math.

    Examples are a box-model side that is not a length, a cell count below
    one, or a data value that is not a number.
    """
