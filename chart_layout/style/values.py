"""
Typed style values.
This module defines the values the style parser produces for each declaration.
"""

from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Format a number the way CSS writes it.

    Integral values drop their fractional part, so ``8.0`` becomes ``'8'``.

    Args:
        value: The number to format

    Returns:
        The CSS text for the number
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class StyleValue:
    """
    Base class for parsed style values.
    """

    def to_css(self) -> str:
        """
        Convert the value back to CSS text.

        Returns:
            CSS representation of the value
        """
        raise NotImplementedError("Subclasses must implement to_css")

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.to_css() == other.to_css()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_css()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_css()!r})"


class Pixel(StyleValue):
    """
    A length in pixels, e.g. ``8px``.
    """

    def __init__(self, value: Number):
        self.value = value

    def to_css(self) -> str:
        return f"{format_number(self.value)}px"


class Percent(StyleValue):
    """
    A percentage, e.g. ``5%``. ``value`` holds the number before the sign.
    """

    def __init__(self, value: Number):
        self.value = value

    def to_css(self) -> str:
        return f"{format_number(self.value)}%"


class Keyword(StyleValue):
    """
    Any other value (colors, font families, alignment keywords, other units),
    kept verbatim.
    """

    def __init__(self, text: str):
        self.text = text

    def to_css(self) -> str:
        return self.text
