"""
Unit resolver.
This module resolves parsed style values into pixels against a sizing context
and builds the resolved style record the layout engine consumes.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import ConfigurationError
from .font import FontSpec
from .normalizer import BOX_MODEL_PROPERTIES, SIDES, format_style, to_css_name
from .parser import parse_style
from .values import Keyword, Number, Percent, Pixel, StyleValue

logger = logging.getLogger(__name__)

VERTICAL_SUFFIXES = ('-top', '-bottom')

ResolvedValue = Union[float, int, str]


class SizingContext:
    """
    The width and height percentages resolve against.
    """

    def __init__(self, width: Number = 1, height: Number = 1):
        self.width = width
        self.height = height

    @classmethod
    def coerce(cls, context: Any) -> 'SizingContext':
        """
        Build a sizing context from ``context``.

        Accepts None, a SizingContext, a mapping with ``width``/``height``
        keys or any object with ``width``/``height`` attributes (such as a
        Layout). Missing dimensions default to 1.
        """
        if context is None:
            return cls()
        if isinstance(context, SizingContext):
            return context
        if isinstance(context, Mapping):
            width = context.get('width')
            height = context.get('height')
        else:
            width = getattr(context, 'width', None)
            height = getattr(context, 'height', None)
        return cls(1 if width is None else width, 1 if height is None else height)

    def __repr__(self) -> str:
        return f"SizingContext(width={self.width!r}, height={self.height!r})"


class BoxEdges:
    """
    Numeric values for the four sides of a box.
    """

    def __init__(self, top: Number = 0, right: Number = 0, bottom: Number = 0, left: Number = 0):
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    @property
    def horizontal(self) -> Number:
        """Sum of the left and right sides."""
        return self.left + self.right

    @property
    def vertical(self) -> Number:
        """Sum of the top and bottom sides."""
        return self.top + self.bottom

    def as_tuple(self):
        return (self.top, self.right, self.bottom, self.left)

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoxEdges):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return (f"BoxEdges(top={self.top!r}, right={self.right!r}, "
                f"bottom={self.bottom!r}, left={self.left!r})")


def is_vertical_property(name: str) -> bool:
    """Whether percentages of ``name`` resolve against the context height."""
    return name.endswith(VERTICAL_SUFFIXES)


def resolve_value(name: str, value: StyleValue, context: Optional[Any] = None) -> ResolvedValue:
    """
    Resolve a single style value.

    Args:
        name: CSS property name
        value: Parsed style value
        context: Sizing context (see SizingContext.coerce)

    Returns:
        Pixels as a number for Pixel and Percent values, the keyword text otherwise
    """
    if isinstance(value, Pixel):
        return value.value

    if isinstance(value, Percent):
        context = SizingContext.coerce(context)
        size = context.height if is_vertical_property(name) else context.width
        return value.value * size / 100.0

    if isinstance(value, Keyword):
        return value.text

    return value


class ResolvedStyle(dict):
    """
    Mapping of CSS property names to resolved values.

    Keys are kebab-case CSS names, but lookups also accept camelCase and
    snake_case names. Every margin, padding and border width side is present
    and numeric.
    """

    def __getitem__(self, key):
        return super().__getitem__(to_css_name(key))

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and super().__contains__(to_css_name(key))

    def get(self, key, default=None):
        return super().get(to_css_name(key), default)

    def _edges(self, name_format: str) -> BoxEdges:
        return BoxEdges(*(self[name_format.format(side)] for side in SIDES))

    @property
    def margin(self) -> BoxEdges:
        return self._edges('margin-{}')

    @property
    def padding(self) -> BoxEdges:
        return self._edges('padding-{}')

    @property
    def border(self) -> BoxEdges:
        """Border widths."""
        return self._edges('border-{}-width')

    @property
    def font(self) -> FontSpec:
        return FontSpec.from_style(self)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_resolved_style(values: Mapping[str, ResolvedValue]) -> ResolvedStyle:
    """
    Build a ResolvedStyle, filling unset box-model sides with 0.

    Args:
        values: Mapping of CSS property names to resolved values

    Returns:
        The resolved style

    Raises:
        ConfigurationError: If a box-model side is not a number
    """
    style = ResolvedStyle(values)

    for name in BOX_MODEL_PROPERTIES:
        value = dict.get(style, name)
        if value is None:
            dict.__setitem__(style, name, 0)
        elif not _is_number(value):
            raise ConfigurationError(
                f"'{name}' must be a pixel or percent length, got {value!r}"
            )

    return style


def resolve_style(style: Union[Mapping[str, Any], str, None],
                  context: Optional[Any] = None) -> ResolvedStyle:
    """
    Normalize, parse and resolve ``style`` against ``context``.

    Pixel values resolve to numbers and percent values to a fraction of the
    context height (for ``-top``/``-bottom`` properties) or width (for all
    others). Other values pass through unchanged. Without a context,
    percentages resolve against a width and height of 1.

    Args:
        style: Mapping of property names to raw values, declaration text, or
            a mapping of already parsed StyleValues
        context: Sizing context (see SizingContext.coerce)

    Returns:
        The resolved style

    Raises:
        ConfigurationError: If a box-model side does not resolve to a number
    """
    context = SizingContext.coerce(context)

    if isinstance(style, Mapping) and style and all(isinstance(v, StyleValue) for v in style.values()):
        parsed: Dict[str, StyleValue] = {to_css_name(name): value for name, value in style.items()}
    else:
        parsed = parse_style(format_style(style))

    resolved = {name: resolve_value(name, value, context) for name, value in parsed.items()}
    return build_resolved_style(resolved)
