"""
Font description derived from a resolved style.
"""

import logging
import re
from typing import Any, List, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 12
DEFAULT_FONT_FAMILY = 'sans-serif'

# Absolute size keywords, in pixels
FONT_SIZE_KEYWORDS = {
    'xx-small': 9,
    'x-small': 10,
    'small': 13,
    'medium': 16,
    'large': 18,
    'x-large': 24,
    'xx-large': 32,
}

_NUMBER = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)$')


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class FontSpec:
    """
    The font a piece of text is measured and rendered with.
    """

    def __init__(self,
                 size: float = DEFAULT_FONT_SIZE,
                 family: str = DEFAULT_FONT_FAMILY,
                 weight: str = 'normal',
                 style: str = 'normal',
                 variant: str = 'normal',
                 line_height: Optional[float] = None):
        """
        Initialize a font spec.

        Args:
            size: Font size in pixels
            family: Comma separated font family list
            weight: CSS font weight
            style: CSS font style
            variant: CSS font variant
            line_height: Line height in pixels, or None to use the font's own
        """
        self.size = size
        self.family = family
        self.weight = weight
        self.style = style
        self.variant = variant
        self.line_height = line_height

    @classmethod
    def from_style(cls, style: Mapping[str, Any]) -> 'FontSpec':
        """
        Build a font spec from a resolved style.

        Args:
            style: Mapping with resolved ``font-*`` and ``line-height`` values

        Returns:
            The font spec
        """
        size = cls._resolve_size(style.get('font-size'))
        line_height = style.get('line-height')

        if _is_number(line_height):
            line_height = float(line_height)
        elif isinstance(line_height, str) and _NUMBER.match(line_height):
            # Unitless line heights are a multiple of the font size
            line_height = float(line_height) * size
        else:
            line_height = None

        return cls(
            size=size,
            family=str(style.get('font-family') or DEFAULT_FONT_FAMILY),
            weight=str(style.get('font-weight') or 'normal').lower(),
            style=str(style.get('font-style') or 'normal').lower(),
            variant=str(style.get('font-variant') or 'normal').lower(),
            line_height=line_height,
        )

    @staticmethod
    def _resolve_size(value: Any) -> float:
        if value is None:
            return DEFAULT_FONT_SIZE
        if _is_number(value):
            return float(value)
        if isinstance(value, str) and value.lower() in FONT_SIZE_KEYWORDS:
            return FONT_SIZE_KEYWORDS[value.lower()]

        logger.warning(f"Unsupported font size {value!r}, using {DEFAULT_FONT_SIZE}px")
        return DEFAULT_FONT_SIZE

    @property
    def families(self) -> List[str]:
        """Font family names in preference order, without quotes."""
        families = [name.strip().strip('"\'') for name in self.family.split(',')]
        return [name for name in families if name] or [DEFAULT_FONT_FAMILY]

    @property
    def is_bold(self) -> bool:
        if self.weight in ('bold', 'bolder'):
            return True
        return self.weight.isdigit() and int(self.weight) >= 600

    @property
    def is_italic(self) -> bool:
        return self.style in ('italic', 'oblique')

    @property
    def key(self) -> tuple:
        """Hashable identity of the glyph source for caching."""
        return (self.family.lower(), round(self.size, 2), self.is_bold, self.is_italic)

    def to_css(self) -> str:
        """
        Format the font as a CSS ``font`` shorthand.

        Returns:
            e.g. ``"normal normal 12px Montserrat,sans-serif"``
        """
        size = int(self.size) if float(self.size).is_integer() else self.size
        return f"{self.style} {self.weight} {size}px {self.family}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, FontSpec):
            return NotImplemented
        return (self.key, self.variant, self.line_height) == (other.key, other.variant, other.line_height)

    def __repr__(self) -> str:
        return f"FontSpec({self.to_css()!r}, line_height={self.line_height!r})"
