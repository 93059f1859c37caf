"""
Style resolution for the layout engine.
This package normalizes, parses and resolves CSS-like style declarations.
"""

from .font import FontSpec
from .normalizer import format_style, normalize_style, serialize_style, to_css_name
from .parser import StyleParser, parse_style
from .resolver import BoxEdges, ResolvedStyle, SizingContext, resolve_style, resolve_value
from .values import Keyword, Percent, Pixel, StyleValue

__all__ = [
    'FontSpec', 'format_style', 'normalize_style', 'serialize_style', 'to_css_name',
    'StyleParser', 'parse_style', 'BoxEdges', 'ResolvedStyle', 'SizingContext',
    'resolve_style', 'resolve_value', 'Keyword', 'Percent', 'Pixel', 'StyleValue',
]
