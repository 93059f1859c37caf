"""
Style normalizer.
This module expands shorthand box-model and font properties into their
constituent properties and serializes a property bag into canonical CSS text.
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .values import format_number

logger = logging.getLogger(__name__)

SIDES = ('top', 'right', 'bottom', 'left')
CORNERS = ('top-left', 'top-right', 'bottom-right', 'bottom-left')

# Which of the 1-4 given values applies to each side (or corner)
SIDE_SHORTHANDS = {
    1: (0, 0, 0, 0),
    2: (0, 1, 0, 1),
    3: (0, 1, 2, 1),
    4: (0, 1, 2, 3),
}

# Shorthands that take 1-4 values, mapped to the format of their expansions
SIDE_EXPANSIONS = {
    'margin': ('margin-{}', SIDES),
    'padding': ('padding-{}', SIDES),
    'border-width': ('border-{}-width', SIDES),
    'border-style': ('border-{}-style', SIDES),
    'border-color': ('border-{}-color', SIDES),
    'border-radius': ('border-{}-radius', CORNERS),
}

BOX_MODEL_PROPERTIES = tuple(
    [f'margin-{side}' for side in SIDES] +
    [f'padding-{side}' for side in SIDES] +
    [f'border-{side}-width' for side in SIDES]
)

LENGTH_PROPERTIES = frozenset(
    BOX_MODEL_PROPERTIES +
    tuple(f'border-{corner}-radius' for corner in CORNERS) +
    ('margin', 'padding', 'border-width', 'border-radius',
     'font-size', 'width', 'height', 'min-width', 'min-height',
     'max-width', 'max-height', 'top', 'right', 'bottom', 'left',
     'letter-spacing', 'word-spacing', 'outline-width')
)

# Numbers given for these properties are written without a unit
UNITLESS_PROPERTIES = frozenset({
    'opacity', 'font-weight', 'line-height', 'z-index', 'flex', 'flex-grow',
    'flex-shrink', 'order', 'zoom', 'fill-opacity', 'stroke-opacity',
})

BORDER_STYLES = frozenset({
    'none', 'hidden', 'dotted', 'dashed', 'solid', 'double', 'groove',
    'ridge', 'inset', 'outset',
})

BORDER_WIDTH_KEYWORDS = {
    'thin': '1px',
    'medium': '3px',
    'thick': '5px',
}

FONT_STYLES = frozenset({'italic', 'oblique'})
FONT_VARIANTS = frozenset({'small-caps'})
FONT_WEIGHTS = frozenset({'bold', 'bolder', 'lighter'})

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')
_NUMBER = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)$')
_LENGTH = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)([a-zA-Z]+|%)?$')

StyleDeclaration = Mapping[str, Any]


def to_css_name(name: str) -> str:
    """
    Canonicalize a property name to its kebab-case CSS form.

    ``marginTop``, ``margin_top`` and ``margin-top`` all become ``margin-top``.
    Custom properties (``--name``) are returned unchanged.

    Args:
        name: Property name in any supported casing

    Returns:
        The CSS property name
    """
    name = name.strip()
    if name.startswith('--'):
        return name
    return _CAMEL_BOUNDARY.sub(r'-\1', name).replace('_', '-').lower()


def split_tokens(value: str) -> List[str]:
    """
    Split a value on whitespace, keeping parenthesized groups such as
    ``rgb(0, 0, 0)`` together.

    Args:
        value: CSS value text

    Returns:
        List of value tokens
    """
    tokens = []
    current = []
    depth = 0

    for char in value:
        if char == '(':
            depth += 1
        elif char == ')':
            depth = max(0, depth - 1)

        if char.isspace() and depth == 0:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append(''.join(current))

    return tokens


def format_value(name: str, value: Any) -> Optional[str]:
    """
    Format a raw declaration value as CSS text for the property ``name``.

    Numbers become pixel lengths unless the property is unitless, bare numeric
    strings on length properties gain a ``px`` unit and border width keywords
    become pixel lengths.

    Args:
        name: CSS property name
        value: Raw value

    Returns:
        CSS text for the value, or None if the value is unset
    """
    if value is None:
        return None

    if isinstance(value, bool):
        return str(value).lower()

    if isinstance(value, (int, float)):
        text = format_number(value)
        return text if name in UNITLESS_PROPERTIES else f'{text}px'

    text = ' '.join(str(value).split())

    if name in LENGTH_PROPERTIES and _NUMBER.match(text):
        return f'{text}px'

    if name.startswith('border') and name.endswith('width'):
        return BORDER_WIDTH_KEYWORDS.get(text.lower(), text)

    return text


def _expand_sides(name: str, value: str) -> List[Tuple[str, str]]:
    name_format, targets = SIDE_EXPANSIONS[name]

    if name == 'border-radius':
        # Only the horizontal radii are used
        value = value.split('/', 1)[0].strip()

    tokens = split_tokens(value)
    mapping = SIDE_SHORTHANDS.get(len(tokens))
    if mapping is None:
        logger.warning(f"Could not expand '{name}: {value}', keeping it as is")
        return [(name, value)]

    return [
        (name_format.format(target), tokens[index])
        for target, index in zip(targets, mapping)
    ]


def _expand_border(value: str, sides: Sequence[str]) -> List[Tuple[str, str]]:
    width = None
    style = None
    color = None

    for token in split_tokens(value):
        lower = token.lower()
        if lower in BORDER_STYLES:
            style = lower
        elif lower in BORDER_WIDTH_KEYWORDS or _LENGTH.match(token):
            width = token
        else:
            color = token

    style = style or 'none'
    if width is None:
        # A border without a visible style takes no room
        width = '0px' if style in ('none', 'hidden') else 'medium'
    color = color or 'currentcolor'

    expanded = []
    for side in sides:
        expanded.append((f'border-{side}-width', width))
        expanded.append((f'border-{side}-style', style))
        expanded.append((f'border-{side}-color', color))
    return expanded


def _expand_font(value: str) -> List[Tuple[str, str]]:
    tokens = split_tokens(value)
    style = variant = weight = 'normal'
    line_height = 'normal'

    for index, token in enumerate(tokens):
        lower = token.lower()
        if lower == 'normal':
            continue
        if lower in FONT_STYLES:
            style = lower
            continue
        if lower in FONT_VARIANTS:
            variant = lower
            continue
        if lower in FONT_WEIGHTS or (lower.isdigit() and len(lower) == 3):
            weight = lower
            continue

        # The first other token is the font size, optionally with a line height
        size, _, line_height_text = token.partition('/')
        rest = tokens[index + 1:]
        if line_height_text:
            line_height = line_height_text
        elif rest and rest[0] == '/' and len(rest) > 1:
            line_height = rest[1]
            rest = rest[2:]
        elif rest and rest[0].startswith('/'):
            line_height = rest[0][1:]
            rest = rest[1:]

        expanded = [
            ('font-style', style),
            ('font-variant', variant),
            ('font-weight', weight),
            ('font-size', size),
            ('line-height', line_height),
        ]
        if rest:
            expanded.append(('font-family', ' '.join(rest)))
        return expanded

    logger.warning(f"Could not expand 'font: {value}' without a font size, keeping it as is")
    return [('font', value)]


def expand_property(name: str, value: str) -> List[Tuple[str, str]]:
    """
    Expand one declaration into its constituent declarations.

    Properties that are not shorthands are returned as a single pair.

    Args:
        name: CSS property name
        value: CSS value text

    Returns:
        List of (property, value) pairs
    """
    if name in SIDE_EXPANSIONS:
        expanded = _expand_sides(name, value)
    elif name == 'border':
        expanded = _expand_border(value, SIDES)
    elif name.startswith('border-') and name[len('border-'):] in SIDES:
        expanded = _expand_border(value, (name[len('border-'):],))
    elif name == 'font':
        expanded = _expand_font(value)
    else:
        return [(name, value)]

    return [(prop, format_value(prop, prop_value)) for prop, prop_value in expanded]


def split_declarations(text: str) -> Iterator[Tuple[str, str]]:
    """
    Split a declaration string into (name, value) text pairs.

    Args:
        text: CSS declaration text, e.g. ``"margin: 8px; color: red"``

    Yields:
        (name, value) pairs; pieces without a colon are skipped
    """
    for declaration in text.split(';'):
        declaration = declaration.strip()
        if not declaration:
            continue

        name, sep, value = declaration.partition(':')
        if not sep or not name.strip():
            logger.debug(f"Skipping malformed declaration: {declaration!r}")
            continue

        yield name.strip(), value.strip()


def normalize_style(declaration: Union[StyleDeclaration, str, None]) -> Dict[str, str]:
    """
    Expand every shorthand in ``declaration`` into explicit properties.

    Declarations are applied in order, so a per-side property given after a
    shorthand overrides that side. The input is not modified.

    Args:
        declaration: Mapping of property names to raw values, or CSS text

    Returns:
        Dictionary of CSS property names to CSS value text
    """
    if not declaration:
        return {}

    if isinstance(declaration, str):
        items = split_declarations(declaration)
    else:
        items = declaration.items()

    result: Dict[str, str] = {}
    for name, value in items:
        css_name = to_css_name(name)
        text = format_value(css_name, value)
        if text is None:
            continue

        for prop, prop_value in expand_property(css_name, text):
            result[prop] = prop_value

    return result


def serialize_style(declaration: Mapping[str, Any]) -> str:
    """
    Serialize a normalized property mapping into canonical CSS text.

    Args:
        declaration: Mapping of CSS property names to CSS value text

    Returns:
        Declarations joined as ``name: value`` pairs separated by ``; ``
    """
    return '; '.join(f'{name}: {value}' for name, value in declaration.items())


def format_style(declaration: Union[StyleDeclaration, str, None]) -> str:
    """
    Normalize ``declaration`` and serialize it into canonical CSS text.

    Args:
        declaration: Mapping of property names to raw values, or CSS text

    Returns:
        Canonical CSS text
    """
    return serialize_style(normalize_style(declaration))
