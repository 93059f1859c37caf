"""
Text metrics.
This module measures text with Pillow's font rendering so the layout engine can
size titles, buttons and axis labels.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from PIL import ImageFont

from ..style.font import FontSpec
from ..style.resolver import ResolvedStyle, resolve_style

logger = logging.getLogger(__name__)

# TrueType files tried for generic families, in preference order
GENERIC_FONT_FALLBACKS = {
    'sans-serif': ['DejaVuSans', 'Arial', 'LiberationSans-Regular', 'Helvetica'],
    'serif': ['DejaVuSerif', 'Times New Roman', 'LiberationSerif-Regular', 'Times'],
    'monospace': ['DejaVuSansMono', 'Courier New', 'LiberationMono-Regular', 'Courier'],
    'system-ui': ['DejaVuSans', 'Arial'],
}

BOLD_FONT_FALLBACKS = {
    'sans-serif': ['DejaVuSans-Bold', 'Arial Bold', 'LiberationSans-Bold'],
    'serif': ['DejaVuSerif-Bold', 'Times New Roman Bold', 'LiberationSerif-Bold'],
    'monospace': ['DejaVuSansMono-Bold', 'Courier New Bold', 'LiberationMono-Bold'],
    'system-ui': ['DejaVuSans-Bold', 'Arial Bold'],
}

StyleLike = Union[ResolvedStyle, FontSpec, Dict[str, Any], str, None]


class TextMetrics:
    """
    Measured size of a piece of text.
    """

    def __init__(self, width: float, height: float, font_height: float, line_count: int = 1):
        """
        Initialize text metrics.

        Args:
            width: Width of the widest line, capped at the wrap width if any
            height: Height of all lines
            font_height: Height of the font (ascent plus descent)
            line_count: Number of lines the text occupies
        """
        self.width = width
        self.height = height
        self.font_height = font_height
        self.line_count = line_count

    def as_dict(self) -> Dict[str, float]:
        return {
            'width': self.width,
            'height': self.height,
            'font_height': self.font_height,
            'line_count': self.line_count,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, TextMetrics):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return (f"TextMetrics(width={self.width!r}, height={self.height!r}, "
                f"font_height={self.font_height!r}, line_count={self.line_count!r})")


class TextMeasurer:
    """
    Measures text using Pillow fonts.

    ``text_width`` and ``font_height`` are the only methods that touch glyph
    data; everything else is plain arithmetic over their results.
    """

    def __init__(self):
        """Initialize the measurer with an empty font cache."""
        self._font_cache: Dict[tuple, Any] = {}

    def load_font(self, font: FontSpec):
        """
        Load the Pillow font for ``font``.

        Each family of the family list is tried in order, then Pillow's
        built-in default font.

        Args:
            font: The font to load

        Returns:
            A Pillow font object
        """
        cache_key = font.key
        if cache_key in self._font_cache:
            return self._font_cache[cache_key]

        size = max(1, int(round(font.size)))
        loaded = None

        for candidate in self._font_candidates(font):
            try:
                loaded = ImageFont.truetype(candidate, size)
                break
            except OSError:
                continue

        if loaded is None:
            logger.debug(f"No TrueType font found for '{font.family}', using the default font")
            loaded = ImageFont.load_default(size=size)

        self._font_cache[cache_key] = loaded
        return loaded

    @staticmethod
    def _font_candidates(font: FontSpec) -> List[str]:
        candidates = []
        for family in font.families:
            generic = family.lower()
            if font.is_bold:
                candidates.extend(BOLD_FONT_FALLBACKS.get(generic, [f'{family}-Bold', f'{family} Bold']))
            candidates.extend(GENERIC_FONT_FALLBACKS.get(generic, [family, family.replace(' ', '')]))
        return candidates

    def text_width(self, text: str, font: FontSpec) -> float:
        """Advance width of a single line of ``text`` in pixels."""
        if not text:
            return 0.0
        return float(self.load_font(font).getlength(text))

    def font_height(self, font: FontSpec) -> float:
        """Height of one line of ``font`` (ascent plus descent) in pixels."""
        pil_font = self.load_font(font)
        try:
            ascent, descent = pil_font.getmetrics()
        except AttributeError:
            # Bitmap fonts have no metrics, so use the extent of tall glyphs
            left, top, right, bottom = pil_font.getbbox('Ag')
            return float(bottom - top)
        return float(ascent + descent)

    def resolve_font(self, style: StyleLike) -> FontSpec:
        """
        Get the font described by ``style``.

        Args:
            style: A FontSpec, a resolved style or a raw style

        Returns:
            The font spec
        """
        if isinstance(style, FontSpec):
            return style
        if style is None:
            return FontSpec()
        if not isinstance(style, ResolvedStyle):
            style = resolve_style(style)
        return style.font

    def wrap_line(self, line: str, font: FontSpec, max_width: float) -> List[str]:
        """
        Greedily wrap a line at whitespace so each piece fits ``max_width``.

        Words wider than ``max_width`` are broken between characters.

        Args:
            line: Text without newlines
            font: Font to measure with
            max_width: Maximum line width in pixels

        Returns:
            The wrapped lines
        """
        words = line.split()
        if not words:
            return [line]

        lines = []
        current = ''
        for word in words:
            candidate = f'{current} {word}' if current else word
            if self.text_width(candidate, font) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
                current = ''

            if self.text_width(word, font) <= max_width:
                current = word
            else:
                pieces = self._break_word(word, font, max_width)
                lines.extend(pieces[:-1])
                current = pieces[-1]

        if current:
            lines.append(current)

        return lines

    def _break_word(self, word: str, font: FontSpec, max_width: float) -> List[str]:
        pieces = []
        current = ''
        for char in word:
            if current and self.text_width(current + char, font) > max_width:
                pieces.append(current)
                current = char
            else:
                current += char
        pieces.append(current)
        return pieces

    def measure(self, text: Any, style: StyleLike = None, max_width: Optional[float] = None) -> TextMetrics:
        """
        Measure ``text`` rendered with ``style``.

        Without ``max_width`` the text is measured as is (explicit newlines
        start new lines). When the text is wider than ``max_width``, it is
        wrapped into the fewest lines that fit and the reported width is
        capped at ``max_width``.

        Args:
            text: The text to measure
            style: Font source (see resolve_font)
            max_width: Optional maximum width in pixels

        Returns:
            The text metrics
        """
        font = self.resolve_font(style)
        text = '' if text is None else str(text)

        font_height = self.font_height(font)
        line_height = font.line_height if font.line_height is not None else font_height

        lines = text.split('\n')
        width = max(self.text_width(line, font) for line in lines)

        if max_width is not None and width > max_width:
            if max_width > 0:
                lines = [wrapped for line in lines for wrapped in self.wrap_line(line, font, max_width)]
            width = max(max_width, 0)

        return TextMetrics(
            width=width,
            height=line_height * len(lines),
            font_height=font_height,
            line_count=len(lines),
        )

    def measure_max(self, labels: Sequence[Any], style: StyleLike = None,
                    max_width: Optional[float] = None) -> TextMetrics:
        """
        Measure each label and return the metrics of the widest one.

        Width ties go to the taller label, so wrapped labels reserve enough
        height, and then to the first one. An empty label set measures the
        empty string, which still has the height of one line.

        Args:
            labels: The labels to measure
            style: Font source (see resolve_font)
            max_width: Optional maximum width in pixels

        Returns:
            The metrics of the widest label
        """
        font = self.resolve_font(style)
        widest = None

        for label in labels:
            metrics = self.measure(label, font, max_width)
            if widest is None or (metrics.width, metrics.height) > (widest.width, widest.height):
                widest = metrics

        if widest is None:
            widest = self.measure('', font, max_width)

        return widest


_TEXT_MEASURER = TextMeasurer()


def get_default_measurer() -> TextMeasurer:
    """The shared measurer used when no measurer is passed in."""
    return _TEXT_MEASURER


def measure_text(text: Any, style: StyleLike = None, max_width: Optional[float] = None) -> TextMetrics:
    """Measure ``text`` with the shared measurer."""
    return _TEXT_MEASURER.measure(text, style, max_width)


def measure_max_text(labels: Sequence[Any], style: StyleLike = None,
                     max_width: Optional[float] = None) -> TextMetrics:
    """Measure the widest of ``labels`` with the shared measurer."""
    return _TEXT_MEASURER.measure_max(labels, style, max_width)
