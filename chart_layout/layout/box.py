"""
Box model geometry.
This module defines the Layout record threaded through the layout pipeline and
computes the inner content box of a styled rectangle.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from ..style.resolver import BoxEdges, ResolvedStyle, resolve_style
from ..style.values import Number

logger = logging.getLogger(__name__)

_FIELDS = ('x', 'y', 'width', 'height', 'inner_x', 'inner_y', 'inner_width', 'inner_height')


class Layout:
    """
    A rectangle and the inner content rectangle left after its border and
    padding.

    Layouts are never modified in place; every layout step returns a new one.
    """

    def __init__(self,
                 x: Number = 0,
                 y: Number = 0,
                 width: Number = 0,
                 height: Number = 0,
                 inner_x: Optional[Number] = None,
                 inner_y: Optional[Number] = None,
                 inner_width: Optional[Number] = None,
                 inner_height: Optional[Number] = None,
                 border: Optional[BoxEdges] = None):
        """
        Initialize a layout. The inner rectangle defaults to the outer one.

        Args:
            x: Left edge
            y: Top edge
            width: Outer width
            height: Outer height
            inner_x: Left edge of the content box
            inner_y: Top edge of the content box
            inner_width: Width of the content box
            inner_height: Height of the content box
            border: Border widths of the box
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.inner_x = x if inner_x is None else inner_x
        self.inner_y = y if inner_y is None else inner_y
        self.inner_width = width if inner_width is None else inner_width
        self.inner_height = height if inner_height is None else inner_height
        self.border = border if border is not None else BoxEdges()

    @classmethod
    def from_rect(cls, x: Number, y: Number, width: Number, height: Number) -> 'Layout':
        """Create a layout whose inner box is the whole rectangle."""
        return cls(x, y, width, height)

    def replace(self, **changes: Any) -> 'Layout':
        """
        Return a copy with the given fields replaced.

        Args:
            **changes: New values for any of the layout fields

        Returns:
            The new layout
        """
        values = {name: getattr(self, name) for name in _FIELDS}
        values['border'] = self.border
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f"Unknown layout fields: {', '.join(sorted(unknown))}")
        values.update(changes)
        return Layout(**values)

    def shrink(self, top: Number = 0, right: Number = 0, bottom: Number = 0, left: Number = 0) -> 'Layout':
        """
        Return a copy whose inner box is narrowed by the given amounts.

        Returns:
            The new layout
        """
        return self.replace(
            inner_x=self.inner_x + left,
            inner_y=self.inner_y + top,
            inner_width=self.inner_width - left - right,
            inner_height=self.inner_height - top - bottom,
        )

    @property
    def is_degenerate(self) -> bool:
        """Whether the inner box has no drawable area."""
        return self.inner_width <= 0 or self.inner_height <= 0

    def inner_rect(self) -> 'Layout':
        """The inner box as a layout of its own."""
        return Layout.from_rect(self.inner_x, self.inner_y, self.inner_width, self.inner_height)

    def as_dict(self) -> Dict[str, Number]:
        """
        Convert the layout to a plain record.

        Returns:
            Dictionary with the rectangle, inner rectangle and border widths
        """
        result = {name: getattr(self, name) for name in _FIELDS}
        result.update({
            'border_top_width': self.border.top,
            'border_right_width': self.border.right,
            'border_bottom_width': self.border.bottom,
            'border_left_width': self.border.left,
        })
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Layout):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return (f"Layout(x={self.x!r}, y={self.y!r}, width={self.width!r}, height={self.height!r}, "
                f"inner=({self.inner_x!r}, {self.inner_y!r}, {self.inner_width!r}, {self.inner_height!r}))")


def compute_inner_box(layout: Layout,
                      style: Union[ResolvedStyle, Mapping[str, Any], str, None],
                      context: Optional[Any] = None) -> Layout:
    """
    Compute the inner content box of ``layout`` styled with ``style``.

    The inner box is the outer rectangle minus the border widths and padding
    on each side. Over-constrained styles produce a negative inner size,
    which is returned as is; check ``Layout.is_degenerate`` before drawing.

    Args:
        layout: The outer rectangle
        style: Resolved style, or a raw style resolved against ``context``
        context: Sizing context for a raw style; defaults to the layout itself

    Returns:
        A new layout with the inner box and border widths filled in
    """
    if not isinstance(style, ResolvedStyle):
        style = resolve_style(style, layout if context is None else context)

    border = style.border
    padding = style.padding

    inner = Layout(
        layout.x,
        layout.y,
        layout.width,
        layout.height,
        inner_x=layout.x + border.left + padding.left,
        inner_y=layout.y + border.top + padding.top,
        inner_width=layout.width - border.horizontal - padding.horizontal,
        inner_height=layout.height - border.vertical - padding.vertical,
        border=border,
    )

    if inner.is_degenerate:
        logger.debug(f"Inner box of {layout!r} is empty or negative: {inner!r}")

    return inner
