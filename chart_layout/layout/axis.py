"""
Axis sizing.
This module computes the space axes, their labels and axis pointer labels take
up inside a plot. The Y axis must be sized before the X axis, since the X axis
gets whatever width the Y axis leaves over.
"""

import logging
import math
from enum import Enum
from typing import Any, Optional, Sequence, Union

from ..style.resolver import ResolvedStyle
from ..style.values import format_number
from .box import Layout
from .text_metrics import TextMeasurer, TextMetrics, get_default_measurer

logger = logging.getLogger(__name__)

# A value axis has an unknown number of ticks, so assume this many
VALUE_AXIS_LABEL_DIVISIONS = 10

# Width of the axis line drawn under category labels
AXIS_LINE_WIDTH = 1


class Axis(Enum):
    """The two plot axes."""
    X = "x"
    Y = "y"


class PointerLabelPosition(Enum):
    """Where an axis pointer label is drawn."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    NONE = "none"


ALLOWED_POINTER_LABEL_POSITIONS = {
    Axis.X: (PointerLabelPosition.TOP, PointerLabelPosition.BOTTOM, PointerLabelPosition.NONE),
    Axis.Y: (PointerLabelPosition.LEFT, PointerLabelPosition.RIGHT, PointerLabelPosition.NONE),
}

DEFAULT_POINTER_LABEL_POSITIONS = {
    Axis.X: PointerLabelPosition.BOTTOM,
    Axis.Y: PointerLabelPosition.LEFT,
}


class AxisInfo:
    """
    Space an axis and its labels occupy.
    """

    def __init__(self,
                 width: float,
                 height: Optional[float],
                 label_metrics: TextMetrics,
                 max_label_width: Optional[float] = None,
                 height_overflow: float = 0):
        """
        Initialize axis info.

        Args:
            width: Width of the axis; for the X axis, the plot width
            height: Height of the axis, None for the Y axis
            label_metrics: Metrics of the widest label
            max_label_width: Width each label may use before wrapping
            height_overflow: Space the top label needs above the plot
        """
        self.width = width
        self.height = height
        self.label_metrics = label_metrics
        self.max_label_width = max_label_width
        self.height_overflow = height_overflow

    def __repr__(self) -> str:
        return (f"AxisInfo(width={self.width!r}, height={self.height!r}, "
                f"max_label_width={self.max_label_width!r}, height_overflow={self.height_overflow!r})")


class Reservation:
    """
    Result of reserving part of a layout for a chart element.
    """

    def __init__(self, layout: Layout, region: Optional[Layout] = None, label_margin: Optional[float] = None):
        """
        Args:
            layout: The layout left after the reservation
            region: The reserved region, if the element has one
            label_margin: Distance of an axis pointer label from its axis line
        """
        self.layout = layout
        self.region = region
        self.label_margin = label_margin

    def __repr__(self) -> str:
        return f"Reservation(layout={self.layout!r}, region={self.region!r}, label_margin={self.label_margin!r})"


def _label(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def compute_y_axis_info(style: ResolvedStyle,
                        labels: Sequence[Any],
                        max_value: Any,
                        measurer: Optional[TextMeasurer] = None) -> AxisInfo:
    """
    Compute the size of the Y axis.

    The width fits the widest label plus the left and right margins. The top
    tick label is centered on its tick, so half its height extends above the
    plot and is reported as ``height_overflow``. The height depends on the X
    axis and is left unset.

    Args:
        style: Resolved style of the Y axis labels
        labels: Label texts
        max_value: The largest value on the axis, which labels the top tick
        measurer: Text measurer; defaults to the shared one

    Returns:
        The Y axis info
    """
    measurer = measurer or get_default_measurer()
    label_metrics = measurer.measure_max([_label(label) for label in labels], style)
    width = label_metrics.width + style.margin.left + style.margin.right

    top_label_metrics = measurer.measure(_label(max_value), style)
    height_overflow = top_label_metrics.height / 2

    return AxisInfo(
        width=width,
        height=None,
        label_metrics=label_metrics,
        height_overflow=height_overflow,
    )


def compute_x_axis_info(layout: Layout,
                        style: ResolvedStyle,
                        labels: Sequence[Any],
                        y_axis_info: AxisInfo,
                        is_horizontal: bool = False,
                        max_label_count: Optional[int] = None,
                        measurer: Optional[TextMeasurer] = None) -> AxisInfo:
    """
    Compute the size of the X axis from the space the Y axis leaves.

    The X axis width is the inner width of ``layout`` minus the Y axis width
    and the layout's left and right borders. Category labels share that width
    equally (a value axis assumes a fixed number of divisions) and wrap when
    they do not fit, which sets the axis height.

    Args:
        layout: The plot layout
        style: Resolved style of the X axis labels
        labels: Label texts
        y_axis_info: Result of compute_y_axis_info
        is_horizontal: Whether the X axis is the value axis
        max_label_count: Maximum number of labels shown on the axis
        measurer: Text measurer; defaults to the shared one

    Returns:
        The X axis info
    """
    measurer = measurer or get_default_measurer()
    labels = [_label(label) for label in labels]

    label_count = len(labels) if max_label_count is None else min(max_label_count, len(labels))
    width = layout.inner_width - y_axis_info.width - layout.border.left - layout.border.right
    line_width = 0 if is_horizontal else AXIS_LINE_WIDTH

    if is_horizontal:
        max_label_width = width / VALUE_AXIS_LABEL_DIVISIONS
    elif label_count > 0:
        max_label_width = width / label_count
    else:
        max_label_width = width

    label_metrics = measurer.measure_max(labels, style, max_label_width)
    height = label_metrics.height + style.margin.top + style.margin.bottom + line_width

    return AxisInfo(
        width=width,
        height=height,
        label_metrics=label_metrics,
        max_label_width=max_label_width,
    )


def coerce_pointer_label_position(axis: Axis,
                                  position: Union[PointerLabelPosition, str, None]) -> PointerLabelPosition:
    """
    Validate a pointer label position for ``axis``.

    X axis labels go on the top or bottom, Y axis labels on the left or right.
    Missing or invalid positions fall back to the axis default (bottom for X,
    left for Y); invalid ones are logged.

    Args:
        axis: The axis the pointer belongs to
        position: Requested position

    Returns:
        The position to use
    """
    default = DEFAULT_POINTER_LABEL_POSITIONS[axis]
    if position is None:
        return default

    try:
        position = PointerLabelPosition(position)
    except ValueError:
        logger.warning(f"Invalid '{axis.value}AxisPointerLabel' value: {position}")
        return default

    if position not in ALLOWED_POINTER_LABEL_POSITIONS[axis]:
        logger.warning(f"Invalid '{axis.value}AxisPointerLabel' value: {position.value}")
        return default

    return position


def reserve_axis_pointer(layout: Layout,
                         axis_info: AxisInfo,
                         label_style: ResolvedStyle,
                         axis: Union[Axis, str],
                         position: Union[PointerLabelPosition, str, None]) -> Reservation:
    """
    Reserve room for an axis pointer label and compute its offset.

    The label size is the axis extent (height for X, width for Y) plus the
    label's padding and border on that axis. Top and right labels shrink the
    inner box by the label size and margins; a bottom label only needs its top
    margin; a left label fits in the Y axis space already reserved.

    Args:
        layout: The plot layout
        axis_info: Info of the axis the pointer tracks
        label_style: Resolved style of the pointer label
        axis: Which axis the pointer belongs to
        position: Where the label goes

    Returns:
        The narrowed layout and the label margin (None when there is no label)
    """
    axis = Axis(axis)
    position = coerce_pointer_label_position(axis, position)

    if position is PointerLabelPosition.NONE:
        return Reservation(layout)

    padding = label_style.padding
    border = label_style.border
    margin = label_style.margin

    if axis is Axis.X:
        label_size = axis_info.height + padding.vertical + border.vertical
        label_margins = margin.vertical
    else:
        label_size = axis_info.width + padding.horizontal + border.horizontal
        label_margins = margin.horizontal

    if position is PointerLabelPosition.TOP:
        new_layout = layout.replace(
            inner_height=layout.inner_height - (label_size + label_margins),
            inner_y=layout.inner_y + axis_info.height + label_margins,
        )
        label_margin = label_size + margin.top - layout.inner_height
    elif position is PointerLabelPosition.RIGHT:
        new_layout = layout.replace(inner_width=layout.inner_width - (label_size + label_margins))
        label_margin = label_size - margin.left - layout.inner_width
    elif position is PointerLabelPosition.BOTTOM:
        new_layout = layout.replace(inner_height=layout.inner_height - margin.top)
        label_margin = margin.top
    else:
        new_layout = layout
        label_margin = margin.right

    return Reservation(new_layout, label_margin=label_margin)


def compute_label_interval(category_count: int, max_label_count: Optional[int]) -> int:
    """
    Number of category labels to skip between shown labels.

    Args:
        category_count: Number of categories on the axis
        max_label_count: Maximum number of labels to show, or None for all

    Returns:
        0 to show every label, otherwise the number skipped between labels
    """
    if not max_label_count or category_count <= max_label_count:
        return 0
    return math.ceil(category_count / max_label_count) - 1
