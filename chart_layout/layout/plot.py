"""
Plot layout.
This module lays out a single plot: its heading, its axes and axis pointer
labels, and the grid rectangle the series is drawn in.
"""

import logging
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from ..data.series import (
    compute_max_value, format_value_labels, get_categories, get_series_data, get_series_totals,
)
from ..style.resolver import ResolvedStyle, resolve_style
from ..utils.config import ChartConfig
from .axis import (
    Axis, AxisInfo, Reservation, compute_label_interval, compute_x_axis_info, compute_y_axis_info,
    reserve_axis_pointer,
)
from .box import Layout, compute_inner_box
from .text_metrics import TextMeasurer, get_default_measurer

logger = logging.getLogger(__name__)

# The grid starts one pixel left of the Y axis width so the axis line lines up
GRID_X_ADJUSTMENT = 1

POINTER_TYPES = ('line', 'shadow', 'none')


class ChartVariant(Enum):
    """How the series of a chart are drawn."""
    BAR = "bar"
    LINE = "line"
    AREA = "area"
    GROUPED_BAR = "groupedBar"
    STACKED_BAR = "stackedBar"
    STACKED_AREA = "stackedArea"

    @property
    def is_bar(self) -> bool:
        return self in (ChartVariant.BAR, ChartVariant.GROUPED_BAR, ChartVariant.STACKED_BAR)

    @property
    def is_area(self) -> bool:
        return self in (ChartVariant.AREA, ChartVariant.STACKED_AREA)

    @property
    def is_stacked(self) -> bool:
        return self in (ChartVariant.STACKED_BAR, ChartVariant.STACKED_AREA)

    @property
    def is_grouped(self) -> bool:
        return self is ChartVariant.GROUPED_BAR

    @property
    def combines_series(self) -> bool:
        """Whether all series are drawn in a single plot."""
        return self.is_grouped or self.is_stacked


class Orientation(Enum):
    """Direction of the value axis."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def classify_variant(value: Union[ChartVariant, str, None]) -> ChartVariant:
    """
    Get the chart variant for ``value``.

    Args:
        value: Variant name; None means ``bar``

    Returns:
        The variant; unknown names log a warning and give ``bar``
    """
    if value is None:
        return ChartVariant.BAR
    try:
        return ChartVariant(value)
    except ValueError:
        logger.warning(f"Invalid 'variant' value: {value}")
        return ChartVariant.BAR


def classify_orientation(value: Union[Orientation, str, None]) -> Orientation:
    """
    Get the orientation for ``value``.

    Args:
        value: Orientation name; None means ``vertical``

    Returns:
        The orientation; unknown names log a warning and give ``vertical``
    """
    if value is None:
        return Orientation.VERTICAL
    try:
        return Orientation(value)
    except ValueError:
        logger.warning(f"Invalid 'orientation' value: {value}")
        return Orientation.VERTICAL


class HeadingReservation:
    """
    Space reserved at the top of a layout for a title and a drill up button.
    """

    def __init__(self, layout: Layout, title: Optional[Layout] = None, button: Optional[Layout] = None):
        """
        Args:
            layout: The layout left below the heading
            title: Region of the title, with its inner box
            button: Region of the drill up button
        """
        self.layout = layout
        self.title = title
        self.button = button

    def __repr__(self) -> str:
        return f"HeadingReservation(layout={self.layout!r}, title={self.title!r}, button={self.button!r})"


def _resolved(style: Any, context: Any) -> ResolvedStyle:
    return style if isinstance(style, ResolvedStyle) else resolve_style(style, context)


def reserve_heading(layout: Layout,
                    title: Optional[str],
                    title_style: Any = None,
                    drill_up_text: Optional[str] = None,
                    button_style: Any = None,
                    measurer: Optional[TextMeasurer] = None) -> HeadingReservation:
    """
    Reserve a band at the top of the inner box of ``layout`` for a heading.

    The drill up button, when there is one, sits on the left and lines up
    with the title's left margin; the title follows it. The band is as tall
    as the taller of the two, and a shorter title is centered in it.

    Args:
        layout: The layout to reserve from
        title: Title text, or None for no title
        title_style: Style of the title
        drill_up_text: Text of the drill up button, or None for no button
        button_style: Style of the drill up button
        measurer: Text measurer; defaults to the shared one

    Returns:
        The narrowed layout and the title and button regions
    """
    if not title and drill_up_text is None:
        return HeadingReservation(layout)

    measurer = measurer or get_default_measurer()
    title_style = _resolved(title_style, layout)

    button = None
    button_width = 0
    button_band = 0
    if drill_up_text is not None:
        button_style = _resolved(button_style, layout)
        metrics = measurer.measure(drill_up_text, button_style)
        margin = button_style.margin
        width = metrics.width + button_style.padding.horizontal + button_style.border.horizontal
        height = metrics.font_height + button_style.padding.vertical + button_style.border.vertical
        button = compute_inner_box(
            Layout.from_rect(
                layout.inner_x + margin.left + title_style.margin.left,
                layout.inner_y + margin.top,
                width,
                height,
            ),
            button_style,
        )
        button_width = width + margin.horizontal
        button_band = height + margin.vertical

    title_region = None
    title_band = 0
    if title:
        margin = title_style.margin
        frame = title_style.padding.horizontal + title_style.border.horizontal
        width = layout.inner_width - button_width - margin.horizontal
        metrics = measurer.measure(title, title_style, width - frame if width - frame > 0 else None)
        height = metrics.height + title_style.padding.vertical + title_style.border.vertical
        title_band = height + margin.vertical
        # Center the title in the band when the button is taller
        offset = max(0, button_band - title_band) / 2
        title_region = compute_inner_box(
            Layout.from_rect(
                layout.inner_x + button_width + margin.left,
                layout.inner_y + margin.top + offset,
                width,
                height,
            ),
            title_style,
        )

    band = max(title_band, button_band)
    return HeadingReservation(layout.shrink(top=band), title_region, button)


def resolve_value_axis_max(scale: Optional[str], value_axis_max: Any, data_max: Any) -> Any:
    """
    Get the maximum of the value axis.

    Args:
        scale: ``shared`` or ``separate``
        value_axis_max: A number, ``dataMax`` or ``dataMaxRoundedUp``
        data_max: The largest value in the data

    Returns:
        The axis maximum, ``dataMax``, or None to let the charting engine
        round the data maximum up. Shared scales only support a number or
        the data maximum, since plots must agree on the axis.
    """
    if scale == 'shared':
        if value_axis_max not in (None, 'dataMax', 'dataMaxRoundedUp'):
            return value_axis_max
        return data_max

    if value_axis_max != 'dataMaxRoundedUp':
        return value_axis_max
    return None


class PlotGeometry:
    """
    Layout of a single plot.
    """

    def __init__(self, layout: Layout, grid: Layout, x_axis: AxisInfo, y_axis: AxisInfo,
                 x_pointer_label_margin: Optional[float], y_pointer_label_margin: Optional[float],
                 categories: List[Any], values: List[Any], max_value: Any, value_axis_max: Any,
                 label_interval: int, variant: ChartVariant, orientation: Orientation):
        self.layout = layout
        self.grid = grid
        self.x_axis = x_axis
        self.y_axis = y_axis
        self.x_pointer_label_margin = x_pointer_label_margin
        self.y_pointer_label_margin = y_pointer_label_margin
        self.categories = categories
        self.values = values
        self.max_value = max_value
        self.value_axis_max = value_axis_max
        self.label_interval = label_interval
        self.variant = variant
        self.orientation = orientation

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    def __repr__(self) -> str:
        return f"PlotGeometry(grid={self.grid!r}, x_axis={self.x_axis!r}, y_axis={self.y_axis!r})"


def _reserve_pointer(layout: Layout, axis_info: AxisInfo, config: ChartConfig, axis: Axis,
                     context: Any) -> Reservation:
    pointer_type = config.option(f"{axis.value}_axis_pointer")
    if pointer_type not in POINTER_TYPES:
        logger.warning(f"Invalid '{axis.value}AxisPointer' value: {pointer_type}")
        pointer_type = 'none'
    if pointer_type == 'none':
        return Reservation(layout)

    label_style = resolve_style(config.style(f"{axis.value}_axis_pointer_label"), context)
    position = config.option(f"{axis.value}_axis_pointer_label")
    return reserve_axis_pointer(layout, axis_info, label_style, axis, position)


def layout_plot(layout: Layout,
                series: Mapping[str, Any],
                config: Optional[ChartConfig] = None,
                categories: Optional[List[Any]] = None,
                max_value: Any = None,
                context: Any = None,
                measurer: Optional[TextMeasurer] = None) -> PlotGeometry:
    """
    Lay out one plot inside ``layout``.

    The steps run in a fixed order, each taking the layout the previous one
    returned: Y axis, Y axis pointer, X axis (which needs the Y axis width),
    X axis pointer, and finally the grid.

    Args:
        layout: Layout of the plot
        series: The series to plot; for grouped and stacked variants its
            ``data`` holds the sub-series
        config: Chart configuration; defaults to ChartConfig()
        categories: Shared categories, computed from the series if None
        max_value: Shared maximum value, computed from the series if None
        context: Sizing context for resolving the axis styles; defaults to
            ``layout``
        measurer: Text measurer; defaults to the shared one

    Returns:
        The plot geometry
    """
    config = config or ChartConfig()
    measurer = measurer or get_default_measurer()
    context = layout if context is None else context

    variant = classify_variant(config.option("variant"))
    orientation = classify_orientation(config.option("orientation"))
    is_horizontal = orientation is Orientation.HORIZONTAL
    series_data = list(series.get('data') or []) if variant.combines_series else [series]

    if categories is None:
        categories = get_categories(series_data, config.option("category_axis_sort"))
    if max_value is None:
        max_value = compute_max_value(series_data)

    if variant.combines_series:
        values = get_series_totals(series_data, categories)
    else:
        values = get_series_data(series.get('data') or [], categories, 'name', 'value')
    # Not the real tick labels, but close enough for sizing
    value_texts = format_value_labels(values)

    y_axis_style = resolve_style(config.style("y_axis"), context)
    y_axis = compute_y_axis_info(
        y_axis_style,
        categories if is_horizontal else value_texts,
        max_value,
        measurer,
    )
    y_pointer = _reserve_pointer(layout, y_axis, config, Axis.Y, context)
    layout = y_pointer.layout

    x_axis_style = resolve_style(config.style("x_axis"), context)
    max_label_count = config.category_axis_max_label_count
    x_axis = compute_x_axis_info(
        layout,
        x_axis_style,
        value_texts if is_horizontal else categories,
        y_axis,
        is_horizontal,
        max_label_count,
        measurer,
    )
    x_pointer = _reserve_pointer(layout, x_axis, config, Axis.X, context)
    layout = x_pointer.layout

    grid = Layout.from_rect(
        layout.inner_x + y_axis.width - GRID_X_ADJUSTMENT,
        layout.inner_y + y_axis.height_overflow,
        x_axis.width,
        layout.inner_height - x_axis.height - y_axis.height_overflow,
    )

    return PlotGeometry(
        layout=layout,
        grid=grid,
        x_axis=x_axis,
        y_axis=y_axis,
        x_pointer_label_margin=x_pointer.label_margin,
        y_pointer_label_margin=y_pointer.label_margin,
        categories=list(categories),
        values=values,
        max_value=max_value,
        value_axis_max=resolve_value_axis_max(
            config.option("value_axis_scale"), config.option("value_axis_max"), max_value,
        ),
        label_interval=compute_label_interval(len(categories), max_label_count),
        variant=variant,
        orientation=orientation,
    )
