"""
Chart layout.
This module runs the whole layout pass for a chart: the chart box, its title
and drill up button, one cell per plot, and each cell's title and plot.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from ..data.series import compute_max_value, get_categories
from ..style.resolver import resolve_style
from ..utils.config import ChartConfig
from ..utils.logging import PerformanceLogger
from .box import Layout, compute_inner_box
from .cells import Cell, layout_cells
from .plot import HeadingReservation, PlotGeometry, classify_variant, layout_plot, reserve_heading
from .text_metrics import TextMeasurer, get_default_measurer

logger = logging.getLogger(__name__)
perf = PerformanceLogger(logger, "chart")


class TextOverlay:
    """
    Text drawn over a region instead of a plot, such as a no data message.
    """

    def __init__(self, text: str, region: Layout):
        self.text = text
        self.region = region

    def __repr__(self) -> str:
        return f"TextOverlay(text={self.text!r}, region={self.region!r})"


class CellGeometry:
    """
    Layout of one cell: its title and either a plot or a text overlay.
    """

    def __init__(self, cell: Cell, series: Mapping[str, Any], heading: HeadingReservation,
                 plot: Optional[PlotGeometry] = None, overlay: Optional[TextOverlay] = None):
        """
        Args:
            cell: The grid cell
            series: The series drawn in the cell
            heading: The cell title reservation
            plot: The plot geometry, None when the cell shows an overlay
            overlay: The no data overlay, if any
        """
        self.cell = cell
        self.series = series
        self.heading = heading
        self.plot = plot
        self.overlay = overlay

    @property
    def layout(self) -> Layout:
        return self.cell.layout

    def __repr__(self) -> str:
        return f"CellGeometry(cell={self.cell!r}, plot={self.plot!r}, overlay={self.overlay!r})"


class ChartGeometry:
    """
    Layout of a whole chart.
    """

    def __init__(self, layout: Layout, heading: HeadingReservation, cells: List[CellGeometry]):
        """
        Args:
            layout: The chart box with its inner box
            heading: The chart title and drill up button reservation
            cells: One entry per plot, in row-major order
        """
        self.layout = layout
        self.heading = heading
        self.cells = cells

    @property
    def plots(self) -> List[PlotGeometry]:
        return [cell.plot for cell in self.cells if cell.plot is not None]

    def __repr__(self) -> str:
        return f"ChartGeometry(layout={self.layout!r}, cells={len(self.cells)})"


def _has_data(series: Mapping[str, Any]) -> bool:
    return bool(series.get('data'))


def layout_chart(width: float,
                 height: float,
                 series: Sequence[Mapping[str, Any]],
                 config: Optional[ChartConfig] = None,
                 title: Optional[str] = None,
                 drill_up: bool = False,
                 measurer: Optional[TextMeasurer] = None) -> ChartGeometry:
    """
    Lay out a chart of ``width`` by ``height`` pixels.

    Grouped and stacked variants draw every series in a single plot; other
    variants draw one plot per series, each in its own cell with the series
    label as cell title when there is more than one.

    Args:
        width: Chart width in pixels
        height: Chart height in pixels
        series: The data series, each a mapping with ``label`` and ``data``
        config: Chart configuration; defaults to ChartConfig()
        title: Chart title, or None for no title
        drill_up: Whether to show the drill up button
        measurer: Text measurer; defaults to the shared one

    Returns:
        The chart geometry
    """
    with perf.measure("layout"):
        return _layout_chart(
            width, height, series, config or ChartConfig(), title, drill_up,
            measurer or get_default_measurer(),
        )


def _layout_chart(width: float, height: float, series: Sequence[Mapping[str, Any]], config: ChartConfig,
                  title: Optional[str], drill_up: bool, measurer: TextMeasurer) -> ChartGeometry:
    variant = classify_variant(config.option("variant"))

    outer = Layout.from_rect(0, 0, width, height)
    chart = compute_inner_box(outer, config.style("chart"))

    heading = reserve_heading(
        chart,
        title,
        resolve_style(config.style("chart_title"), chart),
        drill_up_text=config.option("drill_up_button_text") if drill_up else None,
        button_style=resolve_style(config.style("drill_up_button"), chart),
        measurer=measurer,
    )
    layout = heading.layout

    all_series = list(series)
    if variant.combines_series:
        plot_series = [{'data': all_series}]
    else:
        plot_series = all_series or [{'data': []}]

    sort = config.option("category_axis_sort")
    categories = None
    if config.option("category_axis_scale") == 'shared':
        categories = get_categories(all_series, sort)
    max_value = None
    if config.option("value_axis_scale") == 'shared':
        max_value = compute_max_value(all_series)

    cells = layout_cells(layout, len(plot_series), config.max_columns, config.style("cell"))
    no_data_text = config.option("no_data_text")

    results = []
    for cell, item in zip(cells, plot_series):
        cell_title = item.get('label') if len(plot_series) > 1 else None
        cell_heading = reserve_heading(
            cell.layout,
            cell_title,
            resolve_style(config.style("cell_title"), cell.layout),
            measurer=measurer,
        )
        plot_layout = cell_heading.layout

        if no_data_text and not _has_data(item):
            logger.debug(f"No data for cell {cell.index}, showing '{no_data_text}'")
            overlay = TextOverlay(no_data_text, plot_layout.inner_rect())
            results.append(CellGeometry(cell, item, cell_heading, overlay=overlay))
            continue

        if plot_layout.is_degenerate:
            logger.debug(f"Cell {cell.index} has no room left for a plot: {plot_layout!r}")

        plot = layout_plot(
            plot_layout,
            item,
            config,
            categories=categories,
            max_value=max_value,
            context=layout,
            measurer=measurer,
        )
        results.append(CellGeometry(cell, item, cell_heading, plot=plot))

    return ChartGeometry(chart, heading, results)
