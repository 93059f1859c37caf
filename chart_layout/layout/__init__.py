"""
Layout package.
This package turns resolved styles and measured text into chart geometry.
"""

from .axis import (
    Axis, AxisInfo, PointerLabelPosition, Reservation, compute_label_interval, compute_x_axis_info,
    compute_y_axis_info, reserve_axis_pointer,
)
from .box import Layout, compute_inner_box
from .cells import Cell, compute_grid_shape, layout_cells
from .chart import CellGeometry, ChartGeometry, TextOverlay, layout_chart
from .plot import (
    ChartVariant, HeadingReservation, Orientation, PlotGeometry, classify_orientation, classify_variant,
    layout_plot, reserve_heading, resolve_value_axis_max,
)
from .text_metrics import TextMeasurer, TextMetrics, measure_max_text, measure_text

__all__ = [
    'Axis', 'AxisInfo', 'PointerLabelPosition', 'Reservation', 'compute_label_interval',
    'compute_x_axis_info', 'compute_y_axis_info', 'reserve_axis_pointer',
    'Layout', 'compute_inner_box',
    'Cell', 'compute_grid_shape', 'layout_cells',
    'CellGeometry', 'ChartGeometry', 'TextOverlay', 'layout_chart',
    'ChartVariant', 'HeadingReservation', 'Orientation', 'PlotGeometry', 'classify_orientation',
    'classify_variant', 'layout_plot', 'reserve_heading', 'resolve_value_axis_max',
    'TextMeasurer', 'TextMetrics', 'measure_max_text', 'measure_text',
]
