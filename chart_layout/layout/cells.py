"""
Grid partitioning for charts that draw one plot per series.
"""

import logging
import math
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..errors import ConfigurationError
from ..style.resolver import ResolvedStyle
from .box import Layout, compute_inner_box

logger = logging.getLogger(__name__)


class Cell:
    """
    One region of a grid layout.
    """

    def __init__(self, index: int, row: int, column: int, layout: Layout):
        """
        Initialize a cell.

        Args:
            index: Position of the cell in row-major order
            row: Zero-based row
            column: Zero-based column
            layout: Geometry of the cell, inner box included
        """
        self.index = index
        self.row = row
        self.column = column
        self.layout = layout

    def __repr__(self) -> str:
        return f"Cell(index={self.index}, row={self.row}, column={self.column}, layout={self.layout!r})"


def _require_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value != int(value):
        raise ConfigurationError(f"'{name}' must be a whole number, got {value!r}")
    if value < 1:
        raise ConfigurationError(f"'{name}' must be at least 1, got {value!r}")
    return int(value)


def compute_grid_shape(count: int, max_columns: Optional[int] = None) -> Tuple[int, int]:
    """
    Compute how many rows and columns ``count`` cells need.

    Args:
        count: Number of cells
        max_columns: Maximum number of columns; None puts every cell in one row

    Returns:
        Tuple of (rows, columns)

    Raises:
        ConfigurationError: If a value is not a whole number of at least 1
    """
    count = _require_count('count', count)
    if max_columns is None:
        columns = count
    else:
        columns = min(count, _require_count('max_columns', max_columns))

    rows = math.ceil(count / columns)
    return rows, columns


def _track_edges(start: float, size: float, tracks: int) -> List[float]:
    # Shared edges keep neighbouring tracks exactly adjacent
    return [start + size * index / tracks for index in range(tracks + 1)]


def layout_cells(layout: Layout,
                 count: int,
                 max_columns: Optional[int] = None,
                 cell_style: Union[ResolvedStyle, Mapping[str, Any], str, None] = None) -> List[Cell]:
    """
    Partition the inner box of ``layout`` into ``count`` equally sized cells.

    Cells fill the grid row by row; the last row may hold fewer cells than
    there are columns. Each cell gets its inner box from ``cell_style``, with
    percentages resolved against the cell's own size.

    Args:
        layout: The layout whose inner box is partitioned
        count: Number of cells, normally the number of series
        max_columns: Maximum number of columns
        cell_style: Style applied to every cell

    Returns:
        The cells in row-major order
    """
    rows, columns = compute_grid_shape(count, max_columns)
    x_edges = _track_edges(layout.inner_x, layout.inner_width, columns)
    y_edges = _track_edges(layout.inner_y, layout.inner_height, rows)

    logger.debug(f"Laying out {count} cells in {rows} rows and {columns} columns")

    cells = []
    for index in range(count):
        row, column = divmod(index, columns)
        rect = Layout.from_rect(
            x_edges[column],
            y_edges[row],
            x_edges[column + 1] - x_edges[column],
            y_edges[row + 1] - y_edges[row],
        )
        cells.append(Cell(index, row, column, compute_inner_box(rect, cell_style)))

    return cells
