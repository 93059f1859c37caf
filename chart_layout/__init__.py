"""
Chart Layout - CSS-like style resolution and box layout for charts.
"""

# Import utilities
from chart_layout.utils.logging import setup_logging

# Set up basic logging
logger = setup_logging()

from chart_layout.errors import ChartLayoutError, ConfigurationError
from chart_layout.layout import Layout, compute_inner_box, layout_cells, layout_chart, layout_plot
from chart_layout.style import normalize_style, parse_style, resolve_style
from chart_layout.utils.config import ChartConfig

# Package information
__version__ = "0.1.0"
__author__ = "Chart Layout Team"
__description__ = "CSS-like style resolution and box layout for charts"

__all__ = [
    'ChartConfig', 'ChartLayoutError', 'ConfigurationError', 'Layout', 'compute_inner_box',
    'layout_cells', 'layout_chart', 'layout_plot', 'normalize_style', 'parse_style', 'resolve_style',
    'setup_logging',
]

logger.debug(f"Chart Layout v{__version__} initialized")
