"""
Utility modules for the layout engine.
"""

from chart_layout.utils.config import ChartConfig
from chart_layout.utils.logging import setup_logging, PerformanceLogger

__all__ = [
    'ChartConfig',
    'setup_logging',
    'PerformanceLogger',
]
