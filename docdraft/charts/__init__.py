"""
Chart support: data tables, the chart service interface and its Pillow implementation.
"""

from .dataset import DataTable
from .service import ChartService, RenderedChart
from .pillow_service import PillowChartService

__all__ = [
    "DataTable",
    "ChartService",
    "RenderedChart",
    "PillowChartService",
]
