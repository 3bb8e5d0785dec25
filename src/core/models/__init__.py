"""
Core data models for the sales statistics pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .analytic_record import AnalyticRecord
from .chart_series import ChartSeries
from .sales_summary import SalesSummary
from .skipped_order import SkippedOrder
from .statistics_view import StatisticsView
from .view_config import (
    AMOUNT_THRESHOLDS,
    DATE_WINDOWS,
    CustomRange,
    ViewConfig,
)

__all__ = [
    "AnalyticRecord",
    "ChartSeries",
    "SalesSummary",
    "SkippedOrder",
    "StatisticsView",
    "CustomRange",
    "ViewConfig",
    "AMOUNT_THRESHOLDS",
    "DATE_WINDOWS",
]
