"""
Sales analytics: normalize, filter, sort and reshape orders for charts.
"""

from .filters import FilterOutcome, FilterPipeline
from .normalizer import NormalizationResult, OrderNormalizer
from .pipeline import StatisticsPipeline, StatisticsSession
from .series import SeriesBuilder
from .sorter import Sorter
from .sources import BaseOrderSource, FileOrderSource, HttpOrderSource
from .summary import SummaryAggregator

__all__ = [
    "OrderNormalizer",
    "NormalizationResult",
    "FilterPipeline",
    "FilterOutcome",
    "Sorter",
    "SeriesBuilder",
    "SummaryAggregator",
    "StatisticsPipeline",
    "StatisticsSession",
    "BaseOrderSource",
    "FileOrderSource",
    "HttpOrderSource",
]
