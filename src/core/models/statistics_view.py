"""
StatisticsView model: everything one compute cycle hands to the display layer.
"""

from typing import List

from pydantic import BaseModel, Field

from .chart_series import ChartSeries
from .sales_summary import SalesSummary
from .skipped_order import SkippedOrder
from .view_config import ViewConfig


class StatisticsView(BaseModel):
    """
    Chart series for the filtered view plus the unfiltered summary.

    Attributes:
        config: Selections the series were computed with
        series: Chart-ready series of the filtered, sorted records
        summary: Metrics over the whole raw dataset
        skipped: Raw orders the normalizer rejected
    """

    config: ViewConfig
    series: ChartSeries
    summary: SalesSummary
    skipped: List[SkippedOrder] = Field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def to_payload(self) -> dict:
        """Serialize with camelCase keys for the display layer."""
        payload = self.model_dump(mode="json", by_alias=True)
        payload["skippedCount"] = self.skipped_count
        return payload
