"""
Series builder: reshapes the final records into chart-ready series.
"""

from typing import Sequence

from src.core.models import AnalyticRecord, ChartSeries


class SeriesBuilder:
    """
    Builds index-aligned labels, totals and product counts.

    The chart type chosen by the display layer (bar, pie, line) does not
    change the series.
    """

    label_prefix = "Order "

    def build(self, records: Sequence[AnalyticRecord]) -> ChartSeries:
        return ChartSeries(
            labels=[f"{self.label_prefix}{record.id}" for record in records],
            totals=[record.total for record in records],
            product_counts=[record.product_count for record in records],
        )
