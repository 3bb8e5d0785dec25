"""
Stable ordering of records by total.
"""

from typing import Sequence

from src.core.models import AnalyticRecord


class Sorter:
    """Orders records by total; equal totals keep their relative order."""

    def sort(self, records: Sequence[AnalyticRecord], sort_order: str) -> list[AnalyticRecord]:
        if sort_order == "none":
            return list(records)
        if sort_order not in ("ascending", "descending"):
            raise ValueError(f"Unknown sort order: {sort_order}")
        # sorted() stays stable with reverse=True
        return sorted(records, key=lambda record: record.total, reverse=sort_order == "descending")
