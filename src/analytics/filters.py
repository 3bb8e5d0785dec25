"""
Filter pipeline: amount predicate, then date predicate, in that order.

The custom-range branch ends processing on its own: its output is final
and the sorter is never applied to it. Callers read ``terminated`` on the
outcome to know whether sorting is still due.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from src.core.dates import ensure_utc, utcnow
from src.core.models import DATE_WINDOWS, AnalyticRecord, CustomRange, ViewConfig


@dataclass(frozen=True)
class FilterOutcome:
    records: list[AnalyticRecord]
    terminated: bool = False


def filter_by_amount(records: Sequence[AnalyticRecord], min_total: float | None) -> list[AnalyticRecord]:
    """Keep records whose total strictly exceeds min_total; None keeps all."""
    if min_total is None:
        return list(records)
    return [record for record in records if record.total > min_total]


def filter_by_range(records: Sequence[AnalyticRecord], custom_range: CustomRange) -> list[AnalyticRecord]:
    """Keep records with start <= date <= end."""
    start, end = custom_range.start, custom_range.end
    return [record for record in records if start <= record.date <= end]


def filter_since(records: Sequence[AnalyticRecord], cutoff: datetime) -> list[AnalyticRecord]:
    """Keep records dated at or after the cutoff."""
    return [record for record in records if record.date >= cutoff]


class FilterPipeline:
    """
    Applies the view's amount and date predicates.

    Args:
        clock: Returns "now" for relative windows; injectable for tests
    """

    def __init__(self, clock=utcnow):
        self.clock = clock

    def apply(
        self,
        records: Sequence[AnalyticRecord],
        config: ViewConfig,
        now: datetime | None = None,
    ) -> FilterOutcome:
        """
        Filter records for one view.

        Args:
            records: Normalized records in input order
            config: Active selections
            now: Anchor for relative windows, defaults to the pipeline clock;
                a naive value is taken to be UTC

        Returns:
            FilterOutcome with the surviving records in their original
            relative order; ``terminated`` is set for custom ranges
        """
        filtered = filter_by_amount(records, config.min_total)

        if config.date_mode == "custom-range":
            return FilterOutcome(filter_by_range(filtered, config.custom_range), terminated=True)

        window = DATE_WINDOWS.get(config.date_mode)
        if window is not None:
            anchor = ensure_utc(now) if now is not None else self.clock()
            cutoff = anchor - window
            filtered = filter_since(filtered, cutoff)

        return FilterOutcome(filtered)
