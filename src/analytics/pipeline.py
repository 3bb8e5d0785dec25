"""
Statistics pipeline orchestration.

Flow for one view:
    raw orders -> normalize -> filter -> sort -> build series
and, independently, raw orders -> summary.

StatisticsSession wraps the single fetch: it loads once, keeps the
normalized records so synthesized dates stay put, and recomputes views
from them whenever the selections change.
"""

from datetime import datetime
from typing import Literal, Sequence

from src.core.exceptions import DataUnavailableError, OrderFetchError
from src.core.models import StatisticsView, ViewConfig
from src.core.raw_order import RawOrder
from src.observability import metrics
from src.observability.logger import get_logger, log_operation

from .filters import FilterPipeline
from .normalizer import NormalizationResult, OrderNormalizer
from .series import SeriesBuilder
from .sorter import Sorter
from .sources import BaseOrderSource
from .summary import SummaryAggregator


logger = get_logger(__name__)

FetchStatus = Literal["pending", "ready", "unavailable"]


class StatisticsPipeline:
    """
    Turns normalized records and raw orders into a StatisticsView.

    Stages are injectable; the defaults are stateless.
    """

    def __init__(
        self,
        filter_pipeline: FilterPipeline | None = None,
        sorter: Sorter | None = None,
        series_builder: SeriesBuilder | None = None,
        summary_aggregator: SummaryAggregator | None = None,
    ):
        self.filter_pipeline = filter_pipeline or FilterPipeline()
        self.sorter = sorter or Sorter()
        self.series_builder = series_builder or SeriesBuilder()
        self.summary_aggregator = summary_aggregator or SummaryAggregator()

    def compute(
        self,
        raw_orders: Sequence[RawOrder],
        normalized: NormalizationResult,
        config: ViewConfig,
        now: datetime | None = None,
    ) -> StatisticsView:
        """
        Compute one view.

        Args:
            raw_orders: The full unfiltered dataset (summary input)
            normalized: Normalizer output for the same dataset
            config: Active filter and sort selections
            now: Anchor for relative date windows

        Returns:
            StatisticsView with filtered series and unfiltered summary
        """
        with log_operation(
            "Computing statistics view",
            logger=logger,
            amount_threshold=config.amount_threshold,
            date_mode=config.date_mode,
            sort_order=config.sort_order,
        ) as op:
            outcome = self.filter_pipeline.apply(normalized.records, config, now=now)
            records = outcome.records
            if not outcome.terminated:
                records = self.sorter.sort(records, config.sort_order)

            view = StatisticsView(
                config=config,
                series=self.series_builder.build(records),
                summary=self.summary_aggregator.summarize(raw_orders),
                skipped=normalized.skipped,
            )

        metrics.record_view(config.date_mode, len(records), op.duration)
        return view


class StatisticsSession:
    """
    One fetch of raw orders plus any number of view computations over it.

    Args:
        source: Where the raw orders come from
        normalizer: Normalizer (its date synthesizer decides record dates)
        pipeline: View computation stages
    """

    def __init__(
        self,
        source: BaseOrderSource,
        normalizer: OrderNormalizer | None = None,
        pipeline: StatisticsPipeline | None = None,
    ):
        self.source = source
        self.normalizer = normalizer or OrderNormalizer()
        self.pipeline = pipeline or StatisticsPipeline()

        self.status: FetchStatus = "pending"
        self.error: str | None = None
        self.raw_orders: list[RawOrder] = []
        self.normalized: NormalizationResult | None = None

    def load(self) -> FetchStatus:
        """
        Fetch and normalize the raw orders.

        Runs the fetch at most once; later calls return the settled status.
        A failed fetch leaves the session unavailable for good.
        """
        if self.status != "pending":
            return self.status

        try:
            raw_orders = self.source.fetch()
        except OrderFetchError as e:
            metrics.record_fetch(self.source.name, success=False)
            logger.error("Order fetch failed", extra={"source": self.source.name, "error_message": str(e)})
            self.status = "unavailable"
            self.error = str(e)
            return self.status

        metrics.record_fetch(self.source.name, success=True)
        logger.info(f"Fetched {len(raw_orders)} raw orders", extra={"source": self.source.name})

        self.raw_orders = raw_orders
        self.normalized = self.normalizer.normalize_batch(raw_orders)
        self.status = "ready"
        return self.status

    def compute(self, config: ViewConfig, now: datetime | None = None) -> StatisticsView:
        """
        Compute a view over the loaded data.

        Raises:
            DataUnavailableError: If load() has not succeeded
        """
        if self.status != "ready":
            detail = f": {self.error}" if self.error else ""
            raise DataUnavailableError(f"Order data is {self.status}{detail}")

        return self.pipeline.compute(self.raw_orders, self.normalized, config, now=now)
