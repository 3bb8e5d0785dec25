"""
Summary aggregator: headline metrics over the whole raw dataset.

Works on the raw orders, not on normalized records, so the figures never
move when filters or sorting change and orders the normalizer skipped
still count.
"""

import math
from collections.abc import Mapping
from typing import Any, Iterable

from src.core.models import SalesSummary
from src.core.raw_order import RawOrder, get_field
from src.observability.logger import get_logger


logger = get_logger(__name__)


def _as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class SummaryAggregator:
    """Computes total sales, order count, average order value and units sold."""

    def summarize(self, raw_orders: Iterable[RawOrder]) -> SalesSummary:
        """
        Summarize raw orders.

        A missing or non-numeric total, or a units field that is not a whole
        number, adds nothing to its sum (logged as a warning); the order
        still counts.

        Returns:
            SalesSummary whose average_order_value is None for an empty dataset
        """
        total_sales = 0.0
        total_orders = 0
        total_units = 0

        for raw in raw_orders:
            total_orders += 1
            fields = raw if isinstance(raw, Mapping) else {}

            total = _as_number(get_field(fields, "total"))
            if total is None:
                logger.warning(
                    "Order total missing or not numeric, excluded from total sales",
                    extra={"record_id": get_field(fields, "id")},
                )
            else:
                total_sales += total

            units = _as_number(get_field(fields, "total_units"))
            if units is None or not units.is_integer():
                logger.warning(
                    "Order units missing or not a whole number, excluded from products sold",
                    extra={"record_id": get_field(fields, "id")},
                )
            else:
                total_units += int(units)

        average = round(total_sales / total_orders, 2) if total_orders else None

        return SalesSummary(
            total_sales=round(total_sales, 2),
            total_orders=total_orders,
            average_order_value=average,
            total_products_sold=total_units,
        )
