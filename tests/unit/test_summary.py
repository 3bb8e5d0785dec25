"""
Unit tests for the summary aggregator.
"""

import pytest

from src.analytics import SummaryAggregator

pytestmark = pytest.mark.unit


class TestSummaryAggregator:
    """Tests for SummaryAggregator"""

    def test_summarizes_raw_orders(self, raw_cart_factory):
        raws = [
            raw_cart_factory(1, 50, units=2),
            raw_cart_factory(2, 150, units=5),
            raw_cart_factory(3, 900, units=1),
        ]

        summary = SummaryAggregator().summarize(raws)

        assert summary.total_sales == pytest.approx(1100.0)
        assert summary.total_orders == 3
        assert summary.average_order_value == pytest.approx(366.67)
        assert summary.total_products_sold == 8

    def test_empty_dataset_has_no_average(self):
        summary = SummaryAggregator().summarize([])

        assert summary.total_orders == 0
        assert summary.total_sales == 0.0
        assert summary.average_order_value is None
        assert summary.total_products_sold == 0

    def test_units_field_aliases(self):
        raws = [
            {"id": 1, "total": 10, "totalUnits": 4},
            {"id": 2, "total": 10, "total_units": 1},
        ]
        assert SummaryAggregator().summarize(raws).total_products_sold == 5

    def test_gaps_count_as_orders_but_add_nothing(self):
        raws = [
            {"id": 1, "total": 40, "totalProducts": 2},
            {"id": 2, "products": []},
            {"id": 3, "total": "n/a", "totalProducts": "many"},
        ]

        summary = SummaryAggregator().summarize(raws)

        assert summary.total_orders == 3
        assert summary.total_sales == pytest.approx(40.0)
        assert summary.average_order_value == pytest.approx(13.33)
        assert summary.total_products_sold == 2

    def test_orders_the_normalizer_would_skip_still_count(self):
        raws = [
            {"id": 1, "total": 100, "totalProducts": 1, "products": [{}]},
            {"id": 2, "total": -20, "totalProducts": 0, "products": []},
        ]

        summary = SummaryAggregator().summarize(raws)

        assert summary.total_orders == 2
        assert summary.total_sales == pytest.approx(80.0)

    def test_fractional_units_are_not_truncated_into_the_count(self):
        raws = [
            {"id": 1, "total": 10, "totalProducts": 2.5},
            {"id": 2, "total": 10, "totalProducts": 3.0},
            {"id": 3, "total": 10, "totalProducts": "4"},
        ]

        summary = SummaryAggregator().summarize(raws)

        assert summary.total_orders == 3
        assert summary.total_products_sold == 7
