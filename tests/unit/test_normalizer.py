"""
Unit tests for the order record normalizer and date synthesis.
"""

import random
from datetime import timedelta

import pytest

from src.analytics import OrderNormalizer
from src.core.dates import DateSynthesizer
from src.core.exceptions import InvalidRecordError

pytestmark = pytest.mark.unit


class TestDateSynthesizer:
    """Tests for DateSynthesizer"""

    def test_dates_fall_on_whole_days_within_window(self, seeded_synthesizer, now):
        for _ in range(200):
            date = seeded_synthesizer.draw()
            offset = now - date
            assert timedelta(0) <= offset <= timedelta(days=29)
            assert offset.seconds == 0 and offset.microseconds == 0

    def test_same_seed_same_dates(self, now):
        first = DateSynthesizer.seeded(42, now=now)
        second = DateSynthesizer.seeded(42, now=now)
        assert [first.draw() for _ in range(10)] == [second.draw() for _ in range(10)]

    def test_window_must_be_positive(self):
        with pytest.raises(ValueError):
            DateSynthesizer(window_days=0)

    def test_naive_anchor_taken_as_utc(self, now):
        synthesizer = DateSynthesizer.seeded(5, now=now.replace(tzinfo=None))

        assert synthesizer.now == now
        assert synthesizer.draw().tzinfo is not None


class TestOrderNormalizer:
    """Tests for OrderNormalizer"""

    def test_normalize_cart(self, seeded_synthesizer, raw_cart_factory):
        normalizer = OrderNormalizer(seeded_synthesizer)
        record = normalizer.normalize(raw_cart_factory(7, 103.5, products=4))

        assert record.id == 7
        assert record.total == 103.5
        assert record.product_count == 4
        assert record.date <= seeded_synthesizer.now

    def test_line_item_aliases(self, seeded_synthesizer):
        normalizer = OrderNormalizer(seeded_synthesizer)
        record = normalizer.normalize({"id": "A-1", "total": "20.00", "lineItems": [{}, {}, {}]})

        assert record.id == "A-1"
        assert record.total == 20.0
        assert record.product_count == 3

    def test_empty_line_items_are_valid(self, seeded_synthesizer):
        record = OrderNormalizer(seeded_synthesizer).normalize({"id": 1, "total": 0, "products": []})
        assert record.product_count == 0
        assert record.total == 0.0

    def test_missing_total_raises(self, seeded_synthesizer):
        normalizer = OrderNormalizer(seeded_synthesizer)

        with pytest.raises(InvalidRecordError) as exc_info:
            normalizer.normalize({"id": 3, "products": []})

        assert exc_info.value.record_id == 3
        assert exc_info.value.failed_rules == ["total_required"]

    def test_negative_total_raises(self, seeded_synthesizer):
        with pytest.raises(InvalidRecordError) as exc_info:
            OrderNormalizer(seeded_synthesizer).normalize({"id": 3, "total": -5, "products": []})

        assert exc_info.value.failed_rules == ["total_range"]

    def test_non_numeric_total_stops_at_type_check(self, seeded_synthesizer):
        with pytest.raises(InvalidRecordError) as exc_info:
            OrderNormalizer(seeded_synthesizer).normalize({"id": 3, "total": "free", "products": []})

        assert exc_info.value.failed_rules == ["total_type_check"]

    def test_all_failures_collected(self, seeded_synthesizer):
        with pytest.raises(InvalidRecordError) as exc_info:
            OrderNormalizer(seeded_synthesizer).normalize({"total": -1, "products": "three"})

        assert exc_info.value.failed_rules == [
            "id_required",
            "total_range",
            "line_items_type_check",
        ]
        assert len(exc_info.value.messages) == 3

    def test_missing_line_items_raises(self, seeded_synthesizer):
        with pytest.raises(InvalidRecordError) as exc_info:
            OrderNormalizer(seeded_synthesizer).normalize({"id": 1, "total": 5})

        assert exc_info.value.failed_rules == ["line_items_required"]

    def test_non_mapping_payload_raises(self, seeded_synthesizer):
        with pytest.raises(InvalidRecordError) as exc_info:
            OrderNormalizer(seeded_synthesizer).normalize(["not", "an", "order"])

        assert exc_info.value.record_id is None

    def test_unknown_rule_type_rejected(self):
        with pytest.raises(ValueError, match="Unknown rule type"):
            OrderNormalizer(rules=[{"rule_name": "x", "rule_type": "regex", "field_name": "id"}])


class TestNormalizeBatch:
    """Tests for skip-and-continue batch normalization"""

    def test_invalid_orders_are_skipped(self, seeded_synthesizer, raw_cart_factory):
        raws = [
            raw_cart_factory(1, 50),
            {"id": 2, "total": -10, "products": []},
            raw_cart_factory(3, 900),
            "garbage",
        ]

        result = OrderNormalizer(seeded_synthesizer).normalize_batch(raws)

        assert [record.id for record in result.records] == [1, 3]
        assert result.skipped_count == 2
        assert result.skipped[0].record_id == 2
        assert result.skipped[0].failed_rules == ["total_range"]
        assert result.skipped[0].raw_payload == {"id": 2, "total": -10, "products": []}
        assert result.skipped[1].raw_payload == {"value": "garbage"}

    def test_each_record_draws_one_date(self, now, raw_cart_factory):
        raws = [raw_cart_factory(i, 10 * i) for i in range(1, 6)]

        expected_rng = random.Random(99)
        expected = [now - timedelta(days=expected_rng.randrange(30)) for _ in raws]

        normalizer = OrderNormalizer(DateSynthesizer(rng=random.Random(99), now=now))
        result = normalizer.normalize_batch(raws)

        assert [record.date for record in result.records] == expected

    def test_empty_batch(self, seeded_synthesizer):
        result = OrderNormalizer(seeded_synthesizer).normalize_batch([])
        assert result.records == []
        assert result.skipped == []

    def test_duplicate_ids_keep_first(self, seeded_synthesizer, raw_cart_factory):
        raws = [raw_cart_factory(1, 10), raw_cart_factory(1, 20), raw_cart_factory(2, 30)]

        result = OrderNormalizer(seeded_synthesizer).normalize_batch(raws)

        assert [(record.id, record.total) for record in result.records] == [(1, 10.0), (2, 30.0)]
        assert result.skipped_count == 1
        assert result.skipped[0].record_id == 1
        assert result.skipped[0].failed_rules == ["id_unique"]
        assert result.skipped[0].raw_payload["total"] == 20

    def test_ids_of_different_types_are_distinct(self, seeded_synthesizer, raw_cart_factory):
        result = OrderNormalizer(seeded_synthesizer).normalize_batch(
            [raw_cart_factory(1, 10), raw_cart_factory("1", 20)]
        )
        assert [record.id for record in result.records] == [1, "1"]
