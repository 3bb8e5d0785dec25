"""
Order record normalizer.

Maps raw orders into AnalyticRecords. Field checks are declared as rule
dictionaries and run through validators in order; a record that fails any
rule raises InvalidRecordError and, in batch mode, is skipped while the
rest of the batch carries on.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable

import pydantic

from src.core.dates import DateSynthesizer
from src.core.exceptions import InvalidRecordError
from src.core.models import AnalyticRecord, SkippedOrder
from src.core.raw_order import RawOrder, get_field
from src.core.validators import (
    BaseValidator,
    RangeValidator,
    RequiredFieldValidator,
    TypeValidator,
    ValidationError,
)
from src.observability import metrics
from src.observability.logger import get_logger


logger = get_logger(__name__)


ORDER_RULES: list[dict[str, Any]] = [
    {"rule_name": "id_required", "rule_type": "required", "field_name": "id"},
    {"rule_name": "total_required", "rule_type": "required", "field_name": "total"},
    {
        "rule_name": "total_type_check",
        "rule_type": "type_check",
        "field_name": "total",
        "parameters": {"expected_type": "float", "coerce": True},
    },
    {
        "rule_name": "total_range",
        "rule_type": "range",
        "field_name": "total",
        "parameters": {"min": 0},
    },
    {"rule_name": "line_items_required", "rule_type": "required", "field_name": "line_items"},
    {
        "rule_name": "line_items_type_check",
        "rule_type": "type_check",
        "field_name": "line_items",
        "parameters": {"expected_type": "list", "coerce": False},
    },
]


@dataclass
class NormalizationResult:
    """Records that normalized cleanly plus the orders that were skipped."""

    records: list[AnalyticRecord] = field(default_factory=list)
    skipped: list[SkippedOrder] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class OrderNormalizer:
    """
    Converts raw orders into AnalyticRecords with a synthesized date.

    The date synthesizer is the only source of randomness; each record
    draws exactly once, when it is normalized.
    """

    VALIDATOR_REGISTRY = {
        "required": RequiredFieldValidator,
        "type_check": TypeValidator,
        "range": RangeValidator,
    }

    def __init__(
        self,
        date_synthesizer: DateSynthesizer | None = None,
        rules: list[dict[str, Any]] | None = None,
    ):
        self.date_synthesizer = date_synthesizer or DateSynthesizer()
        self.validators: list[tuple[str, BaseValidator]] = []
        self._build_validators(ORDER_RULES if rules is None else rules)

    def _build_validators(self, rules: list[dict[str, Any]]) -> None:
        for rule in rules:
            validator_class = self.VALIDATOR_REGISTRY.get(rule["rule_type"])
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule['rule_type']}")
            validator = validator_class(rule["field_name"], rule.get("parameters", {}))
            self.validators.append((rule["rule_name"], validator))

    def _check(self, raw: RawOrder) -> dict[str, Any]:
        """
        Run every rule and return the cleaned field values.

        Once a field fails, its remaining rules are skipped so a range check
        never sees an uncoerced string.

        Raises:
            InvalidRecordError: If any rule failed
        """
        values: dict[str, Any] = {}
        failed_fields: set[str] = set()
        failed_rules: list[str] = []
        messages: list[str] = []

        for rule_name, validator in self.validators:
            name = validator.field_name
            if name in failed_fields:
                continue
            value = values[name] if name in values else get_field(raw, name)
            try:
                values[name] = validator.validate(value)
            except ValidationError as e:
                failed_fields.add(name)
                failed_rules.append(rule_name)
                messages.append(str(e))

        if failed_rules:
            raise InvalidRecordError(get_field(raw, "id"), failed_rules, messages)
        return values

    def normalize(self, raw: RawOrder) -> AnalyticRecord:
        """
        Normalize one raw order.

        Raises:
            InvalidRecordError: If id, total or the line items are missing,
                or total is not a non-negative number
        """
        if not isinstance(raw, Mapping):
            raise InvalidRecordError(
                None, ["payload_type_check"], [f"Expected an object, got {type(raw).__name__}"]
            )

        values = self._check(raw)
        try:
            return AnalyticRecord(
                id=values["id"],
                total=values["total"],
                product_count=len(values["line_items"]),
                date=self.date_synthesizer.draw(),
            )
        except pydantic.ValidationError as e:
            raise InvalidRecordError(values["id"], ["record_model"], [str(e)])

    def normalize_batch(self, raw_orders: Iterable[RawOrder]) -> NormalizationResult:
        """
        Normalize a batch, skipping invalid orders.

        Order ids must be unique within the batch; the first occurrence
        wins and later ones are skipped under the id_unique rule.

        Returns:
            NormalizationResult with records in input order and one
            SkippedOrder per rejected raw order
        """
        result = NormalizationResult()
        all_failed_rules: list[str] = []
        seen_ids: set[int | str] = set()

        for raw in raw_orders:
            try:
                record = self.normalize(raw)
                if record.id in seen_ids:
                    raise InvalidRecordError(
                        record.id, ["id_unique"], [f"Duplicate order id {record.id!r} in batch"]
                    )
                seen_ids.add(record.id)
                result.records.append(record)
            except InvalidRecordError as e:
                logger.warning(
                    "Skipping invalid order",
                    extra={"record_id": e.record_id, "failed_rules": e.failed_rules},
                )
                all_failed_rules.extend(e.failed_rules)
                result.skipped.append(
                    SkippedOrder(
                        record_id=e.record_id if isinstance(e.record_id, int | str) else None,
                        raw_payload=dict(raw) if isinstance(raw, Mapping) else {"value": raw},
                        failed_rules=e.failed_rules,
                        error_messages=e.messages,
                    )
                )

        metrics.record_normalization(len(result.records), all_failed_rules)
        logger.info(
            f"Normalized {len(result.records)} orders, skipped {result.skipped_count}",
            extra={"normalized": len(result.records), "skipped": result.skipped_count},
        )
        return result
