"""
TypeValidator - validates and optionally coerces field types.
"""

import math
from typing import Any

from .base_validator import BaseValidator


class TypeValidator(BaseValidator):
    """
    Validates that a field matches the expected type.

    Supports optional coercion of numeric strings ("99.5" -> 99.5).
    Booleans are never accepted as numbers, and NaN/infinity are rejected
    for float fields.

    Supported types: int, float, list
    """

    TYPE_MAPPING = {
        "integer": int,
        "int": int,
        "decimal": float,
        "float": float,
        "number": float,
        "list": list,
        "array": list,
    }

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        expected_type = self.parameters.get("expected_type")
        if not expected_type:
            raise ValueError("TypeValidator requires 'expected_type' parameter")

        self.expected_type = self.TYPE_MAPPING.get(str(expected_type).lower())
        if not self.expected_type:
            raise ValueError(f"Unsupported type: {expected_type}")

        self.coerce = self.parameters.get("coerce", True)

    def validate(self, value: Any) -> Any:
        # None is the required validator's concern
        if value is None:
            return value

        if isinstance(value, bool):
            raise self.fail(f"Expected {self.expected_type.__name__}, got bool")

        if self.expected_type is list:
            if isinstance(value, (list, tuple)):
                return list(value)
            raise self.fail(f"Expected list, got {type(value).__name__}")

        if isinstance(value, self.expected_type) or (
            self.expected_type is float and isinstance(value, int)
        ):
            return self._check_finite(self.expected_type(value))

        if not self.coerce:
            raise self.fail(
                f"Expected {self.expected_type.__name__}, got {type(value).__name__}"
            )

        try:
            coerced = self.expected_type(value)
        except (ValueError, TypeError) as e:
            raise self.fail(
                f"Cannot coerce {type(value).__name__} to {self.expected_type.__name__}: {e}"
            )
        return self._check_finite(coerced)

    def _check_finite(self, value: Any) -> Any:
        if isinstance(value, float) and not math.isfinite(value):
            raise self.fail(f"Value {value} is not a finite number")
        return value

    @property
    def rule_type(self) -> str:
        return "type_check"
