"""
SkippedOrder model representing a raw order the normalizer rejected.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class SkippedOrder(BaseModel):
    """
    Raw order excluded from the batch with its failure context.

    Attributes:
        record_id: Original order id (None if missing)
        raw_payload: Order exactly as received
        failed_rules: Rule names that failed
        error_messages: Corresponding error messages
    """

    record_id: int | str | None = Field(None, alias="recordId")
    raw_payload: dict[str, Any] = Field(..., alias="rawPayload")
    failed_rules: list[str] = Field(..., min_length=1, alias="failedRules")
    error_messages: list[str] = Field(..., min_length=1, alias="errorMessages")

    @field_validator('error_messages')
    @classmethod
    def check_arrays_same_length(cls, v, info):
        """Validate that failed_rules and error_messages have the same length."""
        failed_rules = info.data.get('failed_rules', [])
        if len(v) != len(failed_rules):
            raise ValueError(
                f"error_messages length ({len(v)}) must match failed_rules length ({len(failed_rules)})"
            )
        return v

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "recordId": 7,
                "rawPayload": {"id": 7, "total": -3, "products": []},
                "failedRules": ["total_range"],
                "errorMessages": ["Value -3.0 is less than minimum 0"]
            }
        }
