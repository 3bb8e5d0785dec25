"""
View configuration: the closed option sets offered by the statistics controls.
"""

from datetime import datetime, timedelta
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.dates import ensure_utc


AmountThreshold = Literal["none", ">100", ">500", ">1000"]
DateMode = Literal["all", "last-24h", "last-7d", "last-30d", "custom-range"]
SortOrder = Literal["none", "ascending", "descending"]

# Threshold option -> strict lower bound on the order total
AMOUNT_THRESHOLDS: dict[str, float] = {
    ">100": 100.0,
    ">500": 500.0,
    ">1000": 1000.0,
}

# Relative date mode -> window looking back from "now"
DATE_WINDOWS: dict[str, timedelta] = {
    "last-24h": timedelta(days=1),
    "last-7d": timedelta(days=7),
    "last-30d": timedelta(days=30),
}


class CustomRange(BaseModel):
    """
    Inclusive date window. start > end is allowed and matches nothing.
    """

    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Naive bounds are taken to be UTC."""
        return ensure_utc(v)

    class Config:
        frozen = True


class ViewConfig(BaseModel):
    """
    One combination of filter and sort selections.

    Attributes:
        amount_threshold: Keep orders whose total strictly exceeds this bound
        date_mode: Relative window, custom range or no date filter
        custom_range: Window used only when date_mode is "custom-range"
        sort_order: Order by total, applied after filtering
    """

    amount_threshold: AmountThreshold = Field("none", alias="amountThreshold")
    date_mode: DateMode = Field("all", alias="dateMode")
    custom_range: CustomRange | None = Field(None, alias="customRange")
    sort_order: SortOrder = Field("none", alias="sortOrder")

    @model_validator(mode="after")
    def check_custom_range_present(self):
        """Validate that custom-range mode carries a range."""
        if self.date_mode == "custom-range" and self.custom_range is None:
            raise ValueError("date_mode 'custom-range' requires custom_range")
        return self

    @property
    def min_total(self) -> float | None:
        """Strict lower bound for the amount filter, None when disabled."""
        return AMOUNT_THRESHOLDS.get(self.amount_threshold)

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "amountThreshold": ">100",
                "dateMode": "custom-range",
                "customRange": {
                    "start": "2026-10-01T00:00:00Z",
                    "end": "2026-10-19T23:59:59Z"
                },
                "sortOrder": "descending"
            }
        }
