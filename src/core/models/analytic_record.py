"""
AnalyticRecord model: the analysis-ready shape of one order (ephemeral).
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.core.dates import ensure_utc


class AnalyticRecord(BaseModel):
    """
    Normalized order used by the filter, sort and series stages.

    Note: AnalyticRecords only live for one session. They are immutable,
    stages build new lists holding the same record objects.

    Attributes:
        id: Order identifier, unique within the input batch
        total: Monetary total of the order
        product_count: Number of distinct line items
        date: Synthesized order date (timezone-aware), drawn once at normalization
    """

    id: int | str
    total: float = Field(..., ge=0)
    product_count: int = Field(..., ge=0)
    date: datetime

    @field_validator("date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """A naive date is taken to be UTC."""
        return ensure_utc(v)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "total": 103.5,
                "product_count": 4,
                "date": "2026-10-12T09:30:00Z"
            }
        }
