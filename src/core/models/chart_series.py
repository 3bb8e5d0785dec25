"""
ChartSeries model: chart-ready parallel series for the rendering layer.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator


class ChartSeries(BaseModel):
    """
    Index-aligned labels and values, one entry per order in the view.

    Attributes:
        labels: "Order <id>" per record
        totals: Order totals
        product_counts: Line item counts
    """

    labels: List[str] = Field(default_factory=list)
    totals: List[float] = Field(default_factory=list)
    product_counts: List[int] = Field(default_factory=list, alias="productCounts")

    @model_validator(mode="after")
    def check_aligned(self):
        """Validate that all three series have the same length."""
        if not len(self.labels) == len(self.totals) == len(self.product_counts):
            raise ValueError(
                f"series lengths differ: labels={len(self.labels)}, "
                f"totals={len(self.totals)}, product_counts={len(self.product_counts)}"
            )
        return self

    class Config:
        populate_by_name = True
