"""
SalesSummary model: dataset-wide headline metrics.
"""

from pydantic import BaseModel, Field


class SalesSummary(BaseModel):
    """
    Metrics over the whole unfiltered raw dataset.

    These never follow the active filters; the chart series do.

    Attributes:
        total_sales: Sum of all order totals
        total_orders: Number of raw orders
        average_order_value: total_sales / total_orders, None when there are no orders
        total_products_sold: Sum of every order's units field
    """

    total_sales: float = Field(0.0, alias="totalSales")
    total_orders: int = Field(0, ge=0, alias="totalOrders")
    average_order_value: float | None = Field(None, alias="averageOrderValue")
    total_products_sold: int = Field(0, alias="totalProductsSold")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "totalSales": 1250.0,
                "totalOrders": 3,
                "averageOrderValue": 416.67,
                "totalProductsSold": 11
            }
        }
