"""
Statistics Response DTO
"""

from pydantic import Field

from merchant_api.dtos.base import ResponseModel


class StatisticsResponse(ResponseModel):
    """
    Entity counts.

    Each count is taken independently; under concurrent writes the three
    numbers may reflect slightly different instants.
    """

    supplier_count: int = Field(description="Total number of suppliers")
    product_count: int = Field(description="Total number of products")
    customer_count: int = Field(description="Total number of customers")
