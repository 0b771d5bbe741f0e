"""
Statistics Service

Aggregate counts over the full extent of each entity set.
"""

from merchant_api.dtos.response import StatisticsResponse
from merchant_api.repositories import CustomerRepository, ProductRepository, SupplierRepository
from merchant_api.services.interfaces import IStatisticsService


class StatisticsService(IStatisticsService):
    """Service for entity counts."""

    def __init__(
        self,
        suppliers: SupplierRepository,
        products: ProductRepository,
        customers: CustomerRepository,
    ):
        self.suppliers = suppliers
        self.products = products
        self.customers = customers

    def get_statistics(self) -> StatisticsResponse:
        """
        Count suppliers, products and customers.

        The three counts are independent queries with no shared snapshot.
        """
        return StatisticsResponse(
            supplier_count=self.suppliers.count(),
            product_count=self.products.count(),
            customer_count=self.customers.count(),
        )
