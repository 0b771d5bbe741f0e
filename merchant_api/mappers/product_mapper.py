"""
Mapping functions for Product <-> Product DTOs.
"""
from merchant_api.dtos.request import ProductRequest
from merchant_api.dtos.response import ProductResponse
from merchant_api.models import Product


class ProductMapper:

    def to_entity(self, dto: ProductRequest) -> Product:
        """Build a new, unsaved Product. Only the supplier identifier is copied."""
        return self.apply(dto, Product())

    def apply(self, dto: ProductRequest, product: Product) -> Product:
        """Overwrite every mutable field of an existing Product."""
        product.name = dto.name
        product.price = dto.price
        product.description = dto.description
        product.stock_quantity = dto.stock_quantity
        product.supplier_id = dto.supplier_id
        return product

    def to_response(self, product: Product) -> ProductResponse:
        return ProductResponse(
            id=product.id,
            name=product.name,
            price=product.price,
            description=product.description,
            stock_quantity=product.stock_quantity,
            supplier_id=product.supplier_id,
        )
