"""
Product Service

CRUD orchestration for products. A product references a supplier by
identifier; the reference must resolve when the product is written.
"""

from typing import Any, List, Optional
import logging

from sqlalchemy.orm import Session

from merchant_api.constants import EntityName
from merchant_api.database import transaction
from merchant_api.dtos.request import ProductRequest
from merchant_api.dtos.response import ProductResponse
from merchant_api.exceptions import NotFoundError
from merchant_api.mappers import ProductMapper
from merchant_api.models import Product
from merchant_api.repositories import ProductRepository, SupplierRepository
from merchant_api.services.interfaces import ICrudService
from merchant_api.utils.logging_utils import log_operation
from merchant_api.validation import validate_request

logger = logging.getLogger(__name__)


class ProductService(ICrudService[ProductResponse]):
    """Service for product business logic."""

    def __init__(
        self,
        db: Session,
        products: ProductRepository,
        suppliers: SupplierRepository,
        mapper: Optional[ProductMapper] = None,
    ):
        """
        Initialize ProductService.

        Args:
            db: Database session (transaction owner)
            products: Product repository
            suppliers: Supplier repository used to resolve supplier_id
            mapper: Product mapper
        """
        self.db = db
        self.products = products
        self.suppliers = suppliers
        self.mapper = mapper or ProductMapper()

    def _require(self, entity_id: int) -> Product:
        product = self.products.get_by_id(entity_id)
        if product is None:
            raise NotFoundError(EntityName.PRODUCT, entity_id)
        return product

    def _ensure_supplier(self, supplier_id: int) -> None:
        if not self.suppliers.exists(supplier_id):
            raise NotFoundError(EntityName.SUPPLIER, supplier_id)

    @log_operation("create_product")
    def create(self, request: Any) -> ProductResponse:
        """
        Create a product for an existing supplier.

        Raises:
            ValidationError: If the request is invalid
            NotFoundError: If supplierId does not resolve (nothing is inserted)
        """
        dto = validate_request(ProductRequest, request)

        with transaction(self.db, "create product"):
            self._ensure_supplier(dto.supplier_id)
            product = self.mapper.to_entity(dto)
            self.products.save(product)
            response = self.mapper.to_response(product)

        logger.info(f"Created product {response.id} for supplier {response.supplier_id}")
        return response

    def list_all(self) -> List[ProductResponse]:
        return [self.mapper.to_response(p) for p in self.products.get_all()]

    def get_by_id(self, entity_id: int) -> ProductResponse:
        return self.mapper.to_response(self._require(entity_id))

    @log_operation("update_product")
    def update(self, entity_id: int, request: Any) -> ProductResponse:
        """
        Overwrite every product field. The new supplierId must resolve.

        Raises:
            ValidationError: If the request is invalid
            NotFoundError: If the product or the referenced supplier does not exist
        """
        dto = validate_request(ProductRequest, request)

        with transaction(self.db, "update product"):
            product = self._require(entity_id)
            self._ensure_supplier(dto.supplier_id)
            self.mapper.apply(dto, product)
            self.products.save(product)
            response = self.mapper.to_response(product)

        return response

    @log_operation("delete_product")
    def delete(self, entity_id: int) -> None:
        """
        Raises:
            NotFoundError: If the product does not exist
        """
        with transaction(self.db, "delete product"):
            if not self.products.delete_by_id(entity_id):
                raise NotFoundError(EntityName.PRODUCT, entity_id)
