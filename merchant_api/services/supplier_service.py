"""
Supplier Service

CRUD orchestration for the Supplier aggregate (supplier + owned address).

Rules enforced here:
- tax ID is unique across suppliers and never changes after creation
- the address is created, updated and deleted together with its supplier
- created_at is set once; updated_at is refreshed on every mutation
"""

from typing import Any, Callable, List, Optional
from datetime import datetime
import logging

from sqlalchemy.orm import Session

from merchant_api.constants import EntityName
from merchant_api.database import transaction
from merchant_api.dtos.request import SupplierRequest, SupplierUpdateRequest
from merchant_api.dtos.response import SupplierResponse
from merchant_api.exceptions import ConflictError, NotFoundError
from merchant_api.mappers import SupplierMapper
from merchant_api.models import Supplier
from merchant_api.repositories import AddressRepository, ProductRepository, SupplierRepository
from merchant_api.services.interfaces import ICrudService
from merchant_api.utils.clock import utc_now
from merchant_api.utils.logging_utils import log_operation
from merchant_api.validation import validate_request

logger = logging.getLogger(__name__)


class SupplierService(ICrudService[SupplierResponse]):
    """Service for supplier business logic."""

    def __init__(
        self,
        db: Session,
        suppliers: SupplierRepository,
        addresses: AddressRepository,
        products: ProductRepository,
        mapper: Optional[SupplierMapper] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize SupplierService.

        Args:
            db: Database session (transaction owner)
            suppliers: Supplier repository
            addresses: Address repository (explicit cascade)
            products: Product repository (reference counting on delete)
            mapper: Supplier mapper
            clock: Source of server timestamps
        """
        self.db = db
        self.suppliers = suppliers
        self.addresses = addresses
        self.products = products
        self.mapper = mapper or SupplierMapper()
        self.clock = clock

    def _require(self, entity_id: int) -> Supplier:
        supplier = self.suppliers.get_by_id(entity_id)
        if supplier is None:
            raise NotFoundError(EntityName.SUPPLIER, entity_id)
        return supplier

    @log_operation("create_supplier")
    def create(self, request: Any) -> SupplierResponse:
        """
        Create a supplier and its address.

        Raises:
            ValidationError: If the request is invalid
            ConflictError: If another supplier already holds the tax ID
        """
        dto = validate_request(SupplierRequest, request)

        with transaction(self.db, "create supplier"):
            if self.suppliers.exists_by_tax_id(dto.tax_id):
                raise ConflictError(EntityName.SUPPLIER, field="taxId", value=dto.tax_id)

            supplier = self.mapper.to_entity(dto)
            now = self.clock()
            supplier.created_at = now
            supplier.updated_at = now

            self.addresses.save(supplier.address)
            self.suppliers.save(supplier)
            response = self.mapper.to_response(supplier)

        logger.info(f"Created supplier {response.id} ({response.name})")
        return response

    def list_all(self) -> List[SupplierResponse]:
        return [self.mapper.to_response(s) for s in self.suppliers.get_all()]

    def get_by_id(self, entity_id: int) -> SupplierResponse:
        return self.mapper.to_response(self._require(entity_id))

    @log_operation("update_supplier")
    def update(self, entity_id: int, request: Any) -> SupplierResponse:
        """
        Overwrite name, type and address. The tax ID is left untouched.

        Raises:
            ValidationError: If the request is invalid
            NotFoundError: If the supplier does not exist
        """
        dto = validate_request(SupplierUpdateRequest, request)

        with transaction(self.db, "update supplier"):
            supplier = self._require(entity_id)
            self.mapper.apply_update(dto, supplier)
            supplier.updated_at = self.clock()

            self.addresses.save(supplier.address)
            self.suppliers.save(supplier)
            response = self.mapper.to_response(supplier)

        return response

    @log_operation("delete_supplier")
    def delete(self, entity_id: int) -> None:
        """
        Delete a supplier and its address.

        Products that reference the supplier are kept and end up with a
        dangling supplier_id.

        Raises:
            NotFoundError: If the supplier does not exist
        """
        with transaction(self.db, "delete supplier"):
            supplier = self._require(entity_id)
            address = supplier.address

            referencing = self.products.count_by_supplier(entity_id)
            if referencing:
                logger.warning(
                    f"Deleting supplier {entity_id} still referenced by {referencing} product(s); "
                    f"their supplier reference will dangle"
                )

            self.suppliers.delete(supplier)
            if address is not None:
                self.addresses.delete(address)

        logger.info(f"Deleted supplier {entity_id} and its address")
