"""
Mapping functions for Supplier aggregate <-> Supplier DTOs.
"""
from typing import Optional

from merchant_api.domain.value_objects import SupplierType
from merchant_api.dtos.request import SupplierRequest, SupplierUpdateRequest
from merchant_api.dtos.response import SupplierResponse
from merchant_api.models import Supplier
from .address_mapper import AddressMapper


class SupplierMapper:

    def __init__(self, address_mapper: Optional[AddressMapper] = None):
        self.address_mapper = address_mapper or AddressMapper()

    def to_entity(self, dto: SupplierRequest) -> Supplier:
        """
        Build a new, unsaved Supplier (with its Address) from a create request.

        id and timestamps are left unset; they are assigned by the service.
        """
        return Supplier(
            name=dto.name,
            tax_id=dto.tax_id,
            supplier_type=dto.supplier_type.value,
            address=self.address_mapper.to_entity(dto.address),
        )

    def apply_update(self, dto: SupplierUpdateRequest, supplier: Supplier) -> Supplier:
        """
        Overwrite the mutable fields of a Supplier and its Address in place.

        tax_id, id and created_at are never touched.
        """
        supplier.name = dto.name
        supplier.supplier_type = dto.supplier_type.value
        self.address_mapper.apply(dto.address, supplier.address)
        return supplier

    def to_response(self, supplier: Supplier) -> SupplierResponse:
        return SupplierResponse(
            id=supplier.id,
            name=supplier.name,
            tax_id=supplier.tax_id,
            supplier_type=SupplierType(supplier.supplier_type),
            address=self.address_mapper.to_response(supplier.address),
            created_at=supplier.created_at,
            updated_at=supplier.updated_at,
        )
