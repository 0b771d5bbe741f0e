"""
Mapping functions for Customer aggregate <-> Customer DTOs.
"""
from typing import Optional

from merchant_api.dtos.request import CustomerRequest
from merchant_api.dtos.response import CustomerResponse
from merchant_api.models import Customer
from .address_mapper import AddressMapper


class CustomerMapper:

    def __init__(self, address_mapper: Optional[AddressMapper] = None):
        self.address_mapper = address_mapper or AddressMapper()

    def to_entity(self, dto: CustomerRequest) -> Customer:
        """Build a new, unsaved Customer (with its Address)."""
        return Customer(
            name=dto.name,
            tax_id=dto.tax_id,
            email=dto.email,
            address=self.address_mapper.to_entity(dto.address),
        )

    def apply_update(self, dto: CustomerRequest, customer: Customer) -> Customer:
        """Overwrite the fields of a Customer and its Address in place."""
        customer.name = dto.name
        customer.tax_id = dto.tax_id
        customer.email = dto.email
        self.address_mapper.apply(dto.address, customer.address)
        return customer

    def to_response(self, customer: Customer) -> CustomerResponse:
        return CustomerResponse(
            id=customer.id,
            name=customer.name,
            tax_id=customer.tax_id,
            email=customer.email,
            address=self.address_mapper.to_response(customer.address),
        )
