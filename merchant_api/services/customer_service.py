"""
Customer Service

CRUD orchestration for the Customer aggregate (customer + owned address).
"""

from typing import Any, List, Optional
import logging

from sqlalchemy.orm import Session

from merchant_api.constants import EntityName
from merchant_api.database import transaction
from merchant_api.dtos.request import CustomerRequest
from merchant_api.dtos.response import CustomerResponse
from merchant_api.exceptions import NotFoundError
from merchant_api.mappers import CustomerMapper
from merchant_api.models import Customer
from merchant_api.repositories import AddressRepository, CustomerRepository
from merchant_api.services.interfaces import ICrudService
from merchant_api.utils.logging_utils import log_operation
from merchant_api.validation import validate_request

logger = logging.getLogger(__name__)


class CustomerService(ICrudService[CustomerResponse]):
    """Service for customer business logic."""

    def __init__(
        self,
        db: Session,
        customers: CustomerRepository,
        addresses: AddressRepository,
        mapper: Optional[CustomerMapper] = None,
    ):
        self.db = db
        self.customers = customers
        self.addresses = addresses
        self.mapper = mapper or CustomerMapper()

    def _require(self, entity_id: int) -> Customer:
        customer = self.customers.get_by_id(entity_id)
        if customer is None:
            raise NotFoundError(EntityName.CUSTOMER, entity_id)
        return customer

    @log_operation("create_customer")
    def create(self, request: Any) -> CustomerResponse:
        dto = validate_request(CustomerRequest, request)

        with transaction(self.db, "create customer"):
            customer = self.mapper.to_entity(dto)
            self.addresses.save(customer.address)
            self.customers.save(customer)
            response = self.mapper.to_response(customer)

        logger.info(f"Created customer {response.id}")
        return response

    def list_all(self) -> List[CustomerResponse]:
        return [self.mapper.to_response(c) for c in self.customers.get_all()]

    def get_by_id(self, entity_id: int) -> CustomerResponse:
        return self.mapper.to_response(self._require(entity_id))

    @log_operation("update_customer")
    def update(self, entity_id: int, request: Any) -> CustomerResponse:
        dto = validate_request(CustomerRequest, request)

        with transaction(self.db, "update customer"):
            customer = self._require(entity_id)
            self.mapper.apply_update(dto, customer)
            self.addresses.save(customer.address)
            self.customers.save(customer)
            response = self.mapper.to_response(customer)

        return response

    @log_operation("delete_customer")
    def delete(self, entity_id: int) -> None:
        """Delete a customer and its address in one transaction."""
        with transaction(self.db, "delete customer"):
            customer = self._require(entity_id)
            address = customer.address
            self.customers.delete(customer)
            if address is not None:
                self.addresses.delete(address)
