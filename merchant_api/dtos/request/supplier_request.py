"""
Supplier Request DTOs
"""

from pydantic import ConfigDict, Field

from merchant_api.constants import FieldLimits
from merchant_api.domain.value_objects import SupplierType
from merchant_api.dtos.base import RequestModel
from merchant_api.validation import Cnpj, required_str
from .address_request import AddressRequest


class SupplierRequest(RequestModel):
    """
    Request DTO for creating a supplier.
    """

    name: required_str(FieldLimits.SUPPLIER_NAME)
    tax_id: Cnpj
    supplier_type: SupplierType = Field(alias="type")
    address: AddressRequest

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Acme",
                "taxId": "11222333000181",
                "type": "STANDARD",
                "address": {
                    "streetLine": "Rua das Flores",
                    "number": "100",
                    "neighborhood": "Centro",
                    "city": "Curitiba",
                    "state": "PR",
                    "country": "Brasil",
                    "postalCode": "80000-000"
                }
            }
        }
    )


class SupplierUpdateRequest(RequestModel):
    """
    Request DTO for updating a supplier.

    The tax ID is immutable after creation, so it is not part of this shape;
    a taxId key in the payload is ignored.
    """

    name: required_str(FieldLimits.SUPPLIER_NAME)
    supplier_type: SupplierType = Field(alias="type")
    address: AddressRequest
