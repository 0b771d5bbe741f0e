"""
Mapping functions for Address <-> AddressRequest/AddressResponse.
"""
from merchant_api.dtos.request import AddressRequest
from merchant_api.dtos.response import AddressResponse
from merchant_api.models import Address


class AddressMapper:

    def to_entity(self, dto: AddressRequest) -> Address:
        """Build a new, unsaved Address from a request."""
        return self.apply(dto, Address())

    def apply(self, dto: AddressRequest, address: Address) -> Address:
        """Overwrite every field of an existing Address from a request."""
        address.street_line = dto.street_line
        address.number = dto.number
        address.complement = dto.complement
        address.neighborhood = dto.neighborhood
        address.city = dto.city
        address.state = dto.state
        address.country = dto.country
        address.postal_code = dto.postal_code
        return address

    def to_response(self, address: Address) -> AddressResponse:
        return AddressResponse(
            street_line=address.street_line,
            number=address.number,
            complement=address.complement,
            neighborhood=address.neighborhood,
            city=address.city,
            state=address.state,
            country=address.country,
            postal_code=address.postal_code,
        )
