"""
SupplierType Value Object
"""

from enum import Enum


class SupplierType(str, Enum):
    """Commercial classification of a supplier."""

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"

    @classmethod
    def from_string(cls, value: str) -> "SupplierType":
        """
        Create SupplierType from string value.

        Raises:
            ValueError: If value is not a valid supplier type
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid supplier type: {value}")
