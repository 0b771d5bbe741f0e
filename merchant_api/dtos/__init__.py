"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking database structure to external APIs and allow independent evolution.

Structure:
- request/: DTOs for incoming representations (validated on construction)
- response/: DTOs for outgoing representations

External field names are camelCase (streetLine, taxId, stockQuantity); Python
attributes stay snake_case.
"""
