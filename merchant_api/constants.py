"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the application
(entity names, column widths, HTTP status codes) so every layer agrees on them.
"""


class EntityName:
    """Entity labels used in errors and log messages"""

    ADDRESS = "Address"
    SUPPLIER = "Supplier"
    PRODUCT = "Product"
    CUSTOMER = "Customer"
    USER = "User"


class FieldLimits:
    """
    Maximum lengths and numeric bounds shared by the ORM columns and request DTOs.
    """

    # Address
    STREET_LINE = 150
    NUMBER = 10
    COMPLEMENT = 50
    NEIGHBORHOOD = 50
    CITY = 50
    STATE = 50
    COUNTRY = 50
    POSTAL_CODE = 20

    # Supplier
    SUPPLIER_NAME = 100
    CNPJ_LENGTH = 14

    # Product
    PRODUCT_NAME = 150
    PRODUCT_DESCRIPTION = 500
    PRICE_MAX_DIGITS = 10
    PRICE_DECIMAL_PLACES = 2

    # Customer
    CUSTOMER_NAME = 100
    CPF_LENGTH = 11
    EMAIL = 255

    # Identifiers (SQLite INTEGER is a signed 64-bit value)
    MAX_ID = 2**63 - 1

    # User
    USERNAME = 50
    PASSWORD_MIN = 8
    PASSWORD_MAX_BYTES = 72


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
