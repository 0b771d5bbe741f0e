"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on one input field."""

    field: str
    constraint: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when an inbound representation breaks one or more field constraints"""

    def __init__(self, message: str, violations: list[FieldViolation] | None = None):
        self.violations = list(violations or [])
        details = {"violations": [v.to_dict() for v in self.violations]}
        super().__init__(message, details)

    @property
    def fields(self) -> set[str]:
        """Names of every field with at least one violation."""
        return {v.field for v in self.violations}


class NotFoundError(ApplicationError):
    """Raised when an identifier does not resolve to a persisted entity"""

    def __init__(self, entity: str, entity_id: int, message: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        details = {"entity": entity, "id": entity_id}
        msg = message or f"{entity} {entity_id} not found"
        super().__init__(msg, details)


class ConflictError(ApplicationError):
    """Raised when a uniqueness constraint would be violated"""

    def __init__(self, entity: str, field: str | None = None, value: str | None = None,
                 message: str | None = None):
        details = {"entity": entity}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        msg = message or f"{entity} with {field}={value!r} already exists"
        super().__init__(msg, details)


class TransactionError(ApplicationError):
    """Raised when an atomic operation could not complete and was rolled back"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


class AuthenticationError(ApplicationError):
    """Raised when credentials are missing or wrong"""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class PermissionDeniedError(ApplicationError):
    """Raised when an authenticated user lacks the required role"""

    def __init__(self, required_role: str, username: str | None = None):
        details = {"required_role": required_role}
        if username:
            details["username"] = username
        super().__init__(f"Operation requires role {required_role}", details)
