"""
Error handling decorators and utilities for API endpoints.

This module centralizes the mapping from application exceptions to HTTP
responses so every router reports errors the same way.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import logging

from merchant_api.constants import HTTPStatus
from merchant_api.exceptions import (
    ApplicationError,
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    TransactionError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_http_exception(error: ApplicationError, operation_name: str) -> HTTPException:
    """
    Convert an application exception into an HTTPException.

    Validation, not-found and conflict errors keep their structured details so
    the caller can correct the request. Transaction and unexpected failures are
    reported opaquely.

    Args:
        error: Application exception raised by a service
        operation_name: Human-readable operation name for logs and messages

    Returns:
        HTTPException ready to raise
    """
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail={"message": error.message, "violations": error.details["violations"]}
        )
    if isinstance(error, NotFoundError):
        logger.info(f"{operation_name} - Not found: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.NOT_FOUND,
            detail={"message": error.message, **error.details}
        )
    if isinstance(error, ConflictError):
        logger.warning(f"{operation_name} - Conflict: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.CONFLICT,
            detail={"message": error.message, **error.details}
        )
    if isinstance(error, AuthenticationError):
        logger.warning(f"{operation_name} - Authentication failed")
        return HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=error.message,
            headers={"WWW-Authenticate": "Basic"}
        )
    if isinstance(error, PermissionDeniedError):
        logger.warning(f"{operation_name} - Permission denied: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.FORBIDDEN,
            detail=error.message
        )
    if isinstance(error, ConfigurationError):
        logger.warning(f"{operation_name} - Configuration error: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=error.message
        )
    if isinstance(error, TransactionError):
        logger.error(f"{operation_name} - Transaction rolled back: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed; no changes were saved"
        )
    logger.error(f"{operation_name} - Application error: {error.message}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed: {error.message}"
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle application errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create supplier")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("/suppliers")
        @handle_api_errors("Create supplier")
        def create_supplier(...):
            return service.create(payload)
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ApplicationError as e:
                raise to_http_exception(e, operation_name) from e
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail=f"{operation_name} failed. Please check server logs or contact support."
                )

        return wrapper

    return decorator
