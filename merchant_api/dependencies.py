"""
Dependency injection providers for FastAPI.

This module provides factory functions that build repositories and services
from a request-scoped database session. Every service gets its collaborators
through its constructor; there is no ambient registry.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from merchant_api.config import settings
from merchant_api.database import get_db
from merchant_api.domain.value_objects import Role
from merchant_api.exceptions import ApplicationError, AuthenticationError
from merchant_api.models import User
from merchant_api.repositories import (
    AddressRepository,
    CustomerRepository,
    ProductRepository,
    SupplierRepository,
    UserRepository,
)
from merchant_api.services import (
    CustomerService,
    PasswordHasher,
    ProductService,
    StatisticsService,
    SupplierService,
    UserService,
)
from merchant_api.utils.error_handlers import to_http_exception
from merchant_api.utils.logging_utils import set_logging_context

basic_auth = HTTPBasic(auto_error=False)


def get_supplier_service(db: Session = Depends(get_db)) -> SupplierService:
    """
    Factory function for creating SupplierService instances.

    Args:
        db: Database session (injected)

    Returns:
        SupplierService wired to request-scoped repositories
    """
    return SupplierService(
        db,
        suppliers=SupplierRepository(db),
        addresses=AddressRepository(db),
        products=ProductRepository(db),
    )


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Factory function for creating ProductService instances."""
    return ProductService(
        db,
        products=ProductRepository(db),
        suppliers=SupplierRepository(db),
    )


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Factory function for creating CustomerService instances."""
    return CustomerService(
        db,
        customers=CustomerRepository(db),
        addresses=AddressRepository(db),
    )


def get_statistics_service(db: Session = Depends(get_db)) -> StatisticsService:
    """Factory function for creating StatisticsService instances."""
    return StatisticsService(
        suppliers=SupplierRepository(db),
        products=ProductRepository(db),
        customers=CustomerRepository(db),
    )


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Factory function for creating UserService instances."""
    return UserService(
        db,
        users=UserRepository(db),
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
    )


def get_current_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """
    Resolve the caller from HTTP Basic credentials.

    Raises:
        HTTPException: 401 when credentials are missing or wrong
    """
    try:
        if credentials is None:
            raise AuthenticationError("Authentication required")
        user = user_service.authenticate(credentials.username, credentials.password)
    except ApplicationError as e:
        raise to_http_exception(e, "Authenticate") from e

    set_logging_context(username=user.username)
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Allow only ADMIN users through.

    Raises:
        HTTPException: 403 when the user is not an admin
    """
    try:
        return UserService.require_role(user, Role.ADMIN)
    except ApplicationError as e:
        raise to_http_exception(e, "Authorize") from e


def get_optional_user(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    user_service: UserService = Depends(get_user_service),
) -> Optional[User]:
    """
    Resolve the caller when credentials are sent, None for anonymous calls.

    Raises:
        HTTPException: 401 when credentials are sent but wrong
    """
    if credentials is None:
        return None
    return get_current_user(credentials, user_service)
