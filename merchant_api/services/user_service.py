"""
User Service

Registration, credential checks and role checks for system users.
Token issuance is handled outside this backend.
"""

from typing import Any, Optional
import logging

from sqlalchemy.orm import Session

from merchant_api.constants import EntityName
from merchant_api.database import transaction
from merchant_api.domain.value_objects import Role
from merchant_api.dtos.request import RegisterUserRequest
from merchant_api.dtos.response import UserResponse
from merchant_api.exceptions import AuthenticationError, ConflictError, PermissionDeniedError
from merchant_api.mappers import UserMapper
from merchant_api.models import User
from merchant_api.repositories import UserRepository
from merchant_api.services.password_hasher import PasswordHasher
from merchant_api.utils.logging_utils import log_operation
from merchant_api.validation import validate_request

logger = logging.getLogger(__name__)


class UserService:
    """Service for user business logic."""

    def __init__(
        self,
        db: Session,
        users: UserRepository,
        hasher: Optional[PasswordHasher] = None,
        mapper: Optional[UserMapper] = None,
    ):
        self.db = db
        self.users = users
        self.hasher = hasher or PasswordHasher()
        self.mapper = mapper or UserMapper()

    @log_operation("register_user")
    def register(self, request: Any, granted_by: Optional[User] = None) -> UserResponse:
        """
        Register a new user with a hashed password.

        Args:
            request: Registration payload
            granted_by: Authenticated caller, required when the payload asks for ADMIN

        Raises:
            ValidationError: If the request is invalid
            PermissionDeniedError: If an ADMIN account is requested without an ADMIN caller
            ConflictError: If the username is taken
        """
        dto = validate_request(RegisterUserRequest, request)

        if dto.role is Role.ADMIN:
            if granted_by is None:
                raise PermissionDeniedError(Role.ADMIN.value)
            self.require_role(granted_by, Role.ADMIN)

        return self._create(dto)

    def _create(self, dto: RegisterUserRequest) -> UserResponse:
        with transaction(self.db, "register user"):
            if self.users.get_by_username(dto.username) is not None:
                raise ConflictError(EntityName.USER, field="username", value=dto.username)

            user = self.mapper.to_entity(dto, self.hasher.hash(dto.password))
            self.users.save(user)
            response = self.mapper.to_response(user)

        logger.info(f"Registered user {response.username} with role {response.role.value}")
        return response

    def authenticate(self, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Returns:
            The matching User

        Raises:
            AuthenticationError: On unknown username or wrong password
        """
        user = self.users.get_by_username(username)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info(f"Authentication failed for {username!r}")
            raise AuthenticationError()
        return user

    @staticmethod
    def require_role(user: User, role: Role) -> User:
        """
        Raises:
            PermissionDeniedError: If the user's role does not grant `role`
        """
        if not Role(user.role).grants(role):
            raise PermissionDeniedError(role.value, username=user.username)
        return user

    def ensure_admin(self, username: str, password: str, email: Optional[str] = None) -> bool:
        """
        Create the bootstrap admin if no user with that name exists.

        Returns:
            True if a user was created, False if it already existed
        """
        if self.users.get_by_username(username) is not None:
            return False

        dto = validate_request(RegisterUserRequest, {
            "username": username,
            "password": password,
            "email": email,
            "role": Role.ADMIN.value,
        })
        self._create(dto)
        logger.info(f"✅ Bootstrap admin '{username}' created")
        return True
