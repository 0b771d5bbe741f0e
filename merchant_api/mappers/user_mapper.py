"""
Mapping functions for User <-> User DTOs.
"""
from merchant_api.domain.value_objects import Role
from merchant_api.dtos.request import RegisterUserRequest
from merchant_api.dtos.response import UserResponse
from merchant_api.models import User


class UserMapper:

    def to_entity(self, dto: RegisterUserRequest, password_hash: str) -> User:
        """Build a new, unsaved User. The plain password is never copied."""
        return User(
            username=dto.username,
            email=dto.email,
            password_hash=password_hash,
            role=dto.role.value,
        )

    def to_response(self, user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            role=Role(user.role),
        )
