"""
User Response DTO
"""

from typing import Optional

from merchant_api.domain.value_objects import Role
from merchant_api.dtos.base import ResponseModel


class UserResponse(ResponseModel):
    """Public view of a system user. The password hash is never exposed."""

    id: int
    username: str
    email: Optional[str] = None
    role: Role
