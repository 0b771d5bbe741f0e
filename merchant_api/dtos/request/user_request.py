"""
User Request DTOs
"""

from typing import Annotated, Optional

from pydantic import StringConstraints

from merchant_api.constants import FieldLimits
from merchant_api.domain.value_objects import Role
from merchant_api.dtos.base import RequestModel
from merchant_api.validation import email_str, max_utf8_bytes, required_str


class RegisterUserRequest(RequestModel):
    """Request DTO for registering a system user."""

    username: required_str(FieldLimits.USERNAME)
    email: Optional[email_str(FieldLimits.EMAIL)] = None
    password: Annotated[
        str,
        StringConstraints(min_length=FieldLimits.PASSWORD_MIN),
        max_utf8_bytes(FieldLimits.PASSWORD_MAX_BYTES),
    ]
    role: Role = Role.USER
