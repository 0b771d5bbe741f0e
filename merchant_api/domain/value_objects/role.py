"""
Role Value Object
"""

from enum import Enum


class Role(str, Enum):
    """Authorization role held by a system user."""

    ADMIN = "ADMIN"
    USER = "USER"

    def grants(self, required: "Role") -> bool:
        """Check whether this role satisfies a required role (ADMIN satisfies everything)."""
        return self is Role.ADMIN or self is required
