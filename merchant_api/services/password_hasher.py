"""
Password hashing.
"""

import logging

import bcrypt

from merchant_api.constants import FieldLimits

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Bcrypt password hashing utility."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize with bcrypt rounds (cost factor)."""
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Raises:
            ValueError: If the password is longer than bcrypt can read
        """
        secret = password.encode("utf-8")
        if len(secret) > FieldLimits.PASSWORD_MAX_BYTES:
            raise ValueError(f"password exceeds {FieldLimits.PASSWORD_MAX_BYTES} bytes")
        hashed = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Verify a password against its hash.

        Over-long passwords and malformed hashes never verify; a stored hash can
        only come from a password within the byte limit.
        """
        secret = password.encode("utf-8")
        if len(secret) > FieldLimits.PASSWORD_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(secret, password_hash.encode("utf-8"))
        except ValueError as e:
            logger.error(f"Password verification failed: {e}")
            return False
