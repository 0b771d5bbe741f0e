"""
Application Settings

All runtime configuration is read from MERCHANT_API_* environment variables
once at import time. Call load_settings() directly to re-read the environment
(useful in tests).
"""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from merchant_api.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "MERCHANT_API_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of the application configuration."""

    database_url: str = "sqlite:///./merchant_api.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    bcrypt_rounds: int = 12
    admin_username: Optional[str] = None
    admin_password: Optional[str] = None
    admin_email: Optional[str] = None

    @property
    def bootstrap_admin_enabled(self) -> bool:
        """True when both admin credentials are configured."""
        return bool(self.admin_username and self.admin_password)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes')


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build a Settings instance from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a variable holds an unusable value
    """
    env = os.environ if environ is None else environ

    def get(key: str, default: Optional[str] = None) -> Optional[str]:
        return env.get(f"{ENV_PREFIX}{key}", default)

    invalid = []

    rounds_raw = get("BCRYPT_ROUNDS", "12")
    try:
        bcrypt_rounds = int(rounds_raw)
        if not 4 <= bcrypt_rounds <= 31:
            raise ValueError(rounds_raw)
    except ValueError:
        invalid.append(f"{ENV_PREFIX}BCRYPT_ROUNDS")
        bcrypt_rounds = 12

    log_level = get("LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        invalid.append(f"{ENV_PREFIX}LOG_LEVEL")

    if invalid:
        raise ConfigurationError(
            f"Invalid configuration values: {', '.join(invalid)}",
            missing_keys=invalid
        )

    loaded = Settings(
        database_url=get("DATABASE_URL", Settings.database_url),
        sql_echo=_parse_bool(get("SQL_ECHO", "false")),
        log_level=log_level,
        log_dir=get("LOG_DIR") or None,
        bcrypt_rounds=bcrypt_rounds,
        admin_username=get("ADMIN_USERNAME") or None,
        admin_password=get("ADMIN_PASSWORD") or None,
        admin_email=get("ADMIN_EMAIL") or None,
    )
    logger.debug(f"Settings loaded (database: {loaded.database_url})")
    return loaded


settings = load_settings()
