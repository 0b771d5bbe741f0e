from typing import Optional
import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from merchant_api.database import Base, engine as default_engine
from merchant_api import models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def init_database(engine: Optional[Engine] = None) -> list[str]:
    """
    Create any missing tables.

    Safe to run on every startup: existing tables are left untouched.

    Args:
        engine: Engine to initialize (defaults to the configured one)

    Returns:
        Names of the tables that were created by this call
    """
    engine = engine or default_engine
    existing = set(inspect(engine).get_table_names())

    Base.metadata.create_all(bind=engine)

    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info(f"✅ Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")
    return created
