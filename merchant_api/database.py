from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from merchant_api.config import settings
from merchant_api.exceptions import ApplicationError, ConflictError, TransactionError

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_db_engine(url: str, echo: bool = False, **kwargs) -> Engine:
    """
    Create an engine for the given URL.

    SQLite connections get foreign key enforcement and a busy timeout.
    """
    if url.startswith('sqlite'):
        kwargs.setdefault('connect_args', {'check_same_thread': False})
    engine = create_engine(url, echo=echo, pool_pre_ping=True, **kwargs)

    if engine.dialect.name == 'sqlite':
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks
            cursor.close()

    return engine


engine = create_db_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session, operation: str) -> Iterator[Session]:
    """
    Run a block as one atomic unit of work.

    Commits when the block finishes. Any failure rolls the session back so
    nothing from the block is visible to later reads:
      - ApplicationError subclasses are re-raised unchanged
      - IntegrityError becomes ConflictError
      - any other SQLAlchemyError becomes TransactionError

    Args:
        db: Database session
        operation: Operation name used in logs and errors

    Example:
        with transaction(db, "delete supplier"):
            repo.delete(supplier)
    """
    try:
        yield db
        db.commit()
    except ApplicationError:
        db.rollback()
        raise
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"{operation} - integrity violation, rolled back: {e.orig}")
        raise ConflictError(
            entity=operation,
            message=f"{operation} failed: uniqueness or integrity constraint violated"
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{operation} - database failure, rolled back: {e}", exc_info=True)
        raise TransactionError(operation, f"{operation} could not be completed") from e
    except Exception:
        db.rollback()
        raise
