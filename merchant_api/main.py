from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
import logging
import sys

from fastapi import FastAPI

from merchant_api import __version__
from merchant_api.api import customers, products, statistics, suppliers, users
from merchant_api.config import Settings, settings
from merchant_api.database import SessionLocal
from merchant_api.init_db import init_database
from merchant_api.repositories import UserRepository
from merchant_api.services import PasswordHasher, UserService
from merchant_api.utils.logging_utils import clear_logging_context

logger = logging.getLogger(__name__)

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
_logging_configured = False


def configure_logging(config: Settings) -> None:
    """
    Configure the root logger: stdout always, plus a rotating file when a
    log directory is configured. Safe to call more than once.
    """
    global _logging_configured

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    if _logging_configured:
        return

    log_formatter = logging.Formatter(_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if config.log_dir:
        log_dir = Path(config.log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_dir / "merchant_api.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)
        logger.info(f"Logging to {log_dir / 'merchant_api.log'}")

    _logging_configured = True


def bootstrap_admin(config: Settings) -> None:
    """Create the configured admin user on first start."""
    if not config.bootstrap_admin_enabled:
        return

    db = SessionLocal()
    try:
        service = UserService(db, UserRepository(db), PasswordHasher(rounds=config.bcrypt_rounds))
        service.ensure_admin(config.admin_username, config.admin_password, config.admin_email)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the bootstrap admin before serving requests."""
    logger.info("Starting Merchant API")
    init_database()
    bootstrap_admin(settings)
    yield
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    configure_logging(settings)

    app = FastAPI(
        title="Merchant API",
        description="Supplier, product and customer records",
        version=__version__,
        lifespan=lifespan
    )

    app.include_router(suppliers.router, tags=["suppliers"])
    app.include_router(products.router, tags=["products"])
    app.include_router(customers.router, tags=["customers"])
    app.include_router(statistics.router, tags=["statistics"])
    app.include_router(users.router, tags=["users"])

    @app.middleware("http")
    async def reset_log_context(request, call_next):
        clear_logging_context()
        return await call_next(request)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("merchant_api.main:app", host="0.0.0.0", port=8000)
