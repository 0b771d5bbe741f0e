import os

# Configure before merchant_api is imported: no file database, cheap hashing
os.environ.setdefault("MERCHANT_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("MERCHANT_API_BCRYPT_ROUNDS", "4")

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from merchant_api.database import create_db_engine
from merchant_api.init_db import init_database
from merchant_api.repositories import (
    AddressRepository,
    CustomerRepository,
    ProductRepository,
    SupplierRepository,
    UserRepository,
)
from merchant_api.services import (
    CustomerService,
    PasswordHasher,
    ProductService,
    StatisticsService,
    SupplierService,
    UserService,
)


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_db_engine('sqlite://', poolclass=StaticPool)
    init_database(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def supplier_service(db_session):
    return SupplierService(
        db_session,
        suppliers=SupplierRepository(db_session),
        addresses=AddressRepository(db_session),
        products=ProductRepository(db_session),
    )


@pytest.fixture
def product_service(db_session):
    return ProductService(
        db_session,
        products=ProductRepository(db_session),
        suppliers=SupplierRepository(db_session),
    )


@pytest.fixture
def customer_service(db_session):
    return CustomerService(
        db_session,
        customers=CustomerRepository(db_session),
        addresses=AddressRepository(db_session),
    )


@pytest.fixture
def statistics_service(db_session):
    return StatisticsService(
        suppliers=SupplierRepository(db_session),
        products=ProductRepository(db_session),
        customers=CustomerRepository(db_session),
    )


@pytest.fixture
def user_service(db_session):
    return UserService(db_session, UserRepository(db_session), PasswordHasher(rounds=4))


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test's in-memory session."""
    from fastapi.testclient import TestClient

    from merchant_api.database import get_db
    from merchant_api.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
