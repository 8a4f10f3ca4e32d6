# store/tests/conftest.py

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from store.api import dependencies
from store.config import AppConfig
from store.domain.entities import Address, Customer, Product
from store.infrastructure.database import create_database
from store.infrastructure.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyProductRepository,
)
from store.infrastructure.unit_of_work import UnitOfWork
from store.main import Application


@pytest.fixture(scope="function")
def app_config():
    """
    Provide a test configuration with a shared in-memory SQLite database.
    """
    return AppConfig(
        DATABASE_URL="sqlite+aiosqlite:///:memory:?cache=shared",
        PROJECT_NAME="Test Store API",
        PROJECT_VERSION="1.0.0",
        PROJECT_DESCRIPTION="Test Store API",
        API_V1_STR="/api/v1",
        LOG_LEVEL="INFO",
    )


@pytest.fixture(scope="function")
async def engine(app_config):
    """Create a SQLAlchemy engine for testing with shared in-memory SQLite."""
    engine = create_async_engine(
        app_config.DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with engine.begin() as conn:
        from store.infrastructure import models  # noqa: F401

        await conn.run_sync(models.Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session(engine):
    """Provide a SQLAlchemy session for testing."""
    async_session_factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False
    )
    session = async_session_factory()
    yield session
    await session.close()


@pytest.fixture(scope="function")
def uow(db_session):
    return UnitOfWork(db_session)


@pytest.fixture(scope="function")
def override_get_db(db_session):
    """Override the get_session dependency to use the test session."""

    async def _override_get_db():
        yield db_session

    return _override_get_db


@pytest.fixture(scope="function")
def application(app_config, engine):
    application = Application(config=app_config)
    application.database = create_database(engine)
    return application


@pytest.fixture(scope="function")
async def app(application):
    """Create the FastAPI app with the test database."""
    return application.create_app()


@pytest.fixture(scope="function")
async def app_with_db(app, override_get_db):
    """Override dependencies to use the test database session."""
    app.dependency_overrides[dependencies.get_session] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def client(app_with_db):
    """Provide an HTTP client with the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app_with_db), base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture(scope="function")
async def test_customer(db_session):
    """Create a customer with an address in the database."""
    customer = Customer(id="c1", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    await SQLAlchemyCustomerRepository(db_session).create(customer)
    await db_session.commit()
    return customer


@pytest.fixture(scope="function")
async def test_product(db_session):
    product = Product(id="p1", name="Product 1", price=10.0)
    await SQLAlchemyProductRepository(db_session).create(product)
    await db_session.commit()
    return product


@pytest.fixture(scope="function")
async def test_product2(db_session):
    product = Product(id="p2", name="Product 2", price=20.0)
    await SQLAlchemyProductRepository(db_session).create(product)
    await db_session.commit()
    return product
