"""
Core pytest configuration for the entire test suite.

This module provides only the essential database setup and core utilities
that are needed across ALL types of tests (repositories, services, API, logging).

Domain-specific fixtures live in:
- tests/test_fixtures/factories.py   (Faker-backed payloads and persisted entities)

This separation keeps conftest.py clean and allows for modular test organization.
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import os
import logging
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Keep this block before importing warehouse_api.* so collection stays quiet.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "httpx",
    "aiosqlite",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from warehouse_api import models  # noqa: F401  (registers every table on Base.metadata)
from warehouse_api.config.settings import Settings, get_settings
from warehouse_api.core.logging.builder import setup_logging, stop_queue_logging
from warehouse_api.database.base import Base
from warehouse_api.database.session import build_engine, get_async_session
from warehouse_api.main import create_app

settings = get_settings()
logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install application logging once for the whole session, so the JSON formatter,
    request-id filter and redaction are active exactly as in the service.
    """
    setup_logging(settings)
    yield
    stop_queue_logging()


# ------------------------------------------------------------------------------------------------
# Test database URL
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    """Database URL without credentials, for logging."""
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url() -> str:
    """
    Priority:
      1. TEST_DATABASE_URL (CI override, e.g. a throwaway PostgreSQL)
      2. the app's DATABASE_URL when TESTING=true and TEST_POSTGRES_DB is set
      3. an in-memory SQLite database with foreign keys enforced
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url
    if settings.TESTING and settings.TEST_POSTGRES_DB:
        return settings.DATABASE_URL
    return "sqlite+aiosqlite://"


TEST_DATABASE_URL = get_test_database_url()
logger.info("tests.database", extra={"url": safe_log_db_url(TEST_DATABASE_URL)})


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture()
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh schema per test. Services commit after every write, so isolation comes
    from rebuilding the tables rather than from rolling back a wrapping transaction.
    """
    kwargs = {}
    if make_url(TEST_DATABASE_URL).get_backend_name() == "sqlite":
        # one shared connection, otherwise every checkout gets its own empty :memory: db
        kwargs["poolclass"] = StaticPool
    engine = build_engine(TEST_DATABASE_URL, **kwargs)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture()
def session_maker(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture()
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


# ------------------------------------------------------------------------------------------------
# HTTP FIXTURES
# ------------------------------------------------------------------------------------------------


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        ENV="testing",
        LOG_TO_STDOUT=True,
        LOG_USE_QUEUE=False,
        REQUEST_TIMEOUT_SECONDS=None,
        DATABASE_URL_OVERRIDE=TEST_DATABASE_URL,
    )


@pytest.fixture()
def app(test_settings: Settings, session_maker) -> FastAPI:
    """
    The real application with the session dependency pointed at the test engine;
    every request still gets its own session, as in production.
    """
    application = create_app(test_settings)

    async def _test_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    application.dependency_overrides[get_async_session] = _test_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Factory fixtures, available to every test module
from .test_fixtures.factories import (  # noqa: E402
    locality_payload,
    create_locality,
    create_seller,
    create_carry,
    create_warehouse,
    create_employee,
    create_buyer,
    create_product,
    create_product_record,
    create_section,
    create_product_batch,
    create_purchase_order,
    create_inbound_order,
    warehouse_graph,
)
