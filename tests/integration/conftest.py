"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database for testing
- Test client for the FastAPI app with repositories bound to it
- Helpers to create accounts through the API
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from credit_ledger.main import app
from credit_ledger.core.dependencies import (
    get_account_repository,
    get_transaction_repository,
)
from credit_ledger.infrastructure.database import Base
from credit_ledger.infrastructure.repositories import (
    PostgresAccountRepository,
    PostgresTransactionRepository,
)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose repositories share one in-memory session.
    """
    async def override_get_account_repository():
        return PostgresAccountRepository(test_session)

    async def override_get_transaction_repository():
        return PostgresTransactionRepository(test_session)

    app.dependency_overrides[get_account_repository] = override_get_account_repository
    app.dependency_overrides[get_transaction_repository] = override_get_transaction_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def account_request() -> dict:
    """Request body for a valid account."""
    return {
        "document_number": "12345678900",
        "available_credit_limit": "100.00",
    }


@pytest_asyncio.fixture
async def account(client: AsyncClient, account_request: dict) -> dict:
    """An account with 100.00 of available credit, created through the API."""
    response = await client.post("/v1/accounts", json=account_request)
    assert response.status_code == 201
    return response.json()
