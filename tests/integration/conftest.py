"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database for testing
- Test client for the FastAPI app wired to that database
- Fixed settings for the metadata endpoints
"""

from typing import AsyncGenerator, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.config import ContactInfo, Settings, get_settings
from src.core.dependencies import get_loan_repository
from src.domain.entities import Loan
from src.domain.interfaces import LoanRepository
from src.infrastructure.database import Base
from src.infrastructure.repositories import PostgresLoanRepository


# =============================================================================
# Test Doubles
# =============================================================================

class UnavailableLoanRepository(LoanRepository):
    """Repository whose backing store is down."""

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        raise ConnectionError("database unavailable")

    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        raise ConnectionError("database unavailable")

    async def save(self, loan: Loan) -> Loan:
        raise ConnectionError("database unavailable")

    async def delete_by_id(self, loan_id: int) -> None:
        raise ConnectionError("database unavailable")


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


@pytest.fixture
def loan_repository(test_session: AsyncSession) -> PostgresLoanRepository:
    """Repository bound to the test session."""
    return PostgresLoanRepository(test_session)


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with fixed metadata values."""
    return Settings(
        build_version="3.2.1",
        java_home="/opt/java/openjdk",
        new_loan_limit=100000,
        contact_info=ContactInfo(
            message="Welcome to the loans test environment",
            contact_email="loans-team@example.com",
            contact_numbers=["+1 555 0100", "+1 555 0101"],
        ),
    )


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    loan_repository: PostgresLoanRepository,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with overridden dependencies.

    This client uses an in-memory SQLite database and fixed settings.
    """
    async def override_get_loan_repository():
        return loan_repository

    app.dependency_overrides[get_loan_repository] = override_get_loan_repository
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_unavailable_db(
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose repository always fails."""
    async def override_get_loan_repository():
        return UnavailableLoanRepository()

    app.dependency_overrides[get_loan_repository] = override_get_loan_repository
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def mobile_number() -> str:
    return "9876543210"


@pytest.fixture
def other_mobile_number() -> str:
    return "9123456780"
