"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services import DefaultLoanService, LoanService
from src.core.config import Settings, get_settings
from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import PostgresLoanRepository


# Repository dependencies
async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresLoanRepository:
    """Get a LoanRepository instance."""
    return PostgresLoanRepository(session)


# Service dependencies
async def get_loan_service(
    loan_repo: Annotated[PostgresLoanRepository, Depends(get_loan_repository)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> LoanService:
    """Get a LoanService instance with all dependencies."""
    return DefaultLoanService(
        loan_repository=loan_repo,
        new_loan_limit=app_settings.new_loan_limit,
    )
