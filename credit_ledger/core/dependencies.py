"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from credit_ledger.infrastructure.database import get_db_session
from credit_ledger.infrastructure.repositories import (
    PostgresAccountRepository,
    PostgresTransactionRepository,
)
from credit_ledger.application.services import AccountService, TransactionService


# Repository dependencies
async def get_account_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresAccountRepository:
    """Get an AccountRepository instance."""
    return PostgresAccountRepository(session)


async def get_transaction_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresTransactionRepository:
    """Get a TransactionRepository instance."""
    return PostgresTransactionRepository(session)


# Service dependencies
async def get_account_service(
    account_repo: Annotated[PostgresAccountRepository, Depends(get_account_repository)],
) -> AccountService:
    """Get an AccountService instance."""
    return AccountService(account_repository=account_repo)


async def get_transaction_service(
    transaction_repo: Annotated[
        PostgresTransactionRepository, Depends(get_transaction_repository)
    ],
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> TransactionService:
    """Get a TransactionService instance with all dependencies."""
    return TransactionService(
        transaction_repository=transaction_repo,
        account_service=account_service,
    )
