"""
Fixtures for unit tests.

Provides in-memory repository fakes so the services can be exercised
without a database.
"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

import pytest

from credit_ledger.application.services import AccountService, TransactionService
from credit_ledger.domain.entities import Account, Transaction
from credit_ledger.domain.interfaces import AccountRepository, TransactionRepository


# =============================================================================
# In-Memory Repositories
# =============================================================================

class InMemoryAccountRepository(AccountRepository):
    """Account repository backed by a dict; records every write."""

    def __init__(self):
        self.accounts: dict[UUID, Account] = {}
        self.saved: List[Account] = []
        self.updated: List[Account] = []
        self.lookups: List[UUID] = []

    async def save(self, account: Account) -> Account:
        self.accounts[account.id] = account
        self.saved.append(account)
        return account

    async def update(self, account: Account) -> Account:
        if account.id not in self.accounts:
            raise ValueError(f"Account {account.id} not found")
        self.accounts[account.id] = account
        self.updated.append(account)
        return account

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        self.lookups.append(account_id)
        return self.accounts.get(account_id)


class InMemoryTransactionRepository(TransactionRepository):
    """Append-only transaction repository backed by a list."""

    def __init__(self):
        self.saved: List[Transaction] = []

    async def save(self, transaction: Transaction) -> Transaction:
        self.saved.append(transaction)
        return transaction

    async def get_by_account_id(self, account_id: UUID) -> List[Transaction]:
        matches = [t for t in self.saved if t.account_id == account_id]
        return sorted(matches, key=lambda t: t.event_date, reverse=True)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def account_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def transaction_repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def account_service(account_repository: InMemoryAccountRepository) -> AccountService:
    return AccountService(account_repository=account_repository)


@pytest.fixture
def transaction_service(
    transaction_repository: InMemoryTransactionRepository,
    account_service: AccountService,
) -> TransactionService:
    return TransactionService(
        transaction_repository=transaction_repository,
        account_service=account_service,
    )


@pytest.fixture
def existing_account(account_repository: InMemoryAccountRepository) -> Account:
    """An account with 100 of available credit, already persisted."""
    account = Account(
        id=UUID("8e9b62a7-fac8-47fc-a4b2-8406e23d85b0"),
        document_number="98457968",
        available_credit_limit=Decimal("100"),
    )
    account_repository.accounts[account.id] = account
    return account
