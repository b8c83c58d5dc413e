"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from credit_ledger.domain.entities import Account, Transaction


class AccountRepository(ABC):
    """
    Abstract repository for Account persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """
        Persist a new account.

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        ...

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """
        Persist changes to an existing account.

        Args:
            account: The account to update

        Returns:
            The updated account
        """
        ...

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """
        Retrieve an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        ...


class TransactionRepository(ABC):
    """
    Abstract repository for Transaction persistence.

    Transactions are append-only; there is no update operation.
    """

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        """
        Persist a transaction.

        Args:
            transaction: The transaction to save

        Returns:
            The saved transaction
        """
        ...

    @abstractmethod
    async def get_by_account_id(self, account_id: UUID) -> List[Transaction]:
        """
        Retrieve all transactions recorded against an account.

        Args:
            account_id: The account's unique identifier

        Returns:
            List of transactions, ordered by event_date descending
        """
        ...
