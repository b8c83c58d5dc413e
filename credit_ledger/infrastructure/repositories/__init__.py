"""Repository implementations."""

from .account_repository import PostgresAccountRepository
from .transaction_repository import PostgresTransactionRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresTransactionRepository",
]
