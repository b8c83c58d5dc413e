"""Application services (use cases)."""

from .account_service import AccountService
from .transaction_service import TransactionService

__all__ = [
    "AccountService",
    "TransactionService",
]
