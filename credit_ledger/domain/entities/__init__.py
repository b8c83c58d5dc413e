"""Domain Entities - Core business objects."""

from .account import Account
from .transaction import OperationType, Transaction

__all__ = [
    "Account",
    "OperationType",
    "Transaction",
]
