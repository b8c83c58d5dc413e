"""Data Transfer Objects for application layer."""

from .account import AccountRequest, AccountResponse
from .transaction import TransactionRequest, TransactionResponse

__all__ = [
    "AccountRequest",
    "AccountResponse",
    "TransactionRequest",
    "TransactionResponse",
]
