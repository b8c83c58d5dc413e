"""Pydantic schemas for API request/response validation."""

from .account import AccountRequestSchema, AccountResponseSchema
from .transaction import (
    AccountTransactionsResponseSchema,
    TransactionRequestSchema,
    TransactionResponseSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "AccountRequestSchema",
    "AccountResponseSchema",
    "AccountTransactionsResponseSchema",
    "TransactionRequestSchema",
    "TransactionResponseSchema",
    "ErrorResponseSchema",
]
