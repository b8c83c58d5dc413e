"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .account import (
    AccountNotFoundException,
    InvalidAccountException,
    InvalidAvailableLimitCreditException,
)
from .transaction import InvalidOperationTypeException

__all__ = [
    "DomainException",
    "AccountNotFoundException",
    "InvalidAccountException",
    "InvalidAvailableLimitCreditException",
    "InvalidOperationTypeException",
]
