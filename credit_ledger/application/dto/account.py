"""Data transfer objects for account operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class AccountRequest:
    """Input data for opening an account. Fields are checked by AccountService."""

    document_number: Optional[str] = None
    available_credit_limit: Optional[Decimal] = None


@dataclass(frozen=True)
class AccountResponse:
    """Response data for an account."""

    id: str
    document_number: str
    available_credit_limit: Decimal

    @classmethod
    def from_entity(cls, account) -> "AccountResponse":
        return cls(
            id=str(account.id),
            document_number=account.document_number,
            available_credit_limit=account.available_credit_limit,
        )
