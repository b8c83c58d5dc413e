"""Data transfer objects for transaction operations."""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class TransactionRequest:
    """
    Input data for recording a transaction.

    ``amount`` is taken as a magnitude; its sign comes from the
    operation type.
    """

    amount: Decimal
    account_id: Optional[UUID] = None
    operation_type: Optional[int] = None


@dataclass(frozen=True)
class TransactionResponse:
    """Response data for a recorded transaction."""

    id: str
    account_id: str
    operation_type: int
    amount: Decimal
    event_date: str

    @classmethod
    def from_entity(cls, transaction) -> "TransactionResponse":
        return cls(
            id=str(transaction.id),
            account_id=str(transaction.account_id),
            operation_type=int(transaction.operation_type),
            amount=transaction.amount,
            event_date=_format_utc(transaction.event_date),
        )


def _format_utc(moment: datetime) -> str:
    # Naive datetimes are already UTC (see Transaction.event_date)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat() + "Z"
