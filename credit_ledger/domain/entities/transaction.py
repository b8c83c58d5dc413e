"""Transaction entity and the operation types that sign its amount."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import Optional
from uuid import UUID, uuid4

from credit_ledger.domain.exceptions import InvalidOperationTypeException


class OperationType(IntEnum):
    """Category of a transaction, identified by its numeric code."""

    IN_CASH = 1
    IN_INSTALLMENTS = 2
    WITHDRAW = 3
    PAYMENT = 4

    @classmethod
    def from_code(cls, code: Optional[int]) -> "OperationType":
        """
        Resolve an operation type from its numeric code.

        Raises:
            InvalidOperationTypeException: If code is None or unknown
        """
        if code is None or isinstance(code, bool):
            raise InvalidOperationTypeException(code)
        try:
            return cls(code)
        except ValueError:
            raise InvalidOperationTypeException(code) from None

    @property
    def label(self) -> str:
        return _OPERATION_RULES[self][0]

    @property
    def is_negative(self) -> bool:
        """True when this operation consumes available credit."""
        return _OPERATION_RULES[self][1]

    def apply_sign(self, amount: Decimal) -> Decimal:
        """Return the magnitude of ``amount`` carrying this operation's sign."""
        magnitude = abs(amount)
        return -magnitude if self.is_negative else magnitude


# code -> (label, negative)
_OPERATION_RULES = {
    OperationType.IN_CASH: ("cash withdrawal", True),
    OperationType.IN_INSTALLMENTS: ("installment purchase", True),
    OperationType.WITHDRAW: ("cash-advance withdrawal", True),
    OperationType.PAYMENT: ("payment", False),
}


@dataclass(frozen=True)
class Transaction:
    """
    Immutable record of an operation against an account.

    Attributes:
        account_id: The account this transaction belongs to
        operation_type: What kind of operation this was
        amount: Signed amount; negative for purchases and withdrawals
        event_date: When the transaction was recorded
    """

    account_id: UUID
    operation_type: OperationType
    amount: Decimal
    id: UUID = field(default_factory=uuid4)
    event_date: datetime = field(default_factory=datetime.utcnow)
