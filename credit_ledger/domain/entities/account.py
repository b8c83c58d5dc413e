"""Account entity holding a customer's available credit limit."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass
class Account:
    """
    A customer account identified by its document number.

    The available credit limit is the only mutable field; it moves up
    or down as transactions are recorded against the account.
    """

    document_number: str
    available_credit_limit: Decimal
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def adjust_available_credit_limit(self, delta: Decimal) -> Decimal:
        """Add ``delta`` to the available credit limit. No bounds are enforced."""
        self.available_credit_limit = self.available_credit_limit + delta
        return self.available_credit_limit
