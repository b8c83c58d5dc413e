"""Account-related domain exceptions."""

from .base import DomainException


class InvalidAccountException(DomainException):
    """Raised when a document number is missing or a referenced account does not exist."""

    def __init__(self):
        super().__init__(
            message="Account invalid or not found",
            code="INVALID_ACCOUNT",
        )


class InvalidAvailableLimitCreditException(DomainException):
    """Raised when an account is created without an available credit limit."""

    def __init__(self):
        super().__init__(
            message="Available limit credit invalid or not found",
            code="INVALID_AVAILABLE_LIMIT_CREDIT",
        )


class AccountNotFoundException(DomainException):
    """Raised when an account lookup by ID comes back empty."""

    def __init__(self, account_id: str):
        super().__init__(
            message=f"Account not found: {account_id}",
            code="ACCOUNT_NOT_FOUND",
        )
        self.account_id = account_id
