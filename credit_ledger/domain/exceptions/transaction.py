"""Transaction-related domain exceptions."""

from .base import DomainException


class InvalidOperationTypeException(DomainException):
    """Raised when an operation type code is missing or unknown."""

    def __init__(self, code: object = None):
        super().__init__(
            message="Operation type is invalid",
            code="INVALID_OPERATION_TYPE",
        )
        self.operation_type = code
