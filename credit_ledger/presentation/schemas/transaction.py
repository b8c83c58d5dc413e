"""Transaction-related Pydantic schemas."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionRequestSchema(BaseModel):
    """Schema for POST /v1/transactions request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "account_id": "8e9b62a7-fac8-47fc-a4b2-8406e23d85b0",
                    "operation_type": 1,
                    "amount": "10.00",
                }
            ]
        }
    )

    account_id: Optional[UUID] = Field(
        None,
        description="UUID of the account to charge or credit",
    )
    operation_type: Optional[int] = Field(
        None,
        description=(
            "1 = cash withdrawal, 2 = installment purchase, "
            "3 = cash-advance withdrawal, 4 = payment"
        ),
        examples=[1],
    )
    amount: Decimal = Field(
        ...,
        max_digits=15,
        decimal_places=2,
        description="Transaction amount; the sign is set by the operation type",
        examples=["10.00"],
    )

    @field_validator("operation_type", mode="wrap")
    @classmethod
    def keep_boolean_operation_type(cls, v, handler):
        """Leave booleans uncoerced so they are rejected as operation codes."""
        if isinstance(v, bool):
            return v
        return handler(v)


class TransactionResponseSchema(BaseModel):
    """Schema for a transaction in responses."""

    id: str = Field(
        ...,
        description="UUID of the transaction",
    )
    account_id: str = Field(
        ...,
        description="UUID of the account",
    )
    operation_type: int = Field(
        ...,
        ge=1,
        le=4,
        description="Operation type code",
    )
    amount: Decimal = Field(
        ...,
        description="Signed amount; negative for purchases and withdrawals",
        examples=["-10.00"],
    )
    event_date: str = Field(
        ...,
        description="ISO 8601 timestamp of the transaction",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "id": "35713a38-48d2-4b26-9dc1-751353d174ad",
                    "account_id": "8e9b62a7-fac8-47fc-a4b2-8406e23d85b0",
                    "operation_type": 1,
                    "amount": "-10.00",
                    "event_date": "2025-09-17T12:00:00Z",
                }
            ]
        }
    )


class AccountTransactionsResponseSchema(BaseModel):
    """Schema for GET /v1/accounts/{account_id}/transactions response."""

    account_id: str = Field(
        ...,
        description="UUID of the account",
    )
    transactions: list[TransactionResponseSchema] = Field(
        ...,
        description="Transactions recorded against the account, newest first",
    )
