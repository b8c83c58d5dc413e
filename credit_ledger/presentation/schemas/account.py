"""Account-related Pydantic schemas."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountRequestSchema(BaseModel):
    """Schema for POST /v1/accounts request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "document_number": "12345678900",
                    "available_credit_limit": "5000.00",
                }
            ]
        }
    )

    # Presence is enforced by AccountService so each field reports its own error
    document_number: Optional[str] = Field(
        None,
        max_length=64,
        description="Customer document number",
        examples=["12345678900"],
    )
    available_credit_limit: Optional[Decimal] = Field(
        None,
        max_digits=15,
        decimal_places=2,
        description="Starting available credit limit",
        examples=["5000.00"],
    )


class AccountResponseSchema(BaseModel):
    """Schema for an account in responses."""

    id: str = Field(
        ...,
        description="UUID of the account",
        examples=["3554cc7e-ae24-4ab7-b52d-fbfd53644bfe"],
    )
    document_number: str = Field(
        ...,
        description="Customer document number",
    )
    available_credit_limit: Decimal = Field(
        ...,
        description="Credit still available to the account",
        examples=["4990.00"],
    )
