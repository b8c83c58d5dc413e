"""Transaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from credit_ledger.application.dto import TransactionRequest
from credit_ledger.application.services import TransactionService
from credit_ledger.core.dependencies import get_transaction_service
from credit_ledger.core.metrics import record_transaction, track_transaction_latency
from credit_ledger.domain.entities import OperationType
from credit_ledger.presentation.schemas import (
    ErrorResponseSchema,
    TransactionRequestSchema,
    TransactionResponseSchema,
)

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid account or operation type"},
    },
)


@transaction_router.post(
    "",
    response_model=TransactionResponseSchema,
    status_code=201,
    summary="Create Transaction",
    description="""Record a transaction and update the account's available credit limit""",
    responses={
        201: {"description": "Transaction recorded successfully"},
    },
)
async def create_transaction(
    request: TransactionRequestSchema,
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionResponseSchema:
    """
    Record a transaction against an account.

    Purchases and withdrawals are stored as negative amounts and
    payments as positive, whatever sign the caller sent.
    """
    dto = TransactionRequest(
        account_id=request.account_id,
        operation_type=request.operation_type,
        amount=request.amount,
    )

    with track_transaction_latency():
        response = await transaction_service.create(dto)

    record_transaction(
        OperationType(response.operation_type).name.lower(),
        response.amount,
    )

    return TransactionResponseSchema(
        id=response.id,
        account_id=response.account_id,
        operation_type=response.operation_type,
        amount=response.amount,
        event_date=response.event_date,
    )
