"""Account API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path

from credit_ledger.application.dto import AccountRequest
from credit_ledger.application.services import AccountService, TransactionService
from credit_ledger.core.dependencies import get_account_service, get_transaction_service
from credit_ledger.core.metrics import record_account_created
from credit_ledger.domain.exceptions import AccountNotFoundException
from credit_ledger.presentation.schemas import (
    AccountRequestSchema,
    AccountResponseSchema,
    AccountTransactionsResponseSchema,
    ErrorResponseSchema,
    TransactionResponseSchema,
)

account_router = APIRouter(
    prefix="/accounts",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
    },
)


@account_router.post(
    "",
    response_model=AccountResponseSchema,
    status_code=201,
    summary="Create Account",
    description="""Open an account with a document number and an available credit limit""",
    responses={
        201: {"description": "Account created successfully"},
    },
)
async def create_account(
    request: AccountRequestSchema,
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> AccountResponseSchema:
    dto = AccountRequest(
        document_number=request.document_number,
        available_credit_limit=request.available_credit_limit,
    )

    response = await account_service.create(dto)

    record_account_created()

    return AccountResponseSchema(
        id=response.id,
        document_number=response.document_number,
        available_credit_limit=response.available_credit_limit,
    )


@account_router.get(
    "/{account_id}",
    response_model=AccountResponseSchema,
    summary="Get Account",
    description="""
    Retrieve an account by its ID.

    Returns the document number and the credit currently available.
    """,
    responses={
        200: {"description": "Account retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def get_account(
    account_id: Annotated[
        UUID,
        Path(description="UUID of the account to retrieve"),
    ],
    account_service: Annotated[AccountService, Depends(get_account_service)],
) -> AccountResponseSchema:
    response = await account_service.find(account_id)

    if response is None:
        raise AccountNotFoundException(str(account_id))

    return AccountResponseSchema(
        id=response.id,
        document_number=response.document_number,
        available_credit_limit=response.available_credit_limit,
    )


@account_router.get(
    "/{account_id}/transactions",
    response_model=AccountTransactionsResponseSchema,
    summary="List Account Transactions",
    description="""
    Retrieve every transaction recorded against an account.

    Returns transactions ordered by event date (newest first).
    """,
    responses={
        200: {"description": "Transactions retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def list_account_transactions(
    account_id: Annotated[
        UUID,
        Path(description="UUID of the account"),
    ],
    account_service: Annotated[AccountService, Depends(get_account_service)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> AccountTransactionsResponseSchema:
    if await account_service.find(account_id) is None:
        raise AccountNotFoundException(str(account_id))

    transactions = await transaction_service.list_by_account(account_id)

    return AccountTransactionsResponseSchema(
        account_id=str(account_id),
        transactions=[
            TransactionResponseSchema(
                id=t.id,
                account_id=t.account_id,
                operation_type=t.operation_type,
                amount=t.amount,
                event_date=t.event_date,
            )
            for t in transactions
        ],
    )
