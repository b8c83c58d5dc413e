"""Transaction service - orchestrates recording a transaction against an account."""

from uuid import UUID

import structlog

from credit_ledger.application.dto import TransactionRequest, TransactionResponse
from credit_ledger.application.services.account_service import AccountService
from credit_ledger.domain.entities import OperationType, Transaction
from credit_ledger.domain.exceptions import InvalidAccountException
from credit_ledger.domain.interfaces import TransactionRepository

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        account_service: AccountService,
    ):
        self._transaction_repo = transaction_repository
        self._account_service = account_service

    async def create(self, request: TransactionRequest) -> TransactionResponse:
        """
        Record a transaction and move the account's available credit limit.

        The submitted amount is treated as a magnitude: purchases and
        withdrawals are stored negative, payments positive.

        Args:
            request: Account, operation type code and amount

        Returns:
            TransactionResponse with the signed amount

        Raises:
            InvalidAccountException: If the account is missing or unknown
            InvalidOperationTypeException: If the operation type code is invalid
        """
        account = await self._account_service.find_optional(request.account_id)
        if account is None:
            logger.warning(
                "transaction_account_not_found",
                account_id=str(request.account_id) if request.account_id else None,
            )
            raise InvalidAccountException()

        operation_type = OperationType.from_code(request.operation_type)
        signed_amount = operation_type.apply_sign(request.amount)

        log = logger.bind(
            account_id=str(account.id),
            operation_type=operation_type.name.lower(),
            operation=operation_type.label,
        )

        transaction = Transaction(
            account_id=account.id,
            operation_type=operation_type,
            amount=signed_amount,
        )
        await self._transaction_repo.save(transaction)

        # Not atomic with the insert above outside a shared session
        await self._account_service.update_available_credit_limit(signed_amount, account)

        log.info(
            "transaction_created",
            transaction_id=str(transaction.id),
            amount=str(signed_amount),
            available_credit_limit=str(account.available_credit_limit),
        )

        return TransactionResponse.from_entity(transaction)

    async def list_by_account(self, account_id: UUID) -> list[TransactionResponse]:
        """
        List the transactions recorded against an account, newest first.

        Args:
            account_id: The account's unique identifier

        Returns:
            List of TransactionResponse objects
        """
        transactions = await self._transaction_repo.get_by_account_id(account_id)

        logger.info(
            "account_transactions_retrieved",
            account_id=str(account_id),
            count=len(transactions),
        )

        return [TransactionResponse.from_entity(t) for t in transactions]
