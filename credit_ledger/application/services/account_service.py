"""Account service - handles account creation, lookup and credit limit updates."""

from decimal import Decimal
from typing import Optional
from uuid import UUID

import structlog

from credit_ledger.application.dto import AccountRequest, AccountResponse
from credit_ledger.domain.entities import Account
from credit_ledger.domain.exceptions import (
    InvalidAccountException,
    InvalidAvailableLimitCreditException,
)
from credit_ledger.domain.interfaces import AccountRepository

logger = structlog.get_logger(__name__)


class AccountService:
    """
    Application service for account use cases.
    """

    def __init__(self, account_repository: AccountRepository):
        self._account_repo = account_repository

    async def create(self, request: AccountRequest) -> AccountResponse:
        """
        Open a new account.

        Args:
            request: Document number and starting available credit limit

        Returns:
            AccountResponse for the persisted account

        Raises:
            InvalidAccountException: If the document number is missing or blank
            InvalidAvailableLimitCreditException: If the credit limit is missing
        """
        if not request.document_number or not request.document_number.strip():
            raise InvalidAccountException()

        if request.available_credit_limit is None:
            raise InvalidAvailableLimitCreditException()

        account = Account(
            document_number=request.document_number,
            available_credit_limit=request.available_credit_limit,
        )
        await self._account_repo.save(account)

        logger.info(
            "account_created",
            account_id=str(account.id),
            available_credit_limit=str(account.available_credit_limit),
        )

        return AccountResponse.from_entity(account)

    async def find(self, account_id: UUID) -> Optional[AccountResponse]:
        """
        Look up an account by ID.

        A missing account is a normal outcome here and yields None.
        """
        account = await self._account_repo.get_by_id(account_id)

        if account is None:
            logger.info("account_not_found", account_id=str(account_id))
            return None

        return AccountResponse.from_entity(account)

    async def find_optional(self, account_id: Optional[UUID]) -> Optional[Account]:
        """
        Fetch the account entity, or None when there is no such account.

        Args:
            account_id: The account's unique identifier, possibly None

        Returns:
            The Account entity if present
        """
        if account_id is None:
            return None

        return await self._account_repo.get_by_id(account_id)

    async def update_available_credit_limit(
        self,
        delta: Decimal,
        account: Account,
    ) -> Account:
        """
        Add ``delta`` to the account's available credit limit and persist it.

        Callers pass the signed change, not the resulting limit. The limit
        is not clamped and may become negative.
        """
        previous = account.available_credit_limit
        account.adjust_available_credit_limit(delta)
        await self._account_repo.update(account)

        logger.info(
            "available_credit_limit_updated",
            account_id=str(account.id),
            previous=str(previous),
            delta=str(delta),
            current=str(account.available_credit_limit),
        )

        return account
