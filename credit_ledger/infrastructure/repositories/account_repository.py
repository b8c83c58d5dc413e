"""PostgreSQL implementation of AccountRepository."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from credit_ledger.domain.entities import Account
from credit_ledger.domain.interfaces import AccountRepository
from credit_ledger.infrastructure.database.models import AccountModel


class PostgresAccountRepository(AccountRepository):
    """
    PostgreSQL implementation of the Account repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, account: Account) -> Account:
        """Persist a new account to the database."""
        model = AccountModel(
            id=str(account.id),
            document_number=account.document_number,
            available_credit_limit=account.available_credit_limit,
            created_at=account.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return account

    async def update(self, account: Account) -> Account:
        """Write the account's current credit limit back to its row."""
        model = await self._get_model(account.id)

        if model is None:
            raise ValueError(f"Account {account.id} not found")

        model.available_credit_limit = account.available_credit_limit

        await self._session.flush()

        return account

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Retrieve an account by ID."""
        model = await self._get_model(account_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def _get_model(self, account_id: UUID) -> Optional[AccountModel]:
        stmt = select(AccountModel).where(AccountModel.id == str(account_id))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=UUID(model.id),
            document_number=model.document_number,
            available_credit_limit=model.available_credit_limit,
            created_at=model.created_at,
        )
