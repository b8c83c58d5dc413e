"""PostgreSQL repository implementation for transactions."""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from credit_ledger.domain.entities import OperationType, Transaction
from credit_ledger.domain.interfaces import TransactionRepository
from credit_ledger.infrastructure.database.models import TransactionModel


class PostgresTransactionRepository(TransactionRepository):
    """PostgreSQL-backed transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(
            id=str(transaction.id),
            account_id=str(transaction.account_id),
            operation_type=int(transaction.operation_type),
            amount=transaction.amount,
            event_date=transaction.event_date,
        )

        self._session.add(model)
        await self._session.flush()

        return transaction

    async def get_by_account_id(self, account_id: UUID) -> List[Transaction]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.account_id == str(account_id))
            .order_by(TransactionModel.event_date.desc())
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: TransactionModel) -> Transaction:
        return Transaction(
            id=UUID(model.id),
            account_id=UUID(model.account_id),
            operation_type=OperationType(model.operation_type),
            amount=model.amount,
            event_date=model.event_date,
        )
