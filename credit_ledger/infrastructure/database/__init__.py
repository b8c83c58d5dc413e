"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import Base, AccountModel, TransactionModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "AccountModel",
    "TransactionModel",
]
