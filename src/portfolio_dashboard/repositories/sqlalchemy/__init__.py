"""SQLAlchemy repository implementations."""

from portfolio_dashboard.repositories.sqlalchemy.database import (
    get_session,
    init_db,
    reset_database,
    Base,
)
from portfolio_dashboard.repositories.sqlalchemy.local_store_repo import SqlAlchemyLocalStore

__all__ = [
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyLocalStore",
]
