"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, String, DateTime, Text

from portfolio_dashboard.core.timezone import now_utc
from portfolio_dashboard.repositories.sqlalchemy.database import Base


class LocalStorageORM(Base):
    """One persisted key/value pair."""

    __tablename__ = "local_storage"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=now_utc, onupdate=now_utc)
