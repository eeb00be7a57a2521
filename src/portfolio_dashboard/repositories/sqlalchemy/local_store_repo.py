"""SQLAlchemy implementation of LocalStore."""

from typing import Optional

from sqlalchemy.orm import Session

from portfolio_dashboard.repositories.sqlalchemy.orm_models import LocalStorageORM


class SqlAlchemyLocalStore:
    """SQLite-backed key/value store."""

    def __init__(self, db: Session):
        self._db = db

    def get_item(self, key: str) -> Optional[str]:
        row = self._db.get(LocalStorageORM, key)
        return row.value if row else None

    def set_item(self, key: str, value: str) -> None:
        row = self._db.get(LocalStorageORM, key)
        if row:
            row.value = value
        else:
            self._db.add(LocalStorageORM(key=key, value=value))
        self._db.commit()

    def remove_item(self, key: str) -> None:
        row = self._db.get(LocalStorageORM, key)
        if row:
            self._db.delete(row)
            self._db.commit()
