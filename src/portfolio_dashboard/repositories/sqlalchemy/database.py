"""
SQLite database behind the local key/value store.

One engine per process. AppContext opens it on initialize and disposes it on
close; sessions handed out afterwards all bind to that engine.
"""

import logging
from typing import Any, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session, declarative_base

from portfolio_dashboard.config.settings import get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _connect_args(url: str) -> dict[str, Any]:
    # Worker threads may write through the store's session
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def init_db(database_url: Optional[str] = None) -> Engine:
    """
    Open the database and create the local store tables.

    Args:
        database_url: SQLAlchemy URL. Defaults to the configured one, which is
            dashboard.db inside the data directory unless overridden.

    Returns:
        The engine now in use. A previously opened engine is disposed first.
    """
    global _engine, _session_factory
    from portfolio_dashboard.repositories.sqlalchemy import orm_models  # noqa: F401

    reset_database()
    url = database_url or get_settings().get_database_url()
    _engine = create_engine(url, connect_args=_connect_args(url))
    _session_factory = sessionmaker(bind=_engine, autoflush=False)
    Base.metadata.create_all(bind=_engine)
    logger.info("Local store database opened at %s", _engine.url)
    return _engine


def get_session() -> Session:
    """New session on the open database."""
    if _session_factory is None:
        raise RuntimeError("Local store database is not open. Call init_db() first.")
    return _session_factory()


def reset_database() -> None:
    """Dispose the open engine, if any."""
    global _engine, _session_factory

    if _engine is not None:
        _engine.dispose()
        logger.debug("Local store database closed")
    _engine = None
    _session_factory = None
