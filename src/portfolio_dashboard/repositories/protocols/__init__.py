"""Repository protocol definitions (interfaces)."""

from portfolio_dashboard.repositories.protocols.local_store import LocalStore

__all__ = [
    "LocalStore",
]
