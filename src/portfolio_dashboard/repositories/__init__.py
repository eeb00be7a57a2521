"""Repository layer - data access abstractions and implementations."""

from portfolio_dashboard.repositories.protocols import LocalStore

__all__ = [
    "LocalStore",
]
