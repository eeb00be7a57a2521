"""Core utilities and shared functionality."""

from portfolio_dashboard.core.timezone import (
    now_utc,
    to_utc,
    parse_timestamp,
    UTC,
)
from portfolio_dashboard.core.exceptions import (
    AppError,
    ValidationError,
    ApiError,
    NotFoundError,
    AuthenticationError,
    TickerUpdateError,
    MergePartiallyAppliedError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "parse_timestamp",
    "UTC",
    "AppError",
    "ValidationError",
    "ApiError",
    "NotFoundError",
    "AuthenticationError",
    "TickerUpdateError",
    "MergePartiallyAppliedError",
]
