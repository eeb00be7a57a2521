"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ApiError(AppError):
    """Raised when the backend rejects a request or cannot be reached."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        code: str = "API_ERROR",
    ):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message, code=code)


class NotFoundError(ApiError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, detail: Optional[str] = None):
        super().__init__(
            f"{resource} not found: {identifier}",
            status_code=404,
            detail=detail,
            code="NOT_FOUND",
        )


class AuthenticationError(ApiError):
    """Raised when the backend rejects the session token."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            detail or "Authentication required",
            status_code=401,
            detail=detail,
            code="UNAUTHORIZED",
        )


class TickerUpdateError(AppError):
    """Raised when renaming or merging a stock's ticker fails."""

    DEFAULT_MESSAGE = "Failed to update ticker"

    def __init__(self, detail: Optional[str] = None, code: str = "TICKER_UPDATE_FAILED"):
        self.detail = detail
        message = f"{self.DEFAULT_MESSAGE}: {detail}" if detail else self.DEFAULT_MESSAGE
        super().__init__(message, code=code)


class MergePartiallyAppliedError(TickerUpdateError):
    """
    Raised when a merge updated the target but failed to delete the source.

    Both records now carry the same ticker. Nothing is rolled back.
    """

    def __init__(self, target_id: int, source_id: int, detail: Optional[str] = None):
        self.target_id = target_id
        self.source_id = source_id
        super().__init__(
            f"stock {target_id} was updated but duplicate {source_id} could not be deleted"
            + (f" ({detail})" if detail else ""),
            code="MERGE_PARTIALLY_APPLIED",
        )
        self.detail = detail
