"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"

    # Store and server errors (500)
    TODO_NOT_FOUND = "TODO_NOT_FOUND"
    STORE_ERROR = "STORE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class StoreError(AppException):
    """A call to the document store failed."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            error_code=ErrorCode.STORE_ERROR,
            message=reason,
            status_code=500,
        )


class TodoOperationError(AppException):
    """A todo operation could not be completed against the store."""

    def __init__(
        self,
        action: str,
        reason: str,
        error_code: ErrorCode = ErrorCode.STORE_ERROR,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=f"failed to {action}: {reason}",
            status_code=500,
            details=details,
        )


class TodoNotFoundError(TodoOperationError):
    """Todo not found while toggling.

    Reported as a 500 like any other store failure on update; there is no
    separate 404 path.
    """

    def __init__(self, todo_id: str) -> None:
        super().__init__(
            action="update todo",
            reason=f"todo not found: {todo_id}",
            error_code=ErrorCode.TODO_NOT_FOUND,
            details={"todo_id": todo_id},
        )
