"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_DATETIME = "INVALID_DATETIME"
    CORRUPT_DATA = "CORRUPT_DATA"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class IndexOutOfRangeError(DomainError):
    """Raised when a list position is outside the listed items."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            code=ErrorCode.INDEX_OUT_OF_RANGE,
            message=f"No item at position {index + 1} (there are {size})",
        )
        self.index = index
        self.size = size


class InvalidFieldError(DomainError):
    """Raised when an edit targets a field that cannot be edited."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FIELD,
            message=f"Unknown event field '{field}'",
        )
        self.field = field


class InvalidCategoryError(DomainError):
    """Raised when a category name does not match any category."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATEGORY,
            message=f"Unknown category '{value}'",
        )
        self.value = value


class InvalidDateTimeError(DomainError):
    """Raised when a start time is not in dd/MM/yyyy HH:mm format."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATETIME,
            message=f"Invalid date and time '{value}', expected dd/MM/yyyy HH:mm",
        )
        self.value = value


class CorruptDataError(DomainError):
    """Raised when the persisted event file cannot be read back."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.CORRUPT_DATA,
            message=f"Stored events could not be loaded: {detail}",
        )
        self.detail = detail
