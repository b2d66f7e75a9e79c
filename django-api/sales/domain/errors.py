"""Domain error codes for the sales module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    PLATFORM_NOT_FOUND = "PLATFORM_NOT_FOUND"
    INVALID_PLATFORM_ID = "INVALID_PLATFORM_ID"
    INVALID_SALE_ID = "INVALID_SALE_ID"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    DATE_OUT_OF_RANGE = "DATE_OUT_OF_RANGE"
    INVALID_PLANNING_PERIOD = "INVALID_PLANNING_PERIOD"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PlatformNotFoundError(DomainError):
    """Raised when a platform does not exist."""

    def __init__(self, platform_id: str) -> None:
        super().__init__(
            code=ErrorCode.PLATFORM_NOT_FOUND,
            message="Platform not found",
        )
        object.__setattr__(self, "platform_id", platform_id)


class InvalidPlatformIdError(DomainError):
    """Raised when a platform ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PLATFORM_ID,
            message="Invalid platform ID format",
        )


class InvalidSaleIdError(DomainError):
    """Raised when a sale ID is not a valid UUID."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SALE_ID,
            message="Invalid sale ID format",
        )


class InvalidDateError(DomainError):
    """Raised when a date is not an ISO calendar date."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message=f"Invalid date for {field}, expected YYYY-MM-DD",
        )
        object.__setattr__(self, "field", field)


class InvalidDateRangeError(DomainError):
    """Raised when a sale ends before it starts."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_RANGE,
            message="Sale end date cannot be before its start date",
        )


class DateOutOfRangeError(DomainError):
    """Raised when a sale's cooldown would run past the last supported date."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.DATE_OUT_OF_RANGE,
            message=f"Date for {field} is too close to the last supported date",
        )
        object.__setattr__(self, "field", field)


class InvalidPlanningPeriodError(DomainError):
    """Raised when the planning horizon cannot be resolved."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PLANNING_PERIOD,
            message=reason,
        )
