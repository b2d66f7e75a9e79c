"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Self
from uuid import UUID

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class PlatformId:
    """Unique identifier for a distribution Platform."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SaleId:
    """Unique identifier for a persisted Sale."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class SaleType(Enum):
    CUSTOM = "custom"
    SEASONAL = "seasonal"
    FESTIVAL = "festival"
    SPECIAL = "special"


class SaleStatus(Enum):
    DRAFT = "draft"
    PLANNED = "planned"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    LIVE = "live"
    ENDED = "ended"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PlanningPeriod:
    """Inclusive range of calendar dates a sale calendar is generated for."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Planning period cannot end before it starts")

    @classmethod
    def from_months(cls, start: date, months: int) -> Self:
        """Period covering ``months`` calendar months from ``start``.

        Month arithmetic clamps to the last day of shorter months, so a
        launch on Jan 31 with one month ends on Feb 27 (or 28 in leap years).
        """
        if months < 1:
            raise ValueError("Planning period must cover at least one month")
        return cls(start=start, end=start + relativedelta(months=months) - timedelta(days=1))

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def overlaps(self, start: date, end: date) -> bool:
        """True if the inclusive range ``start..end`` shares a day with the period."""
        return start <= self.end and end >= self.start
