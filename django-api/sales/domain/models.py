"""Domain models for platforms, events and sales.

These are pure domain objects with no API input rules.
Django ORM models are in sales/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from sales.domain.strategies import Strategy
from sales.domain.value_objects import PlatformId, SaleId, SaleStatus, SaleType


@dataclass(frozen=True)
class Platform:
    """Distribution platform with its sale spacing rules."""

    id: PlatformId
    name: str
    color_hex: str
    cooldown_days: int
    max_sale_days: int
    approval_required: bool = False
    special_sales_no_cooldown: bool = False

    def __post_init__(self) -> None:
        if self.cooldown_days < 0:
            raise ValueError("Cooldown days cannot be negative")
        if self.max_sale_days < 1:
            raise ValueError("Max sale days must be at least 1")


@dataclass(frozen=True)
class PlatformEvent:
    """Externally negotiated seasonal sale window on a platform."""

    id: str
    platform_id: PlatformId
    name: str
    start_date: date
    end_date: date
    requires_cooldown: bool = True


@dataclass(frozen=True)
class SaleDraft:
    """A sale ready to be handed to the sales store."""

    product_id: str
    platform_id: PlatformId
    start_date: date
    end_date: date
    discount_percentage: int | None
    sale_name: str
    sale_type: SaleType
    status: SaleStatus = SaleStatus.PLANNED


@dataclass(frozen=True)
class GeneratedSale:
    """A proposed sale produced by the calendar generator.

    The id only identifies the sale within one generation call and is never
    persisted.
    """

    id: str
    product_id: str
    platform_id: PlatformId
    platform_name: str
    platform_color: str
    start_date: date
    end_date: date
    discount_percentage: int
    sale_name: str
    sale_type: SaleType
    is_event: bool
    event_name: str | None = None

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def to_sale_draft(self) -> SaleDraft:
        """Map an accepted proposal to a planned sale."""
        return SaleDraft(
            product_id=self.product_id,
            platform_id=self.platform_id,
            start_date=self.start_date,
            end_date=self.end_date,
            discount_percentage=self.discount_percentage,
            sale_name=self.sale_name,
            sale_type=self.sale_type,
        )


@dataclass(frozen=True)
class Sale:
    """Domain representation of a persisted Sale."""

    id: SaleId
    product_id: str
    platform_id: PlatformId
    start_date: date
    end_date: date
    discount_percentage: int | None
    sale_name: str
    sale_type: SaleType
    status: SaleStatus
    created_at: datetime


@dataclass(frozen=True)
class CalendarStats:
    total_sales: int
    total_days_on_sale: int
    percentage_on_sale: int
    event_sales: int
    custom_sales: int


@dataclass(frozen=True)
class CalendarVariation:
    """One strategy's proposed schedule across all platforms."""

    strategy: Strategy
    name: str
    description: str
    sales: tuple[GeneratedSale, ...]
    stats: CalendarStats


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a single sale against persisted sales."""

    valid: bool
    conflicts: tuple[Sale, ...]
    cooldown_end: date
    message: str | None = None
