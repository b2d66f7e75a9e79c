"""Single-sale validation against persisted sales.

Uses the same overlap and cooldown rules as the calendar generator so that a
sale accepted here would also be accepted as part of a generated calendar.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from sales.domain.conflicts import cooldown_period, has_conflict
from sales.domain.models import Platform, Sale, ValidationResult
from sales.domain.value_objects import PlatformId, SaleId, SaleStatus, SaleType

_COOLDOWN_EXEMPT_TYPES = frozenset({SaleType.SEASONAL, SaleType.SPECIAL})


@dataclass(frozen=True)
class SaleCandidate:
    """A sale being created or edited by a user."""

    product_id: str
    platform_id: PlatformId
    start_date: date
    end_date: date
    sale_type: SaleType | None = None


def validate_sale(
    candidate: SaleCandidate,
    existing_sales: Iterable[Sale],
    platform: Platform,
    exclude_sale_id: SaleId | None = None,
) -> ValidationResult:
    relevant = [
        sale
        for sale in existing_sales
        if sale.product_id == candidate.product_id
        and sale.platform_id == candidate.platform_id
        and sale.id != exclude_sale_id
        and sale.status is not SaleStatus.REJECTED
    ]

    cooldown_days = platform.cooldown_days
    if platform.special_sales_no_cooldown and candidate.sale_type in _COOLDOWN_EXEMPT_TYPES:
        cooldown_days = 0

    conflicts = tuple(
        sale
        for sale in relevant
        if has_conflict(candidate.start_date, candidate.end_date, [sale], cooldown_days, True)
    )

    message = None
    if conflicts:
        message = f"Sale conflicts with {len(conflicts)} existing sale(s) or cooldown period(s)"

    return ValidationResult(
        valid=not conflicts,
        conflicts=conflicts,
        cooldown_end=cooldown_period(candidate.end_date, platform.cooldown_days)[1],
        message=message,
    )
