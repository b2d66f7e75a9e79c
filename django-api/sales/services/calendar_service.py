"""Calendar service - preview and apply generated sale calendars.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from datetime import date
from typing import Sequence

from django.conf import settings

from sales.domain import CalendarVariation, GeneratedSale, PlanningPeriod, Platform, Sale
from sales.domain.calendar import (
    DEFAULT_DISCOUNT_PERCENTAGE,
    DEFAULT_PLANNING_MONTHS,
    default_selected_platform_ids,
    generate_sale_calendar,
)
from sales.domain.errors import InvalidPlanningPeriodError, PlatformNotFoundError
from sales.services.parsing import parse_date, parse_platform_id
from sales.stores.interfaces import PlatformStore, SaleStore

logger = logging.getLogger(__name__)

_PAST_LAST_DATE = "Planning period extends past the last supported date"


def _calendar_setting(name: str, default: int) -> int:
    return getattr(settings, "SALE_CALENDAR", {}).get(name, default)


def _planning_period(
    start: date, months: int, end: date | None, platforms: Sequence[Platform]
) -> PlanningPeriod:
    """Resolve the horizon, keeping every date the generator derives from it representable.

    Placement looks up to a cooldown plus one sale length past the period end.
    """
    try:
        if end is not None:
            period = PlanningPeriod(start=start, end=end)
        else:
            period = PlanningPeriod.from_months(start, months)
    except (OverflowError, ValueError):
        raise InvalidPlanningPeriodError(_PAST_LAST_DATE) from None

    reach = max(
        (platform.cooldown_days + platform.max_sale_days for platform in platforms),
        default=0,
    )
    if (date.max - period.end).days < reach:
        raise InvalidPlanningPeriodError(_PAST_LAST_DATE)
    return period


class CalendarService:
    """Service for sale calendar generation."""

    def __init__(self, platform_store: PlatformStore, sale_store: SaleStore) -> None:
        self._platform_store = platform_store
        self._sale_store = sale_store

    def preview(
        self,
        product_id: str,
        launch_date: str,
        months: int | None = None,
        end_date: str | None = None,
        platform_ids: Sequence[str] | None = None,
        discount_percentage: int | None = None,
    ) -> list[CalendarVariation]:
        """Return the three calendar variations for a product.

        The horizon is ``end_date`` when given, otherwise ``months`` months
        from the launch date. Without ``platform_ids`` every platform with a
        cooldown is planned.

        Raises:
            InvalidDateError: If a date is not YYYY-MM-DD.
            InvalidPlanningPeriodError: If the horizon is empty, negative or runs
                past the last supported date.
            InvalidPlatformIdError: If a platform ID is not a valid UUID.
            PlatformNotFoundError: If a requested platform does not exist.
        """
        start = parse_date(launch_date, "launch_date")
        end = parse_date(end_date, "end_date") if end_date is not None else None
        if end is not None and end < start:
            raise InvalidPlanningPeriodError("Planning period cannot end before the launch date")
        if months is None:
            months = _calendar_setting("DEFAULT_MONTHS", DEFAULT_PLANNING_MONTHS)
        if months < 1:
            raise InvalidPlanningPeriodError("Planning period must cover at least one month")
        if discount_percentage is None:
            discount_percentage = _calendar_setting(
                "DEFAULT_DISCOUNT_PERCENTAGE", DEFAULT_DISCOUNT_PERCENTAGE
            )

        platforms = self._platform_store.list_platforms()
        if platform_ids is None:
            selected = default_selected_platform_ids(platforms)
        else:
            selected = [parse_platform_id(value) for value in platform_ids]
            known = {platform.id for platform in platforms}
            for platform_id in selected:
                if platform_id not in known:
                    raise PlatformNotFoundError(str(platform_id))

        period = _planning_period(
            start, months, end, [platform for platform in platforms if platform.id in selected]
        )
        variations = generate_sale_calendar(
            product_id=product_id,
            platforms=platforms,
            platform_events=self._platform_store.list_platform_events(),
            launch_date=period.start,
            end_date=period.end,
            default_discount_percentage=discount_percentage,
            selected_platform_ids=selected,
        )
        logger.info(
            "Generated calendar preview for product %s on %d platform(s) from %s",
            product_id,
            len(selected),
            start,
        )
        return variations

    def apply(self, sales: Sequence[GeneratedSale]) -> list[Sale]:
        """Persist accepted generated sales as planned sales.

        Raises:
            PlatformNotFoundError: If a sale refers to an unknown platform.
        """
        known = {platform.id for platform in self._platform_store.list_platforms()}
        for sale in sales:
            if sale.platform_id not in known:
                raise PlatformNotFoundError(str(sale.platform_id))

        created = self._sale_store.create_sales([sale.to_sale_draft() for sale in sales])
        logger.info("Applied %d generated sale(s)", len(created))
        return created
