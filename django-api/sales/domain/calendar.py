"""Sale calendar generator.

Builds three alternative discount schedules for one product across a set of
platforms. Each platform is planned independently: its fixed seasonal events
are placed first, then custom sales are inserted greedily into the remaining
gaps according to the strategy. The whole computation is pure; nothing here
touches storage.
"""

import logging
import math
from datetime import date, timedelta
from typing import Iterable, Sequence

from sales.domain.conflicts import find_next_available_date, has_conflict
from sales.domain.models import (
    CalendarStats,
    CalendarVariation,
    GeneratedSale,
    Platform,
    PlatformEvent,
)
from sales.domain.strategies import STRATEGY_CONFIGS, STRATEGY_ORDER, StrategyConfig
from sales.domain.value_objects import PlanningPeriod, PlatformId, SaleType

logger = logging.getLogger(__name__)

DEFAULT_PLANNING_MONTHS = 12
DEFAULT_DISCOUNT_PERCENTAGE = 50


def _by_start(sale: GeneratedSale) -> date:
    return sale.start_date


def events_for_platform(
    platform: Platform,
    platform_events: Iterable[PlatformEvent],
    period: PlanningPeriod,
) -> list[PlatformEvent]:
    """Events of ``platform`` overlapping the period, ordered by start date."""
    events = [
        event
        for event in platform_events
        if event.platform_id == platform.id and period.overlaps(event.start_date, event.end_date)
    ]
    return sorted(events, key=lambda event: event.start_date)


def place_events(
    product_id: str,
    platform: Platform,
    platform_events: Iterable[PlatformEvent],
    period: PlanningPeriod,
    discount_percentage: int,
) -> list[GeneratedSale]:
    """Turn a platform's seasonal events into sales, clamped to the period.

    Events longer than the platform allows are truncated. An event that
    clashes with one already placed is dropped.
    """
    placed: list[GeneratedSale] = []

    for event in events_for_platform(platform, platform_events, period):
        start = max(event.start_date, period.start)
        end = min(event.end_date, period.end)
        if (end - start).days + 1 > platform.max_sale_days:
            end = start + timedelta(days=platform.max_sale_days - 1)

        cooldown_days = platform.cooldown_days if event.requires_cooldown else 0
        if has_conflict(start, end, placed, cooldown_days, True):
            logger.debug(
                "Dropping event %s on %s: conflicts with an earlier event",
                event.name,
                platform.name,
            )
            continue

        placed.append(
            GeneratedSale(
                id=f"gen-{product_id}-{platform.id}-event-{event.id}",
                product_id=product_id,
                platform_id=platform.id,
                platform_name=platform.name,
                platform_color=platform.color_hex,
                start_date=start,
                end_date=end,
                discount_percentage=discount_percentage,
                sale_name=event.name,
                sale_type=SaleType.SEASONAL,
                is_event=True,
                event_name=event.name,
            )
        )

    return placed


def fill_gaps(
    product_id: str,
    platform: Platform,
    event_sales: Sequence[GeneratedSale],
    period: PlanningPeriod,
    discount_percentage: int,
    config: StrategyConfig,
) -> list[GeneratedSale]:
    """Insert custom sales into the free stretches of a platform's timeline.

    Returns only the new custom sales; ``event_sales`` is not modified.
    """
    occupied = list(event_sales)
    custom_sales: list[GeneratedSale] = []

    duration = config.duration_rule.duration_for(platform.max_sale_days)
    cap = config.custom_sale_cap(has_events=bool(event_sales))
    cooldown = timedelta(days=platform.cooldown_days)
    search_from = period.start - timedelta(days=1)

    while len(custom_sales) < cap:
        start = find_next_available_date(
            search_from, occupied, platform.cooldown_days, period.end, duration
        )
        if start is None:
            break

        end = min(start + timedelta(days=duration - 1), period.end)
        index = len(custom_sales)
        if index == 0 and not event_sales:
            sale_name = f"{platform.name} Launch Sale"
        else:
            sale_name = f"Custom Sale {index + 1}"

        sale = GeneratedSale(
            id=f"gen-{product_id}-{platform.id}-custom-{index}",
            product_id=product_id,
            platform_id=platform.id,
            platform_name=platform.name,
            platform_color=platform.color_hex,
            start_date=start,
            end_date=end,
            discount_percentage=discount_percentage,
            sale_name=sale_name,
            sale_type=SaleType.CUSTOM,
            is_event=False,
        )
        custom_sales.append(sale)
        occupied.append(sale)
        search_from = end + cooldown

    return custom_sales


def generate_platform_sales(
    product_id: str,
    platform: Platform,
    platform_events: Iterable[PlatformEvent],
    period: PlanningPeriod,
    discount_percentage: int,
    config: StrategyConfig,
) -> list[GeneratedSale]:
    event_sales = place_events(product_id, platform, platform_events, period, discount_percentage)
    custom_sales = fill_gaps(
        product_id, platform, event_sales, period, discount_percentage, config
    )
    return sorted(event_sales + custom_sales, key=_by_start)


def calculate_stats(sales: Sequence[GeneratedSale], period: PlanningPeriod) -> CalendarStats:
    total_days_on_sale = sum(sale.duration_days for sale in sales)
    event_sales = sum(1 for sale in sales if sale.is_event)
    # Half-up rounding, the values are never negative.
    percentage = math.floor(100 * total_days_on_sale / period.days + 0.5)

    return CalendarStats(
        total_sales=len(sales),
        total_days_on_sale=total_days_on_sale,
        percentage_on_sale=percentage,
        event_sales=event_sales,
        custom_sales=len(sales) - event_sales,
    )


def default_selected_platform_ids(platforms: Iterable[Platform]) -> list[PlatformId]:
    """Platforms preselected for generation.

    Platforms without a cooldown are left out: every strategy would fill
    them back-to-back, so they are opt-in.
    """
    return [platform.id for platform in platforms if platform.cooldown_days > 0]


def generate_sale_calendar(
    product_id: str,
    platforms: Sequence[Platform],
    platform_events: Sequence[PlatformEvent],
    launch_date: date,
    months: int = DEFAULT_PLANNING_MONTHS,
    end_date: date | None = None,
    default_discount_percentage: int = DEFAULT_DISCOUNT_PERCENTAGE,
    selected_platform_ids: Iterable[PlatformId] | None = None,
) -> list[CalendarVariation]:
    """Generate the maximize, balanced and events-only variations, in that order.

    The planning period starts on ``launch_date`` and ends on ``end_date``
    when given, otherwise ``months`` months later (exclusive). When
    ``selected_platform_ids`` is given only those platforms are planned,
    keeping the order of ``platforms``.
    """
    if end_date is not None:
        period = PlanningPeriod(start=launch_date, end=end_date)
    else:
        period = PlanningPeriod.from_months(launch_date, months)

    if selected_platform_ids is not None:
        selected = set(selected_platform_ids)
        platforms = [platform for platform in platforms if platform.id in selected]

    variations: list[CalendarVariation] = []
    for strategy in STRATEGY_ORDER:
        config = STRATEGY_CONFIGS[strategy]
        sales: list[GeneratedSale] = []
        for platform in platforms:
            sales.extend(
                generate_platform_sales(
                    product_id,
                    platform,
                    platform_events,
                    period,
                    default_discount_percentage,
                    config,
                )
            )
        sales.sort(key=_by_start)

        stats = calculate_stats(sales, period)
        logger.debug(
            "%s: %d sales, %d%% of %d days on sale",
            config.name,
            stats.total_sales,
            stats.percentage_on_sale,
            period.days,
        )
        variations.append(
            CalendarVariation(
                strategy=strategy,
                name=config.name,
                description=config.description,
                sales=tuple(sales),
                stats=stats,
            )
        )

    return variations
