"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timezone
from uuid import UUID, uuid4

import pytest
from rest_framework.test import APIClient

from sales.domain import (
    Platform,
    PlatformEvent,
    PlatformId,
    Sale,
    SaleId,
    SaleStatus,
    SaleType,
)
from sales.stores.interfaces import PlatformStore, SaleStore

STEAM_ID = PlatformId(UUID("00000000-0000-0000-0000-000000000001"))
EPIC_ID = PlatformId(UUID("00000000-0000-0000-0000-000000000002"))
ITCH_ID = PlatformId(UUID("00000000-0000-0000-0000-000000000003"))


class InMemoryPlatformStore(PlatformStore):
    def __init__(self, platforms=(), events=()) -> None:
        self.platforms = list(platforms)
        self.events = list(events)

    def list_platforms(self) -> list[Platform]:
        return list(self.platforms)

    def get_platform(self, platform_id: PlatformId) -> Platform | None:
        return next((p for p in self.platforms if p.id == platform_id), None)

    def list_platform_events(self) -> list[PlatformEvent]:
        return list(self.events)


class InMemorySaleStore(SaleStore):
    def __init__(self, sales=()) -> None:
        self.sales = list(sales)

    def list_sales(self, product_id: str, platform_id: PlatformId) -> list[Sale]:
        return [
            sale
            for sale in self.sales
            if sale.product_id == product_id and sale.platform_id == platform_id
        ]

    def create_sales(self, drafts) -> list[Sale]:
        created = [
            Sale(
                id=SaleId(uuid4()),
                product_id=draft.product_id,
                platform_id=draft.platform_id,
                start_date=draft.start_date,
                end_date=draft.end_date,
                discount_percentage=draft.discount_percentage,
                sale_name=draft.sale_name,
                sale_type=draft.sale_type,
                status=draft.status,
                created_at=datetime.now(timezone.utc),
            )
            for draft in drafts
        ]
        self.sales.extend(created)
        return created


def make_platform(
    platform_id: PlatformId = STEAM_ID,
    name: str = "Steam",
    cooldown_days: int = 30,
    max_sale_days: int = 14,
    special_sales_no_cooldown: bool = False,
) -> Platform:
    return Platform(
        id=platform_id,
        name=name,
        color_hex="#1b2838",
        cooldown_days=cooldown_days,
        max_sale_days=max_sale_days,
        special_sales_no_cooldown=special_sales_no_cooldown,
    )


def make_event(
    start: date,
    end: date,
    platform_id: PlatformId = STEAM_ID,
    name: str = "Seasonal Sale",
    requires_cooldown: bool = True,
    event_id: str | None = None,
) -> PlatformEvent:
    return PlatformEvent(
        id=event_id or f"{name.lower().replace(' ', '-')}-{start.isoformat()}",
        platform_id=platform_id,
        name=name,
        start_date=start,
        end_date=end,
        requires_cooldown=requires_cooldown,
    )


def make_sale(
    start: date,
    end: date,
    product_id: str = "product-1",
    platform_id: PlatformId = STEAM_ID,
    status: SaleStatus = SaleStatus.PLANNED,
    sale_type: SaleType = SaleType.CUSTOM,
) -> Sale:
    return Sale(
        id=SaleId(uuid4()),
        product_id=product_id,
        platform_id=platform_id,
        start_date=start,
        end_date=end,
        discount_percentage=40,
        sale_name="Existing Sale",
        sale_type=sale_type,
        status=status,
        created_at=datetime(2024, 12, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def steam() -> Platform:
    return make_platform()


@pytest.fixture
def platform_store() -> InMemoryPlatformStore:
    return InMemoryPlatformStore(
        platforms=[
            make_platform(),
            make_platform(EPIC_ID, name="Epic", cooldown_days=14, max_sale_days=7),
            make_platform(ITCH_ID, name="itch.io", cooldown_days=0, max_sale_days=30),
        ],
        events=[
            make_event(date(2025, 6, 26), date(2025, 7, 10), name="Summer Sale"),
        ],
    )


@pytest.fixture
def sale_store() -> InMemorySaleStore:
    return InMemorySaleStore()
