"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import date

import pytest
from django.core.cache import cache
from django.core.exceptions import ValidationError

from sales import models
from sales.domain import PlatformId, SaleDraft, SaleStatus, SaleType
from sales.stores.django_store import (
    FALLBACK_MAX_SALE_DAYS,
    PLATFORM_EVENTS_CACHE_KEY,
    PLATFORMS_CACHE_KEY,
    DjangoPlatformStore,
    DjangoSaleStore,
)


@pytest.fixture
def steam_row():
    return models.Platform.objects.create(name="Steam", cooldown_days=30, max_sale_days=14)


@pytest.fixture
def summer_row(steam_row):
    return models.PlatformEvent.objects.create(
        platform=steam_row,
        name="Summer Sale",
        start_date=date(2025, 6, 26),
        end_date=date(2025, 7, 10),
    )


@pytest.mark.django_db
class TestPlatformStoreCache:
    """Tests for cached platform and event lists."""

    def test_platform_list_is_cached(self, steam_row):
        """Bulk updates bypass signals, so the cached copy is served."""
        store = DjangoPlatformStore()
        [platform] = store.list_platforms()
        assert cache.get(PLATFORMS_CACHE_KEY) == [platform]

        models.Platform.objects.update(cooldown_days=7)
        assert store.list_platforms()[0].cooldown_days == 30

    def test_event_list_is_cached(self, summer_row):
        """Events are cached as domain objects."""
        store = DjangoPlatformStore()
        [event] = store.list_platform_events()
        assert event.name == "Summer Sale"
        assert event.platform_id == PlatformId(summer_row.platform_id)

        models.PlatformEvent.objects.update(name="Renamed")
        assert store.list_platform_events()[0].name == "Summer Sale"

    def test_zero_max_sale_days_falls_back(self, steam_row):
        """Rows saved without validation map to the 14 day default."""
        broken = models.Platform.objects.create(name="Broken", max_sale_days=0)
        store = DjangoPlatformStore()

        assert store.get_platform(PlatformId(broken.id)).max_sale_days == FALLBACK_MAX_SALE_DAYS
        assert {p.name: p.max_sale_days for p in store.list_platforms()} == {
            "Broken": 14,
            "Steam": 14,
        }

    def test_model_rejects_zero_max_sale_days(self):
        """Admin and form validation refuse zero-day sales."""
        with pytest.raises(ValidationError) as excinfo:
            models.Platform(name="Broken", max_sale_days=0).full_clean()
        assert "max_sale_days" in excinfo.value.message_dict

    def test_get_platform_reads_through(self, steam_row):
        """Single platform lookups always hit the database."""
        store = DjangoPlatformStore()
        store.list_platforms()
        models.Platform.objects.update(cooldown_days=7)
        assert store.get_platform(PlatformId(steam_row.id)).cooldown_days == 7


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_platform_save_invalidates_both_lists(self, steam_row, summer_row):
        """Saving a platform drops the platform and event lists."""
        store = DjangoPlatformStore()
        store.list_platforms()
        store.list_platform_events()

        steam_row.cooldown_days = 7
        steam_row.save()

        assert cache.get(PLATFORMS_CACHE_KEY) is None
        assert cache.get(PLATFORM_EVENTS_CACHE_KEY) is None
        assert store.list_platforms()[0].cooldown_days == 7

    def test_platform_delete_invalidates_events(self, steam_row, summer_row):
        """Deleting a platform cascades to its events and drops both lists."""
        store = DjangoPlatformStore()
        store.list_platform_events()

        steam_row.delete()

        assert store.list_platforms() == []
        assert store.list_platform_events() == []

    def test_event_create_invalidates_event_list(self, steam_row, summer_row):
        """Creating an event drops only the event list."""
        store = DjangoPlatformStore()
        store.list_platforms()
        store.list_platform_events()

        models.PlatformEvent.objects.create(
            platform=steam_row,
            name="Winter Sale",
            start_date=date(2025, 12, 18),
            end_date=date(2026, 1, 5),
        )

        assert cache.get(PLATFORM_EVENTS_CACHE_KEY) is None
        assert cache.get(PLATFORMS_CACHE_KEY) is not None
        assert len(store.list_platform_events()) == 2

    def test_event_delete_invalidates_event_list(self, summer_row):
        """Deleting an event drops the event list."""
        store = DjangoPlatformStore()
        store.list_platform_events()

        summer_row.delete()

        assert store.list_platform_events() == []


@pytest.mark.django_db
class TestDjangoSaleStore:
    """Tests for sale persistence."""

    def test_create_and_list_sales(self, steam_row):
        """Drafts are stored as planned and listed by start date per product."""
        store = DjangoSaleStore()
        platform_id = PlatformId(steam_row.id)
        drafts = [
            SaleDraft(
                product_id="product-1",
                platform_id=platform_id,
                start_date=date(2025, 3, 1),
                end_date=date(2025, 3, 7),
                discount_percentage=50,
                sale_name="Custom Sale 2",
                sale_type=SaleType.CUSTOM,
            ),
            SaleDraft(
                product_id="product-1",
                platform_id=platform_id,
                start_date=date(2025, 1, 1),
                end_date=date(2025, 1, 7),
                discount_percentage=50,
                sale_name="Steam Launch Sale",
                sale_type=SaleType.CUSTOM,
            ),
        ]

        created = store.create_sales(drafts)

        assert [sale.sale_name for sale in created] == ["Custom Sale 2", "Steam Launch Sale"]
        assert all(sale.status is SaleStatus.PLANNED for sale in created)
        listed = store.list_sales("product-1", platform_id)
        assert [sale.start_date for sale in listed] == [date(2025, 1, 1), date(2025, 3, 1)]
        assert store.list_sales("product-2", platform_id) == []
