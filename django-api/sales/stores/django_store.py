"""Django ORM implementation of the platform and sale stores."""

from typing import Sequence

from django.conf import settings
from django.core.cache import cache
from django.db import transaction

from sales import models
from sales.domain import (
    Platform,
    PlatformEvent,
    PlatformId,
    Sale,
    SaleDraft,
    SaleId,
    SaleStatus,
    SaleType,
)
from sales.stores.interfaces import PlatformStore, SaleStore

PLATFORMS_CACHE_KEY = "platforms:list"
PLATFORM_EVENTS_CACHE_KEY = "platform-events:list"

# Rows saved without model validation can carry 0 here.
FALLBACK_MAX_SALE_DAYS = 14


def _cache_timeout() -> int:
    return getattr(settings, "CACHE_TIMEOUT", 300)


def _platform_to_domain(row: models.Platform) -> Platform:
    return Platform(
        id=PlatformId(row.id),
        name=row.name,
        color_hex=row.color_hex,
        cooldown_days=row.cooldown_days,
        max_sale_days=row.max_sale_days or FALLBACK_MAX_SALE_DAYS,
        approval_required=row.approval_required,
        special_sales_no_cooldown=row.special_sales_no_cooldown,
    )


def _event_to_domain(row: models.PlatformEvent) -> PlatformEvent:
    return PlatformEvent(
        id=str(row.id),
        platform_id=PlatformId(row.platform_id),
        name=row.name,
        start_date=row.start_date,
        end_date=row.end_date,
        requires_cooldown=row.requires_cooldown,
    )


def _sale_to_domain(row: models.Sale) -> Sale:
    return Sale(
        id=SaleId(row.id),
        product_id=row.product_id,
        platform_id=PlatformId(row.platform_id),
        start_date=row.start_date,
        end_date=row.end_date,
        discount_percentage=row.discount_percentage,
        sale_name=row.sale_name,
        sale_type=SaleType(row.sale_type),
        status=SaleStatus(row.status),
        created_at=row.created_at,
    )


class DjangoPlatformStore(PlatformStore):
    """Platform catalogue backed by the ORM, cached until a row changes."""

    def list_platforms(self) -> list[Platform]:
        return cache.get_or_set(
            PLATFORMS_CACHE_KEY,
            lambda: [_platform_to_domain(row) for row in models.Platform.objects.all()],
            _cache_timeout(),
        )

    def get_platform(self, platform_id: PlatformId) -> Platform | None:
        row = models.Platform.objects.filter(pk=platform_id.value).first()
        if row is None:
            return None
        return _platform_to_domain(row)

    def list_platform_events(self) -> list[PlatformEvent]:
        return cache.get_or_set(
            PLATFORM_EVENTS_CACHE_KEY,
            lambda: [_event_to_domain(row) for row in models.PlatformEvent.objects.all()],
            _cache_timeout(),
        )


class DjangoSaleStore(SaleStore):
    """Sale persistence backed by the ORM."""

    def list_sales(self, product_id: str, platform_id: PlatformId) -> list[Sale]:
        rows = models.Sale.objects.filter(product_id=product_id, platform_id=platform_id.value)
        return [_sale_to_domain(row) for row in rows.order_by("start_date")]

    def create_sales(self, drafts: Sequence[SaleDraft]) -> list[Sale]:
        with transaction.atomic():
            rows = [
                models.Sale.objects.create(
                    product_id=draft.product_id,
                    platform_id=draft.platform_id.value,
                    start_date=draft.start_date,
                    end_date=draft.end_date,
                    discount_percentage=draft.discount_percentage,
                    sale_name=draft.sale_name,
                    sale_type=draft.sale_type.value,
                    status=draft.status.value,
                )
                for draft in drafts
            ]
        return [_sale_to_domain(row) for row in rows]
