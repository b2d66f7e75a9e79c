"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from sales.models import Platform, PlatformEvent
from sales.stores.django_store import PLATFORM_EVENTS_CACHE_KEY, PLATFORMS_CACHE_KEY


@receiver([post_save, post_delete], sender=Platform)
def invalidate_platform_cache(sender, instance, **kwargs):
    """Invalidate caches when a platform is saved or deleted.

    Deleting a platform cascades to its events, so both lists are dropped.
    """
    cache.delete_many([PLATFORMS_CACHE_KEY, PLATFORM_EVENTS_CACHE_KEY])


@receiver([post_save, post_delete], sender=PlatformEvent)
def invalidate_platform_event_cache(sender, instance, **kwargs):
    """Invalidate caches when a platform event is saved or deleted."""
    cache.delete(PLATFORM_EVENTS_CACHE_KEY)
