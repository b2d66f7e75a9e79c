"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.core.validators import MinValueValidator
from django.db import models


class Platform(models.Model):
    """Persistence model for distribution platforms."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    color_hex = models.CharField(max_length=7, default="#3b82f6")
    cooldown_days = models.PositiveIntegerField(default=30)
    max_sale_days = models.PositiveIntegerField(default=14, validators=[MinValueValidator(1)])
    approval_required = models.BooleanField(default=False)
    special_sales_no_cooldown = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class PlatformEvent(models.Model):
    """Persistence model for fixed seasonal platform sale windows."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    platform = models.ForeignKey(Platform, on_delete=models.CASCADE, related_name="events")
    name = models.CharField(max_length=255)
    start_date = models.DateField()
    end_date = models.DateField()
    requires_cooldown = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(fields=["platform", "start_date"], name="platform_event_start_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.platform.name} - {self.name}"


class Sale(models.Model):
    """Persistence model for planned and running sales."""

    class SaleType(models.TextChoices):
        CUSTOM = "custom"
        SEASONAL = "seasonal"
        FESTIVAL = "festival"
        SPECIAL = "special"

    class Status(models.TextChoices):
        DRAFT = "draft"
        PLANNED = "planned"
        SUBMITTED = "submitted"
        CONFIRMED = "confirmed"
        LIVE = "live"
        ENDED = "ended"
        REJECTED = "rejected"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product_id = models.CharField(max_length=64)
    platform = models.ForeignKey(Platform, on_delete=models.CASCADE, related_name="sales")
    start_date = models.DateField()
    end_date = models.DateField()
    discount_percentage = models.PositiveSmallIntegerField(blank=True, null=True)
    sale_name = models.CharField(max_length=255, blank=True)
    sale_type = models.CharField(max_length=16, choices=SaleType.choices, default=SaleType.CUSTOM)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.DRAFT)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["start_date"]
        indexes = [
            models.Index(
                fields=["product_id", "platform", "start_date"], name="sale_product_platform_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.sale_name or self.sale_type} ({self.start_date} - {self.end_date})"
