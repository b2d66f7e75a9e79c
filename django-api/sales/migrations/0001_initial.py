import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Platform",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("color_hex", models.CharField(default="#3b82f6", max_length=7)),
                ("cooldown_days", models.PositiveIntegerField(default=30)),
                (
                    "max_sale_days",
                    models.PositiveIntegerField(
                        default=14, validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                ("approval_required", models.BooleanField(default=False)),
                ("special_sales_no_cooldown", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="PlatformEvent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("requires_cooldown", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "platform",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="events",
                        to="sales.platform",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date"],
                "indexes": [models.Index(fields=["platform", "start_date"], name="platform_event_start_idx")],
            },
        ),
        migrations.CreateModel(
            name="Sale",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("product_id", models.CharField(max_length=64)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("discount_percentage", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("sale_name", models.CharField(blank=True, max_length=255)),
                (
                    "sale_type",
                    models.CharField(
                        choices=[
                            ("custom", "Custom"),
                            ("seasonal", "Seasonal"),
                            ("festival", "Festival"),
                            ("special", "Special"),
                        ],
                        default="custom",
                        max_length=16,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("draft", "Draft"),
                            ("planned", "Planned"),
                            ("submitted", "Submitted"),
                            ("confirmed", "Confirmed"),
                            ("live", "Live"),
                            ("ended", "Ended"),
                            ("rejected", "Rejected"),
                        ],
                        default="draft",
                        max_length=16,
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "platform",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sales",
                        to="sales.platform",
                    ),
                ),
            ],
            options={
                "ordering": ["start_date"],
                "indexes": [
                    models.Index(fields=["product_id", "platform", "start_date"], name="sale_product_platform_idx")
                ],
            },
        ),
    ]
