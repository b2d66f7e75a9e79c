"""Serializers for request formats and for domain models in API responses."""

from rest_framework import serializers

from sales.domain import SaleType

SALE_TYPE_CHOICES = [sale_type.value for sale_type in SaleType]


class PlatformSerializer(serializers.Serializer):
    """Serializer for Platform domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    color_hex = serializers.CharField()
    cooldown_days = serializers.IntegerField()
    max_sale_days = serializers.IntegerField()
    approval_required = serializers.BooleanField()
    special_sales_no_cooldown = serializers.BooleanField()


class GeneratedSaleSerializer(serializers.Serializer):
    """Serializer for GeneratedSale domain model."""

    id = serializers.CharField()
    product_id = serializers.CharField()
    platform_id = serializers.CharField()
    platform_name = serializers.CharField()
    platform_color = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    discount_percentage = serializers.IntegerField()
    sale_name = serializers.CharField()
    sale_type = serializers.CharField(source="sale_type.value")
    is_event = serializers.BooleanField()
    event_name = serializers.CharField(allow_null=True)


class CalendarStatsSerializer(serializers.Serializer):
    totalSales = serializers.IntegerField(source="total_sales")
    totalDaysOnSale = serializers.IntegerField(source="total_days_on_sale")
    percentageOnSale = serializers.IntegerField(source="percentage_on_sale")
    eventSales = serializers.IntegerField(source="event_sales")
    customSales = serializers.IntegerField(source="custom_sales")


class CalendarVariationSerializer(serializers.Serializer):
    """Serializer for CalendarVariation domain model."""

    strategy = serializers.CharField(source="strategy.value")
    name = serializers.CharField()
    description = serializers.CharField()
    sales = GeneratedSaleSerializer(many=True)
    stats = CalendarStatsSerializer()


class SaleSerializer(serializers.Serializer):
    """Serializer for persisted Sale domain model."""

    id = serializers.CharField()
    product_id = serializers.CharField()
    platform_id = serializers.CharField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    discount_percentage = serializers.IntegerField(allow_null=True)
    sale_name = serializers.CharField()
    sale_type = serializers.CharField(source="sale_type.value")
    status = serializers.CharField(source="status.value")
    created_at = serializers.DateTimeField()


class ValidationResultSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    conflicts = SaleSerializer(many=True)
    cooldown_end = serializers.DateField()
    message = serializers.CharField(allow_null=True)


class CalendarPreviewRequestSerializer(serializers.Serializer):
    """Request body for POST /api/products/{product_id}/calendar/preview.

    Dates and platform ids stay strings; the service owns their parsing.
    """

    launch_date = serializers.CharField()
    months = serializers.IntegerField(required=False, min_value=1, max_value=60)
    end_date = serializers.CharField(required=False)
    platform_ids = serializers.ListField(child=serializers.CharField(), required=False)
    discount_percentage = serializers.IntegerField(required=False, min_value=0, max_value=100)


class GeneratedSaleInputSerializer(serializers.Serializer):
    id = serializers.CharField(default="")
    platform_id = serializers.UUIDField()
    platform_name = serializers.CharField(default="")
    platform_color = serializers.CharField(default="")
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    discount_percentage = serializers.IntegerField(min_value=0, max_value=100)
    sale_name = serializers.CharField(max_length=255)
    sale_type = serializers.ChoiceField(choices=SALE_TYPE_CHOICES)
    is_event = serializers.BooleanField(default=False)
    event_name = serializers.CharField(allow_null=True, default=None)

    def validate(self, attrs):
        if attrs["end_date"] < attrs["start_date"]:
            raise serializers.ValidationError("end_date cannot be before start_date")
        return attrs


class CalendarApplyRequestSerializer(serializers.Serializer):
    """Request body for POST /api/products/{product_id}/calendar/apply."""

    sales = GeneratedSaleInputSerializer(many=True, allow_empty=False)


class SaleValidationRequestSerializer(serializers.Serializer):
    """Request body for POST /api/sales/validate."""

    product_id = serializers.CharField(max_length=64)
    platform_id = serializers.CharField()
    start_date = serializers.CharField()
    end_date = serializers.CharField()
    sale_type = serializers.ChoiceField(choices=SALE_TYPE_CHOICES, required=False)
    exclude_sale_id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
