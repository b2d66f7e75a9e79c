from django.contrib import admin

from sales.models import Platform, PlatformEvent, Sale


class PlatformEventInline(admin.TabularInline):
    model = PlatformEvent
    extra = 1


@admin.register(Platform)
class PlatformAdmin(admin.ModelAdmin):
    list_display = ["name", "cooldown_days", "max_sale_days", "approval_required"]
    search_fields = ["name"]
    inlines = [PlatformEventInline]


@admin.register(PlatformEvent)
class PlatformEventAdmin(admin.ModelAdmin):
    list_display = ["name", "platform", "start_date", "end_date", "requires_cooldown"]
    list_filter = ["platform"]


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ["sale_name", "product_id", "platform", "start_date", "end_date", "status"]
    list_filter = ["platform", "status", "sale_type"]
    search_fields = ["sale_name", "product_id"]
