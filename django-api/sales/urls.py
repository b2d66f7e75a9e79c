from django.urls import path

from sales.handlers import (
    CalendarApplyView,
    CalendarPreviewView,
    PlatformListView,
    SaleValidationView,
)

urlpatterns = [
    path("platforms", PlatformListView.as_view(), name="platform-list"),
    path(
        "products/<str:product_id>/calendar/preview",
        CalendarPreviewView.as_view(),
        name="calendar-preview",
    ),
    path(
        "products/<str:product_id>/calendar/apply",
        CalendarApplyView.as_view(),
        name="calendar-apply",
    ),
    path("sales/validate", SaleValidationView.as_view(), name="sale-validate"),
]
