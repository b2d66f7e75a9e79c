from sales.handlers.views import (
    CalendarApplyView,
    CalendarPreviewView,
    PlatformListView,
    SaleValidationView,
)

__all__ = [
    "CalendarApplyView",
    "CalendarPreviewView",
    "PlatformListView",
    "SaleValidationView",
]
