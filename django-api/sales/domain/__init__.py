from sales.domain.models import (
    CalendarStats,
    CalendarVariation,
    GeneratedSale,
    Platform,
    PlatformEvent,
    Sale,
    SaleDraft,
    ValidationResult,
)
from sales.domain.strategies import Strategy
from sales.domain.value_objects import PlanningPeriod, PlatformId, SaleId, SaleStatus, SaleType

__all__ = [
    "Platform",
    "PlatformEvent",
    "GeneratedSale",
    "SaleDraft",
    "Sale",
    "CalendarStats",
    "CalendarVariation",
    "ValidationResult",
    "Strategy",
    "PlanningPeriod",
    "PlatformId",
    "SaleId",
    "SaleStatus",
    "SaleType",
]
