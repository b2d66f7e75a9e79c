"""Input parsing shared by the services, mapping bad values to domain errors."""

from datetime import date

from sales.domain import PlatformId, SaleId
from sales.domain.errors import InvalidDateError, InvalidPlatformIdError, InvalidSaleIdError


def parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidDateError(field) from None


def parse_platform_id(value: str) -> PlatformId:
    try:
        return PlatformId.from_string(value)
    except (AttributeError, TypeError, ValueError):
        raise InvalidPlatformIdError() from None


def parse_sale_id(value: str) -> SaleId:
    try:
        return SaleId.from_string(value)
    except (AttributeError, TypeError, ValueError):
        raise InvalidSaleIdError() from None
