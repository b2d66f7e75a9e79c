"""Sale service - checks a single edited sale against persisted sales."""

from datetime import date

from sales.domain import SaleType, ValidationResult
from sales.domain.errors import (
    DateOutOfRangeError,
    InvalidDateRangeError,
    PlatformNotFoundError,
)
from sales.domain.validation import SaleCandidate, validate_sale
from sales.services.parsing import parse_date, parse_platform_id, parse_sale_id
from sales.stores.interfaces import PlatformStore, SaleStore


class SaleService:
    """Service for interactive sale edits."""

    def __init__(self, platform_store: PlatformStore, sale_store: SaleStore) -> None:
        self._platform_store = platform_store
        self._sale_store = sale_store

    def validate_sale(
        self,
        product_id: str,
        platform_id: str,
        start_date: str,
        end_date: str,
        sale_type: str | None = None,
        exclude_sale_id: str | None = None,
    ) -> ValidationResult:
        """Check a sale against the product's other sales on the platform.

        Raises:
            InvalidPlatformIdError: If the platform_id is not a valid UUID.
            InvalidSaleIdError: If the exclude_sale_id is not a valid UUID.
            InvalidDateError: If a date is not YYYY-MM-DD.
            InvalidDateRangeError: If the sale ends before it starts.
            PlatformNotFoundError: If the platform does not exist.
            DateOutOfRangeError: If the cooldown after end_date is not representable.
        """
        parsed_platform_id = parse_platform_id(platform_id)
        excluded = parse_sale_id(exclude_sale_id) if exclude_sale_id else None
        start = parse_date(start_date, "start_date")
        end = parse_date(end_date, "end_date")
        if end < start:
            raise InvalidDateRangeError()

        platform = self._platform_store.get_platform(parsed_platform_id)
        if platform is None:
            raise PlatformNotFoundError(platform_id)
        if (date.max - end).days <= platform.cooldown_days:
            raise DateOutOfRangeError("end_date")

        candidate = SaleCandidate(
            product_id=product_id,
            platform_id=parsed_platform_id,
            start_date=start,
            end_date=end,
            sale_type=SaleType(sale_type) if sale_type else None,
        )
        existing = self._sale_store.list_sales(product_id, parsed_platform_id)
        return validate_sale(candidate, existing, platform, exclude_sale_id=excluded)
