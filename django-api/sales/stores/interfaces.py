"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from sales.domain import Platform, PlatformEvent, PlatformId, Sale, SaleDraft


class PlatformStore(ABC):
    """Interface for platform catalogue reads."""

    @abstractmethod
    def list_platforms(self) -> list[Platform]:
        """Return all platforms ordered by name."""
        ...

    @abstractmethod
    def get_platform(self, platform_id: PlatformId) -> Platform | None:
        """Return a platform by ID, or None if not found."""
        ...

    @abstractmethod
    def list_platform_events(self) -> list[PlatformEvent]:
        """Return events of every platform, ordered by start_date ascending."""
        ...


class SaleStore(ABC):
    """Interface for sale persistence operations."""

    @abstractmethod
    def list_sales(self, product_id: str, platform_id: PlatformId) -> list[Sale]:
        """Return a product's sales on one platform, ordered by start_date."""
        ...

    @abstractmethod
    def create_sales(self, drafts: Sequence[SaleDraft]) -> list[Sale]:
        """Persist all drafts in one transaction and return the stored sales."""
        ...
