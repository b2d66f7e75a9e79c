"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date

import pytest

from conftest import STEAM_ID, make_platform
from sales.domain import GeneratedSale, PlanningPeriod, PlatformId, SaleStatus, SaleType
from sales.domain.strategies import STRATEGY_CONFIGS, DurationRule, Strategy


class TestPlatformId:
    """Tests for PlatformId value object."""

    def test_from_string_valid_uuid(self):
        """PlatformId.from_string parses valid UUID."""
        platform_id = PlatformId.from_string("00000000-0000-0000-0000-000000000001")
        assert platform_id == STEAM_ID
        assert str(platform_id) == "00000000-0000-0000-0000-000000000001"

    def test_from_string_invalid_uuid(self):
        """PlatformId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            PlatformId.from_string("steam")


class TestPlatform:
    """Tests for Platform construction rules."""

    def test_platform_accepts_zero_cooldown(self):
        """Platforms may have no cooldown."""
        assert make_platform(cooldown_days=0).cooldown_days == 0

    def test_platform_rejects_negative_cooldown(self):
        """A negative cooldown raises ValueError."""
        with pytest.raises(ValueError):
            make_platform(cooldown_days=-1)

    def test_platform_rejects_zero_max_sale_days(self):
        """Sales must be allowed to last at least a day."""
        with pytest.raises(ValueError):
            make_platform(max_sale_days=0)


class TestPlanningPeriod:
    """Tests for PlanningPeriod value object."""

    def test_twelve_months_from_new_year(self):
        """Twelve months from Jan 1 ends on Dec 31."""
        period = PlanningPeriod.from_months(date(2025, 1, 1), 12)
        assert period.end == date(2025, 12, 31)
        assert period.days == 365

    def test_month_arithmetic_clamps_to_month_end(self):
        """Jan 31 plus one month lands on Feb 29 in a leap year, minus a day."""
        period = PlanningPeriod.from_months(date(2024, 1, 31), 1)
        assert period.end == date(2024, 2, 28)

    def test_rejects_zero_months(self):
        """from_months needs at least one month."""
        with pytest.raises(ValueError):
            PlanningPeriod.from_months(date(2025, 1, 1), 0)

    def test_rejects_end_before_start(self):
        """A period cannot end before it starts."""
        with pytest.raises(ValueError):
            PlanningPeriod(start=date(2025, 2, 1), end=date(2025, 1, 31))

    def test_single_day_period(self):
        """A period starting and ending on the same day lasts one day."""
        period = PlanningPeriod(start=date(2025, 1, 1), end=date(2025, 1, 1))
        assert period.days == 1

    def test_overlaps_is_inclusive(self):
        """Ranges touching either end of the period overlap it."""
        period = PlanningPeriod(start=date(2025, 1, 1), end=date(2025, 12, 31))
        assert period.overlaps(date(2024, 12, 20), date(2025, 1, 1))
        assert period.overlaps(date(2025, 12, 31), date(2026, 1, 5))
        assert period.overlaps(date(2024, 1, 1), date(2026, 1, 1))
        assert not period.overlaps(date(2024, 12, 1), date(2024, 12, 31))
        assert not period.overlaps(date(2026, 1, 1), date(2026, 1, 7))


class TestGeneratedSale:
    """Tests for GeneratedSale and its persistence mapping."""

    def _sale(self) -> GeneratedSale:
        return GeneratedSale(
            id="gen-product-1-steam-custom-0",
            product_id="product-1",
            platform_id=STEAM_ID,
            platform_name="Steam",
            platform_color="#1b2838",
            start_date=date(2025, 1, 1),
            end_date=date(2025, 1, 14),
            discount_percentage=50,
            sale_name="Steam Launch Sale",
            sale_type=SaleType.CUSTOM,
            is_event=False,
        )

    def test_duration_is_inclusive(self):
        """Both the first and last day count."""
        assert self._sale().duration_days == 14

    def test_to_sale_draft_is_planned(self):
        """Mapping keeps the schedule and marks the sale as planned."""
        draft = self._sale().to_sale_draft()
        assert draft.status is SaleStatus.PLANNED
        assert draft.product_id == "product-1"
        assert draft.platform_id == STEAM_ID
        assert (draft.start_date, draft.end_date) == (date(2025, 1, 1), date(2025, 1, 14))
        assert draft.discount_percentage == 50
        assert draft.sale_name == "Steam Launch Sale"
        assert draft.sale_type is SaleType.CUSTOM

    def test_to_sale_draft_drops_ephemeral_id(self):
        """The generated id is not carried into the draft."""
        assert not hasattr(self._sale().to_sale_draft(), "id")


class TestStrategies:
    """Tests for strategy configuration records."""

    def test_week_rule_caps_at_seven_days(self):
        """Week sales last seven days or the platform maximum if shorter."""
        assert DurationRule.WEEK.duration_for(14) == 7
        assert DurationRule.WEEK.duration_for(3) == 3

    def test_full_rule_uses_platform_maximum(self):
        """Full sales use the platform maximum."""
        assert DurationRule.FULL.duration_for(14) == 14

    def test_events_only_falls_back_to_one_sale_without_events(self):
        """Events-only allows one custom sale only when there are no events."""
        config = STRATEGY_CONFIGS[Strategy.EVENTS_ONLY]
        assert config.custom_sale_cap(has_events=False) == 1
        assert config.custom_sale_cap(has_events=True) == 0

    def test_gap_filling_caps(self):
        """Maximize allows 50 custom sales and balanced 12."""
        assert STRATEGY_CONFIGS[Strategy.MAXIMIZE].custom_sale_cap(has_events=False) == 50
        assert STRATEGY_CONFIGS[Strategy.BALANCED].custom_sale_cap(has_events=True) == 12
