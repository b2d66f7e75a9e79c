"""Calendar generation strategies and their placement parameters."""

from dataclasses import dataclass
from enum import Enum

WEEK_SALE_DAYS = 7


class Strategy(Enum):
    MAXIMIZE = "maximize"
    BALANCED = "balanced"
    EVENTS_ONLY = "events_only"


class DurationRule(Enum):
    """How long each custom sale runs on a platform."""

    FULL = "full"
    WEEK = "week"

    def duration_for(self, max_sale_days: int) -> int:
        if self is DurationRule.FULL:
            return max_sale_days
        return min(max_sale_days, WEEK_SALE_DAYS)


@dataclass(frozen=True)
class StrategyConfig:
    """Parameters consumed by the gap filler.

    ``cap`` bounds custom sales per platform. With ``fallback_on_empty`` a
    platform that received no events gets a single launch sale even when the
    cap is zero.
    """

    name: str
    description: str
    duration_rule: DurationRule
    cap: int
    fallback_on_empty: bool = False

    def custom_sale_cap(self, has_events: bool) -> int:
        if self.fallback_on_empty and not has_events:
            return max(self.cap, 1)
        return self.cap


STRATEGY_CONFIGS: dict[Strategy, StrategyConfig] = {
    Strategy.MAXIMIZE: StrategyConfig(
        name="Maximum Coverage",
        description=(
            "Maximize days on sale with full-length sales chained back-to-back after cooldowns"
        ),
        duration_rule=DurationRule.FULL,
        cap=50,
    ),
    Strategy.BALANCED: StrategyConfig(
        name="Balanced",
        description="All seasonal events plus monthly custom sales for steady visibility",
        duration_rule=DurationRule.WEEK,
        cap=12,
    ),
    Strategy.EVENTS_ONLY: StrategyConfig(
        name="Events Only",
        description=(
            "Participate only in platform seasonal events "
            "(plus one launch sale per platform without events)"
        ),
        duration_rule=DurationRule.WEEK,
        cap=0,
        fallback_on_empty=True,
    ),
}

STRATEGY_ORDER: tuple[Strategy, ...] = (
    Strategy.MAXIMIZE,
    Strategy.BALANCED,
    Strategy.EVENTS_ONLY,
)
