"""Overlap and cooldown rules shared by the generator and the sale validator.

A sale occupies ``start_date..end_date`` and, on its platform, blocks new sales
from starting before ``end_date + cooldown_days``. Starting exactly on that
day is allowed.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, Protocol, Sequence

logger = logging.getLogger(__name__)

MAX_SEARCH_ITERATIONS = 400


class DatedSale(Protocol):
    start_date: date
    end_date: date


def has_conflict(
    candidate_start: date,
    candidate_end: date,
    existing_sales: Iterable[DatedSale],
    cooldown_days: int,
    check_forward: bool,
) -> bool:
    """Return True if the candidate range clashes with any existing sale.

    Checks direct overlap and the candidate starting inside an existing
    sale's cooldown. With ``check_forward`` it also rejects candidates whose
    own cooldown would swallow the start of a later existing sale.
    """
    for sale in existing_sales:
        if candidate_start <= sale.end_date and candidate_end >= sale.start_date:
            return True

        # Day gaps rather than date sums keep dates near date.max comparable.
        if 0 < (candidate_start - sale.end_date).days < cooldown_days:
            return True

        if check_forward and 0 < (sale.start_date - candidate_end).days < cooldown_days:
            return True

    return False


def find_next_available_date(
    after_date: date,
    existing_sales: Sequence[DatedSale],
    cooldown_days: int,
    period_end: date,
    sale_duration: int,
) -> date | None:
    """Earliest start after ``after_date`` that fits a sale before ``period_end``.

    The sale's end is clamped to ``period_end``. When a candidate is blocked,
    the search skips past the cooldown of every sale currently covering it
    instead of stepping one day at a time. Returns None when no slot exists.
    """
    one_day = timedelta(days=1)
    cooldown = timedelta(days=cooldown_days)
    length = timedelta(days=sale_duration - 1)

    candidate = after_date + one_day
    iterations = 0
    while candidate <= period_end:
        if iterations >= MAX_SEARCH_ITERATIONS:
            logger.debug(
                "Gave up searching for a %d-day slot after %d iterations at %s",
                sale_duration,
                iterations,
                candidate,
            )
            return None
        iterations += 1

        candidate_end = min(candidate + length, period_end)
        if not has_conflict(candidate, candidate_end, existing_sales, cooldown_days, True):
            return candidate

        next_candidate = candidate + one_day
        for sale in existing_sales:
            cooldown_end = sale.end_date + cooldown
            if sale.start_date <= candidate <= cooldown_end:
                next_candidate = max(next_candidate, cooldown_end + one_day)
        candidate = next_candidate

    return None


def cooldown_period(sale_end: date, cooldown_days: int) -> tuple[date, date]:
    """Inclusive window of days following a sale that fall in its cooldown."""
    return sale_end + timedelta(days=1), sale_end + timedelta(days=cooldown_days)
