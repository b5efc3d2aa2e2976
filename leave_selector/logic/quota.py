# logic/quota.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Set, Union

from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import LeaveCategory
from leave_selector.utils.date_helper import (
    in_range, month_end, month_start, today, week_end, week_start,
)

Remaining = Union[int, float]   # float only for math.inf (no cap)


@dataclass(frozen=True)
class QuotaStatus:
    used_weekly: int
    used_weeks_this_month: int
    used_total: int
    remaining_weekly: Remaining
    remaining_weeks_this_month: Remaining
    remaining_total: Remaining


def weeks_used_in_month(category_id: str, assignments: Iterable[Assignment], date: str) -> Set[str]:
    """
    Week-start dates (Monday) of the weeks in which `category_id` already
    has leave inside the month of `date`.
    - Only assignment dates inside the month count, so a week that straddles
      two months is counted by each month that has leave on its side of it.
    """
    lo, hi = month_start(date), month_end(date)
    return {
        week_start(a.date)
        for a in assignments
        if a.leave_category_id == category_id and in_range(a.date, lo, hi)
    }


def evaluate_quotas(category: LeaveCategory, assignments: Iterable[Assignment],
                    as_of: Optional[str] = None) -> QuotaStatus:
    """
    Used / remaining counts of every quota dimension of `category` as seen
    from `as_of` (defaults to today, for display only).
    Dimensions without a cap report math.inf remaining.
    """
    as_of = as_of or today()
    own = [a for a in assignments if a.leave_category_id == category.id]

    wk_lo, wk_hi = week_start(as_of), week_end(as_of)
    used_weekly = sum(1 for a in own if in_range(a.date, wk_lo, wk_hi))
    used_weeks = len(weeks_used_in_month(category.id, own, as_of))
    used_total = len(own)

    return QuotaStatus(
        used_weekly=used_weekly,
        used_weeks_this_month=used_weeks,
        used_total=used_total,
        remaining_weekly=category.weekly.remaining(used_weekly),
        remaining_weeks_this_month=category.weeks_per_month.remaining(used_weeks),
        remaining_total=category.total.remaining(used_total),
    )
