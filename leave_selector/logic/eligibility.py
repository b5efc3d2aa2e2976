# logic/eligibility.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from leave_selector.logic.quota import evaluate_quotas, weeks_used_in_month
from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import LeaveCategory
from leave_selector.utils.date_helper import in_range, week_start, weekday_number

OUTSIDE_WINDOW = "outside leave window"
DAY_NOT_ALLOWED = "day of week not allowed"
ALREADY_ASSIGNED = "already assigned"
DATE_TAKEN = "date already has another leave assigned"
WEEKLY_EXCEEDED = "weekly quota exceeded"
TOTAL_EXCEEDED = "total quota exceeded"
MONTHLY_WEEKS_EXCEEDED = "monthly week limit exceeded"
CATEGORY_NOT_FOUND = "leave category not found"


@dataclass(frozen=True)
class Eligibility:
    eligible: bool
    reason: Optional[str] = None

    def __bool__(self):
        return self.eligible


ELIGIBLE = Eligibility(True)


def _deny(reason: str) -> Eligibility:
    return Eligibility(False, reason)


def evaluate_eligibility(category: LeaveCategory, date: str,
                         assignments: Sequence[Assignment]) -> Eligibility:
    """
    Can `category` be placed on `date` given the existing `assignments`?

    Checks run in a fixed order and the first failure is reported:
      1) window  2) day of week  3) same leave already on the date
      4) any leave on the date  5) weekly  6) total  7) weeks per month
    """
    if not in_range(date, category.window.start, category.window.end):
        return _deny(OUTSIDE_WINDOW)

    if category.days_of_week is not None and weekday_number(date) not in category.days_of_week:
        return _deny(DAY_NOT_ALLOWED)

    on_date = [a for a in assignments if a.date == date]
    if any(a.leave_category_id == category.id for a in on_date):
        return _deny(ALREADY_ASSIGNED)
    if on_date:
        return _deny(DATE_TAKEN)

    quotas = evaluate_quotas(category, assignments, date)
    if category.weekly.is_limited and quotas.remaining_weekly <= 0:
        return _deny(WEEKLY_EXCEEDED)
    if category.total.is_limited and quotas.remaining_total <= 0:
        return _deny(TOTAL_EXCEEDED)

    if category.weeks_per_month.is_limited:
        used = weeks_used_in_month(category.id, assignments, date)
        # more leave inside an already counted week is free for this quota
        if week_start(date) not in used and len(used) >= category.weeks_per_month.max:
            return _deny(MONTHLY_WEEKS_EXCEEDED)

    return ELIGIBLE


def find_category(categories: Sequence[LeaveCategory], category_id: str) -> Optional[LeaveCategory]:
    return next((c for c in categories if c.id == category_id), None)


def check_category(categories: Sequence[LeaveCategory], category_id: str, date: str,
                   assignments: Sequence[Assignment]) -> Eligibility:
    """Same as evaluate_eligibility, by id; a dangling id is just another ineligibility."""
    category = find_category(categories, category_id)
    if category is None:
        return _deny(CATEGORY_NOT_FOUND)
    return evaluate_eligibility(category, date, assignments)


def explain_date(categories: Sequence[LeaveCategory], date: str,
                 assignments: Sequence[Assignment]) -> List[Tuple[LeaveCategory, Eligibility]]:
    return [(c, evaluate_eligibility(c, date, assignments)) for c in categories]
