# logic/calendar_view.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from leave_selector.logic.eligibility import evaluate_eligibility
from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import LeaveCategory
from leave_selector.utils.date_helper import add_days, month_start, week_start

GRID_DAYS = 42   # 6 weeks, Monday first


@dataclass(frozen=True)
class CalendarDay:
    date: str
    is_current_month: bool
    assignment: Optional[Assignment]
    eligible: Tuple[str, ...]   # category ids, in category order


def project_month(categories: Sequence[LeaveCategory], assignments: Sequence[Assignment],
                  reference_date: str) -> List[CalendarDay]:
    """
    The 42 cells of the month view of `reference_date`.
    - Starts on the Monday on or before the 1st; days of the previous and
      next month fill the rest and are flagged is_current_month=False.
    - Nothing is cached; call again after every change.
    """
    first = month_start(reference_date)
    yyyymm = first[:7]

    by_date: Dict[str, Assignment] = {}
    for a in assignments:
        by_date.setdefault(a.date, a)

    start = week_start(first)
    days = []
    for i in range(GRID_DAYS):
        d = add_days(start, i)
        eligible = tuple(c.id for c in categories if evaluate_eligibility(c, d, assignments).eligible)
        days.append(CalendarDay(
            date=d,
            is_current_month=d[:7] == yyyymm,
            assignment=by_date.get(d),
            eligible=eligible,
        ))
    return days
