# data/seed.py
# starter data for the first run (nothing saved yet)
from datetime import datetime
from typing import List

from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import DateWindow, LeaveCategory, Limited
from leave_selector.utils.date_helper import format_date, in_range, month_start, parse_date

SAMPLE_DAYS = (5, 12, 19)


def seed_categories() -> List[LeaveCategory]:
    return [
        LeaveCategory(
            id="leave-1",
            name="Mother Leave",
            color="#3B82F6",
            window=DateWindow("2025-07-03", "2025-08-02"),
            weekly=Limited(1),
            weeks_per_month=Limited(4),
        ),
        LeaveCategory(
            id="leave-2",
            name="Therapy Sessions",
            color="#10B981",
            window=DateWindow("2025-01-01", "2025-12-20"),
            weekly=Limited(3),
            weeks_per_month=Limited(2),
        ),
    ]


def seed_assignments(categories: List[LeaveCategory], today: str) -> List[Assignment]:
    """
    A few sample leaves on the 5th/12th/19th of today's month, cycling
    through the categories. Dates outside the category's window are
    skipped; quotas are not checked.
    """
    if not categories:
        return []
    first = parse_date(month_start(today))
    now = datetime.now().isoformat(timespec="seconds")
    out: List[Assignment] = []
    for i, day in enumerate(SAMPLE_DAYS):
        date_key = format_date(first.replace(day=day))
        cat = categories[i % len(categories)]
        if not in_range(date_key, cat.window.start, cat.window.end):
            continue
        out.append(Assignment(f"assignment-{i}", date_key, cat.id, now, now))
    return out
