"""Builders for leave categories and assignments used across the tests."""
from __future__ import annotations

from typing import Iterable

from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import UNLIMITED, DateWindow, LeaveCategory, Limited


def _quota(n: int | None):
    return UNLIMITED if n is None else Limited(n)


def make_category(
    cid: str = "leave-a",
    *,
    start: str = "2025-01-01",
    end: str = "2025-12-31",
    days: Iterable[int] | None = None,
    weekly: int | None = None,
    weeks_per_month: int | None = None,
    total: int | None = None,
    name: str | None = None,
) -> LeaveCategory:
    return LeaveCategory(
        id=cid,
        name=name or cid.title(),
        color="#3B82F6",
        window=DateWindow(start, end),
        days_of_week=frozenset(days) if days is not None else None,
        weekly=_quota(weekly),
        weeks_per_month=_quota(weeks_per_month),
        total=_quota(total),
    )


def make_assignments(category_id: str, *dates: str) -> list[Assignment]:
    return [
        Assignment(f"{category_id}-{d}", d, category_id, "2025-01-01T00:00:00", "2025-01-01T00:00:00")
        for d in dates
    ]
