# models/leave_category.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Optional, Union

from leave_selector.exceptions import LeaveRuleError
from leave_selector.utils.date_helper import parse_date


class _Unlimited:
    """No cap configured for a quota dimension."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    is_limited = False

    def remaining(self, used: int) -> float:
        return math.inf

    def __repr__(self):
        return "UNLIMITED"


UNLIMITED = _Unlimited()


@dataclass(frozen=True)
class Limited:
    max: int
    is_limited = True

    def __post_init__(self):
        if isinstance(self.max, bool) or not isinstance(self.max, int) or self.max < 0:
            raise LeaveRuleError(f"quota max must be a non-negative int, got {self.max!r}")

    def remaining(self, used: int) -> int:
        return self.max - used


Quota = Union[_Unlimited, Limited]


@dataclass(frozen=True)
class DateWindow:
    start: str   # YYYY-MM-DD, inclusive
    end: str     # YYYY-MM-DD, inclusive

    def __post_init__(self):
        try:
            parse_date(self.start)
            parse_date(self.end)
        except (TypeError, ValueError) as e:
            raise LeaveRuleError(f"bad date window {self.start!r}..{self.end!r}") from e
        if self.start > self.end:
            raise LeaveRuleError(f"window start {self.start} is after end {self.end}")


@dataclass(frozen=True)
class LeaveCategory:
    id: str
    name: str
    color: str
    window: DateWindow
    days_of_week: Optional[FrozenSet[int]] = None   # 0=Sun..6=Sat, None = every day
    weekly: Quota = UNLIMITED                       # days per Monday-start week
    weeks_per_month: Quota = UNLIMITED              # distinct weeks per calendar month
    total: Quota = UNLIMITED                        # days overall
    notes: str = ""

    def __post_init__(self):
        if not self.id:
            raise LeaveRuleError("leave category needs an id")
        if not (self.name or "").strip():
            raise LeaveRuleError("leave category needs a name")
        if self.days_of_week is not None:
            days = frozenset(self.days_of_week)
            bad = [d for d in days if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 6]
            if bad:
                raise LeaveRuleError(f"days_of_week must be 0..6, got {sorted(bad, key=str)}")
            object.__setattr__(self, "days_of_week", days)

    def to_dict(self) -> Dict[str, Any]:
        quotas: Dict[str, Any] = {}
        if self.weekly.is_limited:
            quotas["weekly"] = {"max_days": self.weekly.max}
        if self.weeks_per_month.is_limited:
            quotas["weeks_per_month"] = {"max_weeks": self.weeks_per_month.max}
        if self.total.is_limited:
            quotas["total"] = {"max_days": self.total.max}

        rules: Dict[str, Any] = {
            "date_window": {"start": self.window.start, "end": self.window.end},
            "quotas": quotas,
        }
        if self.days_of_week is not None:
            rules["eligibility_filters"] = {"days_of_week": sorted(self.days_of_week)}

        d = {"id": self.id, "name": self.name, "color": self.color, "rules": rules}
        if self.notes:
            d["notes"] = self.notes
        return d

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LeaveCategory":
        rules = data.get("rules") or {}
        window = rules.get("date_window") or {}
        quotas = rules.get("quotas") or {}
        filters = rules.get("eligibility_filters") or {}
        days = filters.get("days_of_week")

        def quota(key, field):
            q = quotas.get(key)
            return Limited(q[field]) if q else UNLIMITED

        try:
            return LeaveCategory(
                id=data["id"],
                name=data["name"],
                color=data.get("color", ""),
                window=DateWindow(window["start"], window["end"]),
                days_of_week=frozenset(days) if days is not None else None,
                weekly=quota("weekly", "max_days"),
                weeks_per_month=quota("weeks_per_month", "max_weeks"),
                total=quota("total", "max_days"),
                notes=data.get("notes", ""),
            )
        except KeyError as e:
            raise LeaveRuleError(f"leave category is missing {e.args[0]!r}") from e
