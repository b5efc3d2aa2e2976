# data/store.py
from __future__ import annotations
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from leave_selector.data import data_manager
from leave_selector.data.seed import seed_assignments, seed_categories
from leave_selector.exceptions import IneligibleAssignment
from leave_selector.logic.eligibility import check_category, find_category
from leave_selector.models.assignment import Assignment
from leave_selector.models.leave_category import DateWindow, LeaveCategory, Limited
from leave_selector.utils.date_helper import add_days, parse_date, today

log = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


class MemoryStore:
    """
    Holds the leave categories and the day assignments.
    - Readers get tuple snapshots, never the internal lists.
    - assign() re-checks eligibility against the current state right before
      writing; one writer at a time is assumed.
    """

    def __init__(self, categories: Iterable[LeaveCategory] = (),
                 assignments: Iterable[Assignment] = ()):
        self._categories: List[LeaveCategory] = list(categories)
        self._assignments: List[Assignment] = list(assignments)

    # hook for subclasses that persist
    def _changed(self) -> None:
        pass

    # ---------- reads ----------
    def categories(self) -> Tuple[LeaveCategory, ...]:
        return tuple(self._categories)

    def get_category(self, category_id: str) -> Optional[LeaveCategory]:
        return find_category(self._categories, category_id)

    def list(self, category_id: Optional[str] = None) -> Tuple[Assignment, ...]:
        if category_id is None:
            return tuple(self._assignments)
        return tuple(a for a in self._assignments if a.leave_category_id == category_id)

    def assignment_on(self, date: str) -> Optional[Assignment]:
        return next((a for a in self._assignments if a.date == date), None)

    # ---------- raw writes ----------
    def insert(self, assignment: Assignment) -> None:
        self._assignments.append(assignment)
        self._changed()

    def remove(self, assignment_id: str) -> bool:
        before = len(self._assignments)
        self._assignments = [a for a in self._assignments if a.id != assignment_id]
        removed = len(self._assignments) != before
        if removed:
            self._changed()
        return removed

    # ---------- assignments ----------
    def assign(self, date: str, category_id: str) -> Assignment:
        parse_date(date)  # ValueError on a malformed date
        verdict = check_category(self._categories, category_id, date, self._assignments)
        if not verdict.eligible:
            raise IneligibleAssignment(date, category_id, verdict.reason)
        now = _now()
        a = Assignment(_new_id("assignment"), date, category_id, now, now)
        self.insert(a)
        log.info("assigned %s to %s (%s)", category_id, date, a.id)
        return a

    def unassign(self, assignment_id: str) -> bool:
        removed = self.remove(assignment_id)
        if removed:
            log.info("removed assignment %s", assignment_id)
        return removed

    # ---------- categories ----------
    def add_category(self, category: LeaveCategory) -> LeaveCategory:
        if self.get_category(category.id) is not None:
            raise ValueError(f"leave category {category.id!r} already exists")
        self._categories.append(category)
        self._changed()
        log.info("added leave category %s", category.id)
        return category

    def new_category(self, name: Optional[str] = None) -> LeaveCategory:
        """Fresh category with the default rules: next 30 days, 1 day/week, 2 weeks/month."""
        start = today()
        return self.add_category(LeaveCategory(
            id=_new_id("leave"),
            name=name or f"Leave {len(self._categories) + 1}",
            color="#6366F1",
            window=DateWindow(start, add_days(start, 30)),
            weekly=Limited(1),
            weeks_per_month=Limited(2),
        ))

    def replace_category(self, updated: LeaveCategory) -> None:
        for i, c in enumerate(self._categories):
            if c.id == updated.id:
                self._categories[i] = updated
                self._changed()
                log.info("updated leave category %s", updated.id)
                return
        raise KeyError(updated.id)

    def delete_category(self, category_id: str) -> int:
        """Drop the category and every assignment of it. Returns how many assignments went."""
        before = len(self._assignments)
        self._categories = [c for c in self._categories if c.id != category_id]
        self._assignments = [a for a in self._assignments if a.leave_category_id != category_id]
        dropped = before - len(self._assignments)
        self._changed()
        log.info("deleted leave category %s (%d assignments)", category_id, dropped)
        return dropped


class JsonStore(MemoryStore):
    """MemoryStore saved as a whole to the data dir after every change; seeded on first run."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = data_dir
        if data_manager.has_saved_state(data_dir):
            super().__init__(data_manager.load_categories(data_dir),
                             data_manager.load_assignments(data_dir))
        else:
            cats = seed_categories()
            super().__init__(cats, seed_assignments(cats, today()))
            log.info("no saved state, seeded %d categories", len(cats))
            self._changed()

    def _changed(self) -> None:
        data_manager.save_categories(self._categories, self.data_dir)
        data_manager.save_assignments(self._assignments, self.data_dir)
