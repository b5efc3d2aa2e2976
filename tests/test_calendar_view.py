import pytest

from leave_selector.logic.calendar_view import GRID_DAYS, project_month
from leave_selector.utils.date_helper import add_days, parse_date
from tests.utils import make_assignments, make_category


def _runs(days):
    flags = [d.is_current_month for d in days]
    lead = flags.index(True)
    inside = flags.count(True)
    return lead, inside, len(flags) - lead - inside, flags


@pytest.mark.parametrize("ref, first, lead, trail", [
    ("2025-07-15", "2025-06-30", 1, 10),
    ("2025-09-01", "2025-09-01", 0, 12),   # month starts on a Monday
    ("2025-06-30", "2025-05-26", 6, 6),    # month starts on a Sunday
    ("2021-02-14", "2021-02-01", 0, 14),   # 28 days, Monday first: two spare weeks
])
def test_grid_shape(ref, first, lead, trail):
    days = project_month([], [], ref)

    assert len(days) == GRID_DAYS == 42
    assert days[0].date == first
    got_lead, _, got_trail, _ = _runs(days)
    assert (got_lead, got_trail) == (lead, trail)


@pytest.mark.parametrize("month", [f"{y}-{m:02d}-01" for y in (2024, 2025) for m in range(1, 13)])
def test_grid_is_42_consecutive_days_from_a_monday(month):
    days = project_month([], [], month)

    assert parse_date(days[0].date).isoweekday() == 1
    assert [d.date for d in days] == [add_days(days[0].date, i) for i in range(42)]
    lead, inside, trail, flags = _runs(days)
    assert 0 <= lead <= 6
    assert flags == [False] * lead + [True] * inside + [False] * trail
    assert all(d.date[:7] == month[:7] for d in days if d.is_current_month)


def test_cells_carry_assignment_and_eligible_ids():
    a = make_category("leave-a", start="2025-07-03", end="2025-08-02", weekly=1)
    b = make_category("leave-b")
    assignments = tuple(make_assignments("leave-a", "2025-07-07"))

    days = {d.date: d for d in project_month([b, a], assignments, "2025-07-01")}

    assert days["2025-07-07"].assignment == assignments[0]
    assert days["2025-07-07"].eligible == ()
    assert days["2025-07-08"].assignment is None
    assert days["2025-07-08"].eligible == ("leave-b",)           # leave-a spent its week
    assert days["2025-07-14"].eligible == ("leave-b", "leave-a")  # category order
    assert days["2025-06-30"].eligible == ("leave-b",)           # before leave-a's window


def test_reference_day_inside_month_gives_same_grid():
    cats = [make_category("leave-a", weeks_per_month=1)]
    assignments = make_assignments("leave-a", "2025-07-16")

    assert project_month(cats, assignments, "2025-07-01") == project_month(cats, assignments, "2025-07-31")


def test_inputs_left_alone():
    cats = [make_category("leave-a")]
    assignments = make_assignments("leave-a", "2025-07-16")
    before = (list(cats), list(assignments))

    project_month(cats, assignments, "2025-07-01")

    assert (cats, assignments) == before
