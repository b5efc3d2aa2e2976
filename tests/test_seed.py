from leave_selector.data.seed import seed_assignments, seed_categories
from tests.utils import make_category


def test_seed_categories():
    cats = seed_categories()

    assert [c.id for c in cats] == ["leave-1", "leave-2"]
    mother = cats[0]
    assert (mother.window.start, mother.window.end) == ("2025-07-03", "2025-08-02")
    assert mother.weekly.max == 1
    assert mother.weeks_per_month.max == 4
    assert not mother.total.is_limited


def test_seed_assignments_cycle_through_categories():
    got = seed_assignments(seed_categories(), "2025-07-15")

    assert [(a.date, a.leave_category_id) for a in got] == [
        ("2025-07-05", "leave-1"),
        ("2025-07-12", "leave-2"),
        ("2025-07-19", "leave-1"),
    ]
    assert len({a.id for a in got}) == 3


def test_seed_assignments_skip_days_outside_windows():
    # leave-1 is over by October, only leave-2's day stays
    got = seed_assignments(seed_categories(), "2025-10-10")
    assert [(a.date, a.leave_category_id) for a in got] == [("2025-10-12", "leave-2")]

    assert seed_assignments(seed_categories(), "2026-03-01") == []
    assert seed_assignments([], "2025-07-15") == []


def test_seed_assignments_only_check_the_window():
    # one week per month allowed, but all three sample days are kept
    cat = make_category("leave-a", weeks_per_month=1)
    got = seed_assignments([cat], "2025-07-15")
    assert [a.date for a in got] == ["2025-07-05", "2025-07-12", "2025-07-19"]
