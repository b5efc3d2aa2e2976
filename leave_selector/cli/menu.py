# cli/menu.py
from leave_selector.cli.category_menu import category_menu
from leave_selector.data.store import MemoryStore
from leave_selector.exceptions import CancelAction, GoBackAction, IneligibleAssignment
from leave_selector.logic.calendar_view import project_month
from leave_selector.logic.eligibility import explain_date
from leave_selector.logic.quota import evaluate_quotas
from leave_selector.utils.date_helper import month_start, shift_month, today
from leave_selector.utils.input_handler import get_date, get_input
from leave_selector.utils.parse_utils import WEEKDAY_NAMES

# Monday first, like the grid
HEADER = " ".join(f"{n:<9}" for n in WEEKDAY_NAMES[1:] + WEEKDAY_NAMES[:1])


def main_menu(store: MemoryStore):
    month = month_start(today())
    while True:
        print(f"\n[Leave days | {month[:7]}]")
        print("1. Show month")
        print("2. Previous month")
        print("3. Next month")
        print("4. Assign leave")
        print("5. Remove leave")
        print("6. Check a date")
        print("7. Quota summary")
        print("8. Leave categories")
        print("0. Quit")

        try:
            choice = get_input("Choice")
            if choice == "1":
                show_month(store, month)
            elif choice == "2":
                month = shift_month(month, -1)
            elif choice == "3":
                month = shift_month(month, 1)
            elif choice == "4":
                assign_leave(store)
            elif choice == "5":
                remove_leave(store)
            elif choice == "6":
                check_date(store)
            elif choice == "7":
                show_quotas(store, month)
            elif choice == "8":
                category_menu(store)
            elif choice == "0":
                print("Bye.")
                break
            else:
                print("Invalid choice.")
        except GoBackAction:
            print("Back to the previous menu")
        except CancelAction:
            print("Back to the main menu")


def format_month(store: MemoryStore, month: str) -> list[str]:
    """
    One line per week. Each cell is the day number, then either the short
    name of the leave on it (=Name) or how many categories could go there (+N).
    Days of the neighbouring months are in parentheses.
    """
    names = {c.id: c.name for c in store.categories()}
    days = project_month(store.categories(), store.list(), month)
    lines = [HEADER]
    for w in range(0, len(days), 7):
        cells = []
        for d in days[w:w + 7]:
            num = d.date[8:]
            if not d.is_current_month:
                num = f"({num})"
            if d.assignment:
                mark = "=" + names.get(d.assignment.leave_category_id, "?")[:5]
            else:
                mark = f"+{len(d.eligible)}" if d.eligible else ""
            cells.append(f"{num + mark:<9}")
        lines.append(" ".join(cells).rstrip())
    return lines


def show_month(store: MemoryStore, month: str):
    print()
    for line in format_month(store, month):
        print(line)


def assign_leave(store: MemoryStore):
    date = get_date()
    existing = store.assignment_on(date)
    if existing:
        cat = store.get_category(existing.leave_category_id)
        print(f"{date} already has {cat.name if cat else existing.leave_category_id}.")
        return

    verdicts = explain_date(store.categories(), date, store.list())
    eligible = [c for c, v in verdicts if v.eligible]
    if not eligible:
        print("No eligible leave for this date:")
        for c, v in verdicts:
            print(f"  {c.name}: {v.reason}")
        return

    for i, c in enumerate(eligible, 1):
        print(f"{i}. {c.name}")
    pick = get_input("Leave to assign")
    if not pick.isdigit() or not 1 <= int(pick) <= len(eligible):
        print("Invalid choice.")
        return
    try:
        a = store.assign(date, eligible[int(pick) - 1].id)
    except IneligibleAssignment as e:
        print(f"Not assigned: {e.reason}")
        return
    print(f"{a.date}: {eligible[int(pick) - 1].name} assigned.")


def remove_leave(store: MemoryStore):
    date = get_date()
    existing = store.assignment_on(date)
    if not existing:
        print(f"No leave on {date}.")
        return
    store.unassign(existing.id)
    print(f"Leave on {date} removed.")


def check_date(store: MemoryStore):
    date = get_date()
    for c, v in explain_date(store.categories(), date, store.list()):
        print(f"  {c.name}: {'eligible' if v.eligible else v.reason}")


def quota_lines(store: MemoryStore, as_of: str) -> list[str]:
    lines = []
    for c in store.categories():
        q = evaluate_quotas(c, store.list(), as_of)
        parts = []
        if c.weekly.is_limited:
            parts.append(f"weekly {q.used_weekly}/{c.weekly.max}")
        if c.weeks_per_month.is_limited:
            parts.append(f"weeks/month {q.used_weeks_this_month}/{c.weeks_per_month.max}")
        if c.total.is_limited:
            parts.append(f"total {q.used_total}/{c.total.max}")
        lines.append(f"{c.name}: " + (", ".join(parts) if parts else "no limits"))
    return lines


def show_quotas(store: MemoryStore, month: str):
    # weekly figures are for the current week when viewing this month, else the month's first week
    as_of = today() if today()[:7] == month[:7] else month
    print(f"\n[Quotas as of {as_of}]")
    for line in quota_lines(store, as_of):
        print(line)
