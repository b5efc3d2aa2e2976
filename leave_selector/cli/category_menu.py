# cli/category_menu.py
from dataclasses import replace

from leave_selector.data.store import MemoryStore
from leave_selector.models.leave_category import DateWindow, LeaveCategory, Limited, UNLIMITED
from leave_selector.utils.input_handler import get_date, get_input
from leave_selector.utils.parse_utils import format_weekdays, parse_quota, parse_weekday_list


def category_menu(store: MemoryStore):
    while True:
        print("\n[Leave categories]")
        print("1. List")
        print("2. Add")
        print("3. Edit")
        print("4. Delete")
        print("0. Back")

        choice = get_input("Choice")

        if choice == "1":
            show_categories(store)
        elif choice == "2":
            add_category(store)
        elif choice == "3":
            edit_category(store)
        elif choice == "4":
            delete_category(store)
        elif choice == "0":
            break
        else:
            print("Invalid choice.")


def _quota_text(q) -> str:
    return str(q.max) if q.is_limited else "none"


def describe(c: LeaveCategory) -> str:
    return (f"{c.id} | {c.name} | {c.window.start}..{c.window.end} | days: {format_weekdays(c.days_of_week)}"
            f" | weekly: {_quota_text(c.weekly)} | weeks/month: {_quota_text(c.weeks_per_month)}"
            f" | total: {_quota_text(c.total)}")


def show_categories(store: MemoryStore):
    cats = store.categories()
    print("\n[Leave category list]")
    if not cats:
        print("(none)")
    for c in cats:
        print(describe(c))


def _quota(text: str, current):
    if text == "":
        return current
    n = parse_quota(text)
    return UNLIMITED if n is None else Limited(n)


def prompt_rules(c: LeaveCategory) -> LeaveCategory:
    """Ask for every field with the current value as default; empty input keeps it."""
    name = get_input("Name", allow_empty=True, default=c.name) or c.name
    color = get_input("Color", allow_empty=True, default=c.color) or c.color
    start = get_date("Window start", allow_empty=True, default=c.window.start) or c.window.start
    end = get_date("Window end", allow_empty=True, default=c.window.end) or c.window.end
    days_in = get_input("Days of week (0=Sun..6=Sat, 'all')", allow_empty=True,
                        default=format_weekdays(c.days_of_week))
    days = c.days_of_week if days_in == "" else parse_weekday_list(days_in)
    weekly = get_input("Max days per week ('none')", allow_empty=True, default=_quota_text(c.weekly))
    wpm = get_input("Max weeks per month ('none')", allow_empty=True, default=_quota_text(c.weeks_per_month))
    total = get_input("Max days in total ('none')", allow_empty=True, default=_quota_text(c.total))

    return replace(
        c,
        name=name,
        color=color,
        window=DateWindow(start, end),
        days_of_week=frozenset(days) if days is not None else None,
        weekly=_quota(weekly, c.weekly),
        weeks_per_month=_quota(wpm, c.weeks_per_month),
        total=_quota(total, c.total),
    )


def add_category(store: MemoryStore):
    name = get_input("Name", allow_empty=True)
    draft = store.new_category(name or None)
    print(f"Added {draft.id} with default rules, edit them now ('back' keeps defaults).")
    _edit(store, draft)


def edit_category(store: MemoryStore):
    show_categories(store)
    cid = get_input("Category ID to edit")
    c = store.get_category(cid)
    if not c:
        print("No leave category with that ID.")
        return
    _edit(store, c)


def _edit(store: MemoryStore, c: LeaveCategory):
    try:
        updated = prompt_rules(c)
    except ValueError as e:   # LeaveRuleError included
        print(f"Not saved: {e}")
        return
    store.replace_category(updated)
    print("Leave category saved.")


def delete_category(store: MemoryStore):
    show_categories(store)
    cid = get_input("Category ID to delete")
    if not store.get_category(cid):
        print("No leave category with that ID.")
        return
    dropped = store.delete_category(cid)
    print(f"Leave category deleted ({dropped} assigned days removed).")
