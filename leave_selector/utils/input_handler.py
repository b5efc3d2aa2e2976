# utils/input_handler.py
from leave_selector.exceptions import CancelAction, GoBackAction
from leave_selector.utils import date_helper

TODAY_WORDS = ("today", "t")


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    """
    Read one trimmed line. 'cancel' and 'back' (any case) raise CancelAction /
    GoBackAction so every menu can bail out the same way.
    """
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "
    while True:
        v = input(label).strip()
        low = v.lower()
        if low == "cancel":
            raise CancelAction()
        if low == "back":
            raise GoBackAction()
        if v or allow_empty:
            return v
        print("Enter a value, or 'cancel' / 'back'.")


def get_date(prompt: str = "Date (YYYY-MM-DD)", allow_empty: bool = False, default: str | None = None) -> str:
    """
    Ask until the answer is a YYYY-MM-DD day key. 'today' / 't' gives today's
    key. With allow_empty, an empty answer comes back as "" (keep the default).
    """
    while True:
        v = get_input(f"{prompt}, 't' for today", allow_empty=allow_empty, default=default)
        if not v:
            return ""
        if v.lower() in TODAY_WORDS:
            return date_helper.today()
        try:
            date_helper.parse_date(v)
        except ValueError:
            print("Dates look like 2025-07-07.")
            continue
        return v
