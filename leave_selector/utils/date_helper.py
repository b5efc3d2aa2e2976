# utils/date_helper.py
"""
Calendar math on canonical "YYYY-MM-DD" strings.

- Weeks run Monday..Sunday, taken from the ISO weekday so the result
  does not depend on locale.
- date objects only live inside a single function; everything that
  goes in or comes out is a string.
"""
import calendar
from datetime import date, datetime, timedelta

DATE_FMT = "%Y-%m-%d"


def parse_date(s: str) -> date:
    d = datetime.strptime(s, DATE_FMT).date()
    # strptime also takes "2025-7-7"; keys must round-trip exactly
    if format_date(d) != s:
        raise ValueError(f"not a YYYY-MM-DD date: {s!r}")
    return d


def format_date(d: date) -> str:
    return d.strftime(DATE_FMT)


def today() -> str:
    return format_date(date.today())


def week_start(s: str) -> str:
    d = parse_date(s)
    return format_date(d - timedelta(days=d.isoweekday() - 1))


def week_end(s: str) -> str:
    d = parse_date(s)
    return format_date(d + timedelta(days=7 - d.isoweekday()))


def month_start(s: str) -> str:
    d = parse_date(s)
    return format_date(d.replace(day=1))


def month_end(s: str) -> str:
    d = parse_date(s)
    last = calendar.monthrange(d.year, d.month)[1]
    return format_date(d.replace(day=last))


def in_range(s: str, start: str, end: str) -> bool:
    # canonical strings sort the same way the dates do
    return start <= s <= end


def weekday_number(s: str) -> int:
    """0=Sunday .. 6=Saturday."""
    return parse_date(s).isoweekday() % 7


def add_days(s: str, days: int) -> str:
    return format_date(parse_date(s) + timedelta(days=days))


def shift_month(s: str, months: int) -> str:
    """First day of the month `months` away from the month of `s`."""
    d = parse_date(s)
    idx = d.year * 12 + (d.month - 1) + months
    return format_date(date(idx // 12, idx % 12 + 1, 1))

