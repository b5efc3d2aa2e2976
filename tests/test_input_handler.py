import pytest

from leave_selector.exceptions import CancelAction, GoBackAction
from leave_selector.utils import date_helper
from leave_selector.utils.input_handler import get_date, get_input


@pytest.fixture
def answers(monkeypatch):
    def feed(*lines):
        it = iter(lines)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))
    return feed


def test_get_input_escape_words(answers):
    answers("BACK")
    with pytest.raises(GoBackAction):
        get_input("Choice")
    answers(" cancel ")
    with pytest.raises(CancelAction):
        get_input("Choice")


def test_get_input_needs_a_value_unless_empty_allowed(answers, capsys):
    answers("", "  x  ")
    assert get_input("Choice") == "x"
    assert "Enter a value" in capsys.readouterr().out

    answers("")
    assert get_input("Name", allow_empty=True, default="Sick") == ""


def test_get_date(answers, monkeypatch, capsys):
    monkeypatch.setattr(date_helper, "today", lambda: "2025-07-15")

    answers("TODAY")
    assert get_date() == "2025-07-15"

    answers("2025-07-7", "2025-02-30", "2025-07-08")
    assert get_date() == "2025-07-08"
    assert capsys.readouterr().out.count("Dates look like 2025-07-07.") == 2

    answers("")
    assert get_date("Window start", allow_empty=True, default="2025-01-01") == ""
