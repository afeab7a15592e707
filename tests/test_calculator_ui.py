"""Tests for the tkinter front-end wiring."""

import pytest

tk = pytest.importorskip("tkinter")

from calculator_engine import CalculatorEngine  # noqa: E402
from calculator_ui import CalculatorApp  # noqa: E402


@pytest.mark.parametrize(
    "char, keysym, expected",
    [
        ("7", "7", "7"),
        ("+", "plus", "+"),
        ("*", "asterisk", "*"),
        (".", "period", "."),
        ("C", "C", "c"),
        ("\r", "Return", "="),
        ("", "KP_Enter", "="),
        ("\x1b", "Escape", "c"),
        ("", "KP_Divide", "/"),
        ("x", "x", None),
        ("", "Shift_L", None),
    ],
)
def test_symbol_for_key(char, keysym, expected):
    assert CalculatorApp.symbol_for_key(char, keysym) == expected


def test_compute_spans_gives_leftover_to_last_button():
    assert CalculatorApp._compute_spans(3, 4) == [1, 1, 2]
    assert CalculatorApp._compute_spans(2, 4) == [2, 2]


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    yield window
    window.destroy()


def test_buttons_drive_the_display(root):
    app = CalculatorApp(root, engine=CalculatorEngine())
    for symbol in "4*2+1=":
        app.press(symbol)
    assert app.display_var.get() == "9"


def test_error_marker_painted_in_error_colour(root):
    app = CalculatorApp(root)
    for symbol in "9/0=":
        app.press(symbol)
    assert app.display_var.get() == "Err"
    assert app.display_label.cget("fg") == CalculatorApp.C["error_fg"]
    app.press("7")
    assert app.display_label.cget("fg") == CalculatorApp.C["result_fg"]


def test_sign_after_error_keeps_error_colour(root):
    app = CalculatorApp(root)
    for symbol in "9/0=-":
        app.press(symbol)
    assert app.display_var.get() == "Err"
    assert app.display_label.cget("fg") == CalculatorApp.C["error_fg"]
