"""Tests for window resolution."""

from datetime import date

from src.domain.models import CustomRange, DateWindow, PresetMonths
from src.domain.services.time_window import resolve_window, shift_months


def test_shift_months_keeps_day_of_month():
    assert shift_months(date(2024, 5, 15), -1) == date(2024, 4, 15)
    assert shift_months(date(2024, 1, 31), -12) == date(2023, 1, 31)


def test_shift_months_clamps_to_last_valid_day():
    """Month-end dates clamp to the shorter target month."""
    assert shift_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert shift_months(date(2023, 3, 31), -1) == date(2023, 2, 28)
    assert shift_months(date(2024, 1, 31), -2) == date(2023, 11, 30)


def test_shift_months_crosses_year_boundary():
    assert shift_months(date(2024, 2, 10), -6) == date(2023, 8, 10)
    assert shift_months(date(2023, 11, 10), 3) == date(2024, 2, 10)


def test_resolve_preset_window_is_anchored_on_now():
    now = date(2024, 1, 31)

    window = resolve_window(now, PresetMonths(1))

    assert window == DateWindow(start=date(2023, 12, 31), end=now)


def test_resolve_each_preset():
    now = date(2024, 8, 15)
    starts = {
        months: resolve_window(now, PresetMonths(months)).start
        for months in (1, 2, 6, 12)
    }
    assert starts == {
        1: date(2024, 7, 15),
        2: date(2024, 6, 15),
        6: date(2024, 2, 15),
        12: date(2023, 8, 15),
    }


def test_resolve_custom_range_returns_bounds():
    window = resolve_window(
        date(2024, 1, 31),
        CustomRange(start=date(2023, 1, 1), end=date(2023, 12, 31)),
    )
    assert window == DateWindow(date(2023, 1, 1), date(2023, 12, 31))


def test_inverted_custom_range_falls_back_to_default_preset():
    """An inverted range never produces an inverted window."""
    now = date(2024, 1, 31)

    window = resolve_window(
        now,
        CustomRange(start=date(2023, 12, 31), end=date(2023, 1, 1)),
    )

    assert window.start <= window.end
    assert window == DateWindow(date(2023, 12, 31), now)


def test_unknown_preset_falls_back_to_default_preset():
    now = date(2024, 1, 31)
    assert resolve_window(now, PresetMonths(5)) == resolve_window(
        now, PresetMonths(1)
    )


def test_window_contains_is_inclusive():
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))
    assert window.contains(date(2024, 1, 1))
    assert window.contains(date(2024, 1, 31))
    assert not window.contains(date(2023, 12, 31))
    assert not window.contains(date(2024, 2, 1))
