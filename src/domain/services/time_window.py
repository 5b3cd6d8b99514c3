"""Resolve filter selections into concrete reporting windows."""

import calendar
from datetime import date

from src.domain.constants import DEFAULT_PRESET_MONTHS, PRESET_MONTHS
from src.domain.models import (
    CustomRange,
    DateWindow,
    FilterSelection,
    PresetMonths,
)


def shift_months(day: date, months: int) -> date:
    """Shift a date by calendar months, keeping the day where valid.

    The day of month is clamped to the last day of the target month, so
    2024-03-31 shifted by -1 gives 2024-02-29.

    Args:
        day: Anchor date.
        months: Number of months to shift (negative goes back).

    Returns:
        date: Shifted date.
    """
    month_index = day.year * 12 + day.month - 1 + months
    year = month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def preset_window(now: date, months: int) -> DateWindow:
    """Return the ``[now - months, now]`` window."""
    return DateWindow(start=shift_months(now, -months), end=now)


def resolve_window(now: date, selection: FilterSelection) -> DateWindow:
    """Turn a committed filter selection into a date window.

    Never raises: an unknown preset or an inverted custom range resolves to
    the default preset window instead.

    Args:
        now: Anchor date for relative presets.
        selection: Committed preset or custom range.

    Returns:
        DateWindow: Inclusive window used to filter records.
    """
    if isinstance(selection, CustomRange):
        if selection.start <= selection.end:
            return DateWindow(start=selection.start, end=selection.end)
    elif isinstance(selection, PresetMonths):
        if selection.months in PRESET_MONTHS:
            return preset_window(now, selection.months)
    return preset_window(now, DEFAULT_PRESET_MONTHS)


__all__ = ["shift_months", "preset_window", "resolve_window"]
