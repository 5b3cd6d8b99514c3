"""State transitions for the dashboard filter and selection controls.

Every function is pure: it receives a ``DashboardState`` and returns a new
one (or the same one when the event is rejected). Nothing here raises;
invalid picks are simply ignored so the last resolved window stays valid.
"""

from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from src.domain.constants import PRESET_MONTHS, RECORD_KINDS
from src.domain.models import (
    AggregateBucket,
    CustomRange,
    DashboardState,
    PresetMonths,
    RecordKind,
)


def choose_preset(state: DashboardState, months: int) -> DashboardState:
    """Commit a preset window and leave custom mode.

    Pending custom picks are discarded so they cannot leak into a later
    custom session.
    """
    if months not in PRESET_MONTHS:
        return state
    return replace(
        state,
        selection=PresetMonths(months),
        custom_mode=False,
        pending_start=None,
        pending_end=None,
    )


def enter_custom_mode(state: DashboardState) -> DashboardState:
    """Show the custom range pickers without changing the active window."""
    if state.custom_mode:
        return state
    return replace(
        state,
        custom_mode=True,
        pending_start=None,
        pending_end=None,
    )


def pick_custom_start(
    state: DashboardState,
    candidate: date,
    now: date,
) -> DashboardState:
    """Record a custom start date unless it lies after the current end.

    Args:
        state: Current dashboard state.
        candidate: Date chosen in the start picker.
        now: Today's date, upper bound when no end is picked yet.

    Returns:
        DashboardState: Updated state, or ``state`` when rejected.
    """
    if not state.custom_mode:
        return state
    upper = state.pending_end or now
    if candidate > upper:
        return state
    return replace(state, pending_start=candidate)


def pick_custom_end(
    state: DashboardState,
    candidate: date,
    now: date,
) -> DashboardState:
    """Record a custom end date unless it is before the start or after now."""
    if not state.custom_mode:
        return state
    if candidate > now:
        return state
    if state.pending_start is not None and candidate < state.pending_start:
        return state
    return replace(state, pending_end=candidate)


def can_apply_custom_range(state: DashboardState) -> bool:
    """Return True when both custom bounds are picked."""
    return (
        state.custom_mode
        and state.pending_start is not None
        and state.pending_end is not None
    )


def apply_custom_range(state: DashboardState) -> DashboardState:
    """Commit the picked custom bounds as the active selection.

    Applying twice in a row yields the same state.
    """
    if not can_apply_custom_range(state):
        return state
    return replace(
        state,
        selection=CustomRange(
            start=state.pending_start,
            end=state.pending_end,
        ),
    )


def switch_kind(state: DashboardState, kind: RecordKind) -> DashboardState:
    """Switch between the expense and income tabs.

    The selected label belongs to the previous tab and is cleared.
    """
    if kind not in RECORD_KINDS or kind == state.kind:
        return state
    return replace(state, kind=kind, selected_label=None)


def select_label(state: DashboardState, label: str | None) -> DashboardState:
    """Record the label activated through a chart slice or list row."""
    return replace(state, selected_label=label)


def reconcile_selection(
    state: DashboardState,
    buckets: Sequence[AggregateBucket],
) -> DashboardState:
    """Drop a selected label that no longer matches any bucket."""
    if state.selected_label is None:
        return state
    if any(bucket.label == state.selected_label for bucket in buckets):
        return state
    return replace(state, selected_label=None)


__all__ = [
    "choose_preset",
    "enter_custom_mode",
    "pick_custom_start",
    "pick_custom_end",
    "can_apply_custom_range",
    "apply_custom_range",
    "switch_kind",
    "select_label",
    "reconcile_selection",
]
