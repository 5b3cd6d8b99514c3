"""Application use cases package."""

from .dashboard_filters import (
    apply_custom_range,
    can_apply_custom_range,
    choose_preset,
    enter_custom_mode,
    pick_custom_end,
    pick_custom_start,
    reconcile_selection,
    select_label,
    switch_kind,
)
from .get_dashboard_view import GetDashboardViewUseCase, refresh_state

__all__ = [
    "GetDashboardViewUseCase",
    "refresh_state",
    "apply_custom_range",
    "can_apply_custom_range",
    "choose_preset",
    "enter_custom_mode",
    "pick_custom_end",
    "pick_custom_start",
    "reconcile_selection",
    "select_label",
    "switch_kind",
]
