"""Domain package for reporting rules and core models."""

from .constants import DEFAULT_PRESET_MONTHS, PRESET_MONTHS, RECORD_KINDS
from .models import (
    AggregateBucket,
    CustomRange,
    DashboardState,
    DashboardView,
    DateWindow,
    DrilldownView,
    FinancialRecord,
    PresetMonths,
    Recurrence,
)
from .services import (
    aggregate_records,
    build_drilldown,
    filter_records,
    resolve_window,
    select_bucket,
    shift_months,
)

__all__ = [
    "AggregateBucket",
    "CustomRange",
    "DashboardState",
    "DashboardView",
    "DateWindow",
    "DrilldownView",
    "FinancialRecord",
    "PresetMonths",
    "Recurrence",
    "DEFAULT_PRESET_MONTHS",
    "PRESET_MONTHS",
    "RECORD_KINDS",
    "aggregate_records",
    "build_drilldown",
    "filter_records",
    "resolve_window",
    "select_bucket",
    "shift_months",
]
