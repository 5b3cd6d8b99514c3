"""Domain models package."""

from .dashboard_state import DashboardState
from .records import FinancialRecord, RecordKind, Recurrence
from .reporting import (
    AggregateBucket,
    CustomRange,
    DashboardView,
    DateWindow,
    DrilldownView,
    FilterSelection,
    PresetMonths,
)

__all__ = [
    "FinancialRecord",
    "RecordKind",
    "Recurrence",
    "DateWindow",
    "PresetMonths",
    "CustomRange",
    "FilterSelection",
    "AggregateBucket",
    "DrilldownView",
    "DashboardView",
    "DashboardState",
]
