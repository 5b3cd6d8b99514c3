"""Explicit UI state for the reporting dashboard."""

from dataclasses import dataclass, field
from datetime import date

from .records import RecordKind
from .reporting import FilterSelection, PresetMonths


@dataclass(frozen=True)
class DashboardState:
    """Inputs of a dashboard recomputation besides the raw records.

    Attributes:
        kind: Active tab ("expense" or "income").
        selection: Last committed filter; drives window resolution.
        custom_mode: Whether the custom range pickers are shown.
        pending_start: Picked but not yet applied custom start date.
        pending_end: Picked but not yet applied custom end date.
        selected_label: Label requested through the selection sink.
    """

    kind: RecordKind = "expense"
    selection: FilterSelection = field(
        default_factory=lambda: PresetMonths(1)
    )
    custom_mode: bool = False
    pending_start: date | None = None
    pending_end: date | None = None
    selected_label: str | None = None


__all__ = ["DashboardState"]
