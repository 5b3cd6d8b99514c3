"""Domain models for the dashboard reporting pipeline."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from .records import FinancialRecord, RecordKind


@dataclass(frozen=True)
class DateWindow:
    """Resolved reporting window, inclusive on both ends."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        """Return True when ``day`` falls inside the window."""
        return self.start <= day <= self.end


@dataclass(frozen=True)
class PresetMonths:
    """Relative window covering the last ``months`` calendar months."""

    months: int


@dataclass(frozen=True)
class CustomRange:
    """Absolute window committed by the user."""

    start: date
    end: date


FilterSelection = PresetMonths | CustomRange


@dataclass(frozen=True)
class AggregateBucket:
    """Sum of record amounts for one classification label."""

    label: str
    total: Decimal


@dataclass(frozen=True)
class DrilldownView:
    """Records underlying one selected bucket.

    Attributes:
        label: Label of the selected bucket, or None when nothing is selected.
        records: Matching records in source order.
        earliest: Earliest record date, or None when empty.
        latest: Latest record date, or None when empty.
    """

    label: str | None = None
    records: tuple[FinancialRecord, ...] = ()
    earliest: date | None = None
    latest: date | None = None

    @property
    def count(self) -> int:
        """Return the number of drill-down records."""
        return len(self.records)


@dataclass(frozen=True)
class DashboardView:
    """Everything derived from one dashboard recomputation."""

    kind: RecordKind
    window: DateWindow
    records_in_window: tuple[FinancialRecord, ...]
    buckets: list[AggregateBucket]
    selected: AggregateBucket | None
    drilldown: DrilldownView = field(default_factory=DrilldownView)

    @property
    def total(self) -> Decimal:
        """Return the sum of all bucket totals."""
        return sum(
            (bucket.total for bucket in self.buckets),
            start=Decimal("0"),
        )

    @property
    def is_empty(self) -> bool:
        """Return True when no record falls inside the window."""
        return not self.buckets


__all__ = [
    "DateWindow",
    "PresetMonths",
    "CustomRange",
    "FilterSelection",
    "AggregateBucket",
    "DrilldownView",
    "DashboardView",
]
