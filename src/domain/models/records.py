"""Domain models for ledger records supplied by a record source."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

RecordKind = Literal["expense", "income"]


@dataclass(frozen=True)
class Recurrence:
    """Recurrence descriptor attached to a ledger entry.

    Carried as metadata only; occurrences are never projected from it.

    Attributes:
        frequency: Free-form frequency label (e.g. "monthly").
        end_date: Optional last date of the recurrence.
    """

    frequency: str
    end_date: date | None = None


@dataclass(frozen=True)
class FinancialRecord:
    """One dated ledger entry.

    Attributes:
        amount: Non-negative monetary amount.
        date: Calendar date of the entry.
        classification: Grouping key (category for expenses, source for
            income).
        recurrence: Optional recurrence metadata.
    """

    amount: Decimal
    date: date
    classification: str
    recurrence: Recurrence | None = None


__all__ = ["RecordKind", "Recurrence", "FinancialRecord"]
