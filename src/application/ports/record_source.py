"""Port supplying ledger records to the reporting pipeline."""

from typing import Protocol

from src.domain.models import FinancialRecord, RecordKind


class RecordSourcePort(Protocol):
    """Port exposing the expense and income record collections.

    Each call returns a complete snapshot in source order; callers never
    merge results from two calls.
    """

    def fetch_expense_records(self) -> list[FinancialRecord]:
        """Return every expense record, category as classification."""

    def fetch_income_records(self) -> list[FinancialRecord]:
        """Return every income record, source as classification."""


def fetch_records(
    source: RecordSourcePort,
    kind: RecordKind,
) -> list[FinancialRecord]:
    """Return the snapshot for the requested record kind.

    Args:
        source: Record source to read from.
        kind: "expense" or "income".

    Returns:
        list[FinancialRecord]: Records of the requested kind.
    """
    if kind == "income":
        return source.fetch_income_records()
    return source.fetch_expense_records()


__all__ = ["RecordSourcePort", "fetch_records"]
