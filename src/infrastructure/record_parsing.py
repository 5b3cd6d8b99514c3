"""Helpers turning raw rows into ``FinancialRecord`` instances."""

from datetime import date, datetime

from src.domain.models import FinancialRecord, Recurrence
from src.domain.services.normalization import normalize_label
from src.utils.decimal_utils import parse_amount


def parse_record_date(value) -> date | None:
    """Parse a date from a date, datetime or ISO-8601 string.

    Args:
        value: Raw date value.

    Returns:
        date | None: Parsed calendar date, or None when unparseable.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def parse_recurrence(raw) -> Recurrence | None:
    """Parse an optional ``{"frequency", "end_date"}`` mapping."""
    if not isinstance(raw, dict):
        return None
    frequency = normalize_label(raw.get("frequency"))
    if frequency is None:
        return None
    return Recurrence(
        frequency=frequency,
        end_date=parse_record_date(raw.get("end_date")),
    )


def build_record(
    amount,
    day,
    label,
    recurrence: Recurrence | None = None,
) -> FinancialRecord | None:
    """Build a record from raw values, or None when a field is unusable.

    Negative amounts are kept; the aggregation step excludes them.

    Args:
        amount: Raw amount.
        day: Raw date.
        label: Raw category or source label.
        recurrence: Optional parsed recurrence metadata.

    Returns:
        FinancialRecord | None: Parsed record.
    """
    parsed_amount = parse_amount(amount)
    parsed_date = parse_record_date(day)
    parsed_label = normalize_label(label)
    if parsed_amount is None or parsed_date is None or parsed_label is None:
        return None
    return FinancialRecord(
        amount=parsed_amount,
        date=parsed_date,
        classification=parsed_label,
        recurrence=recurrence,
    )


__all__ = ["parse_record_date", "parse_recurrence", "build_record"]
