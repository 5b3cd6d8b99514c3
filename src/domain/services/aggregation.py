"""Window filtering and per-label aggregation of ledger records."""

from collections.abc import Callable, Iterable
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    AggregateBucket,
    DateWindow,
    FinancialRecord,
    RecordKind,
)
from src.domain.services.validation import (
    coerce_record,
    is_well_formed_record,
)

KeyFunc = Callable[[FinancialRecord], str]


def classification_of(record: FinancialRecord) -> str:
    """Return the record classification used as grouping key."""
    return record.classification


# Category for expenses, source for income; both are stored in
# ``FinancialRecord.classification`` by the record sources.
CLASSIFICATION_KEYS: dict[RecordKind, KeyFunc] = {
    "expense": classification_of,
    "income": classification_of,
}


def filter_records(
    records: Iterable[FinancialRecord],
    window: DateWindow,
    logger: Logger | None = None,
) -> list[FinancialRecord]:
    """Keep well-formed records dated inside the window, in source order.

    Args:
        records: Full record collection for the active tab.
        window: Inclusive reporting window.
        logger: Optional logger for malformed-record warnings.

    Returns:
        list[FinancialRecord]: Records in the window.
    """
    kept: list[FinancialRecord] = []
    for record in records:
        record = coerce_record(record)
        if not is_well_formed_record(record, logger):
            continue
        if window.contains(record.date):
            kept.append(record)
    return kept


def group_totals(
    records: Iterable[FinancialRecord],
    key_of: KeyFunc = classification_of,
) -> list[AggregateBucket]:
    """Sum amounts per label in first-seen label order."""
    order: list[str] = []
    totals: dict[str, Decimal] = {}
    for record in records:
        label = key_of(record)
        if label not in totals:
            order.append(label)
            totals[label] = record.amount
        else:
            totals[label] += record.amount
    return [AggregateBucket(label=label, total=totals[label]) for label in order]


def aggregate_records(
    records: Iterable[FinancialRecord],
    window: DateWindow,
    key_of: KeyFunc = classification_of,
    logger: Logger | None = None,
) -> list[AggregateBucket]:
    """Filter records to the window and aggregate them by label.

    Args:
        records: Full record collection for the active tab.
        window: Inclusive reporting window.
        key_of: Grouping key extractor.
        logger: Optional logger for malformed-record warnings.

    Returns:
        list[AggregateBucket]: Buckets in first-seen label order; empty when
        no record falls inside the window.
    """
    return group_totals(filter_records(records, window, logger), key_of)


__all__ = [
    "KeyFunc",
    "CLASSIFICATION_KEYS",
    "classification_of",
    "filter_records",
    "group_totals",
    "aggregate_records",
]
