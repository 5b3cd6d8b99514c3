"""Domain validation helpers."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from src.domain.models import FinancialRecord
from src.utils.decimal_utils import coerce_decimal


def coerce_record(record: FinancialRecord) -> FinancialRecord:
    """Return the record with plain numbers as Decimal and datetimes as dates.

    Other values are left untouched so that ``is_well_formed_record``
    reports them.
    """
    amount = record.amount
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        amount = coerce_decimal(amount)
    day = record.date
    if isinstance(day, datetime):
        day = day.date()
    if amount is record.amount and day is record.date:
        return record
    return replace(record, amount=amount, date=day)


def is_well_formed_record(
    record: FinancialRecord,
    logger: Logger | None = None,
) -> bool:
    """Return True when a record can take part in aggregation.

    Records with a missing, non-numeric or negative amount, a missing or
    non-date date, or a blank or non-text classification are rejected and
    reported through ``logger``.

    Args:
        record: Record supplied by the record source.
        logger: Optional logger used for warnings.

    Returns:
        bool: True when the record is usable.
    """
    problem = None
    if not isinstance(record.amount, Decimal) or not record.amount.is_finite():
        problem = "missing amount"
    elif record.amount < 0:
        problem = f"negative amount {record.amount}"
    elif type(record.date) is not date:
        problem = f"invalid date {record.date!r}"
    elif (
        not isinstance(record.classification, str)
        or not record.classification.strip()
    ):
        problem = "blank classification"
    if problem is None:
        return True
    if logger is not None:
        logger.warning(f"Skipping malformed record ({problem}): {record}")
    return False


__all__ = ["coerce_record", "is_well_formed_record"]
