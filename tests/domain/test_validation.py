"""Tests for record validation."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import FinancialRecord
from src.domain.services.validation import (
    coerce_record,
    is_well_formed_record,
)


def test_valid_record_passes_without_warning():
    logger = MagicMock()
    record = FinancialRecord(Decimal("0"), date(2024, 1, 1), "Rent")

    assert is_well_formed_record(record, logger) is True
    logger.warning.assert_not_called()


def test_negative_amount_is_rejected():
    logger = MagicMock()
    record = FinancialRecord(Decimal("-1"), date(2024, 1, 1), "Rent")

    assert is_well_formed_record(record, logger) is False
    assert "negative amount" in logger.warning.call_args.args[0]


def test_missing_date_is_rejected_without_logger():
    record = FinancialRecord(Decimal("1"), None, "Rent")
    assert is_well_formed_record(record) is False


def test_non_finite_amount_is_rejected():
    record = FinancialRecord(Decimal("NaN"), date(2024, 1, 1), "Rent")
    assert is_well_formed_record(record) is False


def test_non_decimal_amount_is_rejected():
    logger = MagicMock()
    record = FinancialRecord(100, date(2024, 1, 1), "Rent")

    assert is_well_formed_record(record, logger) is False
    assert "missing amount" in logger.warning.call_args.args[0]


def test_text_date_and_datetime_are_rejected():
    text_day = FinancialRecord(Decimal("1"), "2024-01-01", "Rent")
    moment = FinancialRecord(Decimal("1"), datetime(2024, 1, 1, 9), "Rent")

    assert is_well_formed_record(text_day) is False
    assert is_well_formed_record(moment) is False


def test_non_text_classification_is_rejected():
    logger = MagicMock()
    record = FinancialRecord(Decimal("1"), date(2024, 1, 1), 7)

    assert is_well_formed_record(record, logger) is False
    assert "blank classification" in logger.warning.call_args.args[0]


def test_coerce_record_normalizes_numbers_and_datetimes():
    record = FinancialRecord(100, datetime(2024, 1, 5, 18, 30), "Rent")

    coerced = coerce_record(record)

    assert coerced.amount == Decimal("100")
    assert isinstance(coerced.amount, Decimal)
    assert type(coerced.date) is date
    assert coerced.date == date(2024, 1, 5)


def test_coerce_record_returns_well_typed_record_unchanged():
    record = FinancialRecord(Decimal("1"), date(2024, 1, 1), "Rent")
    assert coerce_record(record) is record
