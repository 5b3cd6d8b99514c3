"""Tests for window filtering and aggregation."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    AggregateBucket,
    DateWindow,
    FinancialRecord,
    PresetMonths,
)
from src.domain.services.aggregation import (
    aggregate_records,
    filter_records,
    group_totals,
)
from src.domain.services.time_window import resolve_window


def _record(amount: str, day: date, label: str) -> FinancialRecord:
    return FinancialRecord(
        amount=Decimal(amount),
        date=day,
        classification=label,
    )


SCENARIO_RECORDS = [
    _record("100", date(2024, 1, 5), "Rent"),
    _record("50", date(2024, 1, 10), "Groceries"),
    _record("30", date(2023, 6, 1), "Rent"),
]


def test_one_month_preset_excludes_older_records():
    """A one-month window drops the 2023-06-01 rent entry."""
    window = resolve_window(date(2024, 1, 31), PresetMonths(1))

    buckets = aggregate_records(SCENARIO_RECORDS, window)

    assert buckets == [
        AggregateBucket("Rent", Decimal("100")),
        AggregateBucket("Groceries", Decimal("50")),
    ]


def test_twelve_month_preset_sums_per_label():
    window = resolve_window(date(2024, 1, 31), PresetMonths(12))

    buckets = aggregate_records(SCENARIO_RECORDS, window)

    assert buckets == [
        AggregateBucket("Rent", Decimal("130")),
        AggregateBucket("Groceries", Decimal("50")),
    ]


def test_buckets_follow_first_seen_order_not_totals():
    records = [
        _record("1", date(2024, 1, 1), "Zoo"),
        _record("500", date(2024, 1, 2), "Apartment"),
        _record("2", date(2024, 1, 3), "Zoo"),
    ]
    buckets = group_totals(records)
    assert [bucket.label for bucket in buckets] == ["Zoo", "Apartment"]


def test_first_seen_order_counts_only_in_window_records():
    """A label whose first record is outside the window is ordered later."""
    records = [
        _record("10", date(2023, 1, 1), "Rent"),
        _record("20", date(2024, 1, 2), "Groceries"),
        _record("30", date(2024, 1, 3), "Rent"),
    ]
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))

    buckets = aggregate_records(records, window)

    assert [bucket.label for bucket in buckets] == ["Groceries", "Rent"]


def test_window_bounds_are_inclusive():
    records = [
        _record("1", date(2024, 1, 1), "A"),
        _record("2", date(2024, 1, 31), "A"),
        _record("4", date(2024, 2, 1), "A"),
    ]
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))
    assert aggregate_records(records, window) == [
        AggregateBucket("A", Decimal("3")),
    ]


def test_decimal_summation_has_no_float_drift():
    records = [_record("0.1", date(2024, 1, 1), "Coffee")] * 3
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 1))
    assert aggregate_records(records, window)[0].total == Decimal("0.3")


def test_totals_conserve_window_amounts():
    """Bucket totals add up to exactly the in-window amounts."""
    records = [
        _record("12.5", date(2024, 1, 3), "A"),
        _record("7.25", date(2024, 1, 9), "B"),
        _record("100", date(2023, 1, 9), "B"),
        _record("3", date(2024, 1, 20), "C"),
        _record("0.25", date(2024, 1, 21), "A"),
    ]
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))

    buckets = aggregate_records(records, window)
    expected = sum(
        (r.amount for r in records if window.contains(r.date)),
        start=Decimal("0"),
    )

    assert sum((b.total for b in buckets), start=Decimal("0")) == expected
    assert expected == Decimal("23.00")


def test_empty_input_returns_empty_list():
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))
    assert aggregate_records([], window) == []


def test_custom_key_function_groups_records():
    records = [
        _record("5", date(2024, 1, 1), "Food:Groceries"),
        _record("7", date(2024, 1, 2), "Food:Restaurants"),
    ]
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))

    buckets = aggregate_records(
        records,
        window,
        key_of=lambda record: record.classification.split(":")[0],
    )

    assert buckets == [AggregateBucket("Food", Decimal("12"))]


def test_malformed_records_are_excluded_and_logged():
    logger = MagicMock()
    records = [
        _record("-5", date(2024, 1, 2), "Refund"),
        _record("10", date(2024, 1, 3), "  "),
        _record("20", date(2024, 1, 4), "Rent"),
    ]
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))

    filtered = filter_records(records, window, logger)

    assert [r.classification for r in filtered] == ["Rent"]
    assert logger.warning.call_count == 2


def test_repeated_runs_are_identical():
    window = resolve_window(date(2024, 1, 31), PresetMonths(12))
    first = aggregate_records(SCENARIO_RECORDS, window)
    second = aggregate_records(SCENARIO_RECORDS, window)
    assert first == second
    assert repr(first) == repr(second)


def test_badly_typed_records_are_excluded_without_raising():
    """Text dates and non-text labels are skipped with a warning."""
    logger = MagicMock()
    good = _record("20", date(2024, 1, 4), "Rent")
    records = [
        good,
        FinancialRecord(Decimal("5"), "2024-01-05", "Rent"),
        FinancialRecord(Decimal("5"), date(2024, 1, 5), 42),
        FinancialRecord("lots", date(2024, 1, 5), "Rent"),
    ]
    window = DateWindow(date(2024, 1, 1), date(2024, 1, 31))

    buckets = aggregate_records(records, window, logger=logger)

    assert buckets == [AggregateBucket("Rent", Decimal("20"))]
    assert logger.warning.call_count == 3


def test_plain_numbers_and_datetimes_are_aggregated():
    """Integer amounts and datetime stamps count like Decimal/date values."""
    records = [
        FinancialRecord(100, date(2024, 1, 5), "Rent"),
        FinancialRecord(Decimal("50"), datetime(2024, 1, 10, 8, 15), "Food"),
        FinancialRecord(25, datetime(2024, 1, 31, 23, 59), "Rent"),
    ]
    window = resolve_window(date(2024, 1, 31), PresetMonths(1))

    filtered = filter_records(records, window)
    buckets = aggregate_records(records, window)

    assert buckets == [
        AggregateBucket("Rent", Decimal("125")),
        AggregateBucket("Food", Decimal("50")),
    ]
    assert all(type(record.date) is date for record in filtered)
