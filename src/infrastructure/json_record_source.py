"""Record source reading the static JSON bundles of the mobile app.

Expense rows look like ``{"Date": "2024-01-05", "Category": "Rent",
"amount": 100}`` and income rows like ``{"date": "2024-01-05", "Source":
"Salary", "amount": 2500}``. Both key spellings are accepted for either
file.
"""

import json
from pathlib import Path

from src.application.ports.record_source import RecordSourcePort
from src.domain.models import FinancialRecord
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_parsing import build_record, parse_recurrence

_DATE_KEYS = ("Date", "date")
_AMOUNT_KEYS = ("amount", "Amount")
_EXPENSE_LABEL_KEYS = ("Category", "category")
_INCOME_LABEL_KEYS = ("Source", "source")


def _first_value(row: dict, keys: tuple[str, ...]):
    for key in keys:
        if key in row:
            return row[key]
    return None


class JsonRecordSource(RecordSourcePort):
    """RecordSourcePort implementation backed by two JSON files."""

    def __init__(
        self,
        expense_file: Path | str,
        income_file: Path | str,
        logger=None,
    ) -> None:
        """Initialize the source.

        Args:
            expense_file: Path to the expense JSON array.
            income_file: Path to the income JSON array.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expense_file = Path(expense_file)
        self._income_file = Path(income_file)
        self._logger = logger or get_app_logger()

    def fetch_expense_records(self) -> list[FinancialRecord]:
        return self._load(
            self._expense_file,
            _EXPENSE_LABEL_KEYS + _INCOME_LABEL_KEYS,
        )

    def fetch_income_records(self) -> list[FinancialRecord]:
        return self._load(
            self._income_file,
            _INCOME_LABEL_KEYS + _EXPENSE_LABEL_KEYS,
        )

    def _load(
        self,
        path: Path,
        label_keys: tuple[str, ...],
    ) -> list[FinancialRecord]:
        rows = self._read_rows(path)
        records: list[FinancialRecord] = []
        for position, row in enumerate(rows):
            if not isinstance(row, dict):
                self._logger.warning(
                    f"Skipping non-object row {position} in {path.name}"
                )
                continue
            record = build_record(
                _first_value(row, _AMOUNT_KEYS),
                _first_value(row, _DATE_KEYS),
                _first_value(row, label_keys),
                parse_recurrence(row.get("recurrence")),
            )
            if record is None:
                self._logger.warning(
                    f"Skipping unparseable row {position} in {path.name}: {row}"
                )
                continue
            records.append(record)
        self._logger.info(f"Loaded {len(records)} records from {path}")
        return records

    def _read_rows(self, path: Path) -> list:
        if not path.exists():
            self._logger.warning(f"Record file does not exist at {path}")
            return []
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            self._logger.error(f"Invalid JSON in {path}: {exc}")
            return []
        if not isinstance(payload, list):
            self._logger.error(f"Expected a JSON array in {path}")
            return []
        return payload


__all__ = ["JsonRecordSource"]
