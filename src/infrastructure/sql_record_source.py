"""Record source reading ledger tables through SQLAlchemy."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_source import RecordSourcePort
from src.domain.models import FinancialRecord
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_parsing import build_record, parse_recurrence


class SqlAlchemyRecordSource(RecordSourcePort):
    """RecordSourcePort implementation backed by ``expenses``/``incomes``.

    Expected columns are ``id``, ``amount``, ``entry_date`` and ``category``
    (expenses) or ``source`` (incomes), plus nullable
    ``recurrence_frequency`` and ``recurrence_end_date``.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the source.

        Args:
            db_port: Port providing access to the records engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_expense_records(self) -> list[FinancialRecord]:
        return self._fetch("expenses", "category")

    def fetch_income_records(self) -> list[FinancialRecord]:
        return self._fetch("incomes", "source")

    def _fetch(self, table: str, label_column: str) -> list[FinancialRecord]:
        query = self._build_query(table, label_column)
        engine = self._db_port.get_records_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        records: list[FinancialRecord] = []
        for row in rows:
            recurrence = parse_recurrence(
                {
                    "frequency": row.recurrence_frequency,
                    "end_date": row.recurrence_end_date,
                }
            )
            record = build_record(
                row.amount,
                row.entry_date,
                row.label,
                recurrence,
            )
            if record is None:
                self._logger.warning(
                    f"Skipping unparseable {table} row id={row.id}"
                )
                continue
            records.append(record)
        self._logger.info(f"Fetched {len(records)} rows from {table}")
        return records

    @staticmethod
    def _build_query(table: str, label_column: str):
        return text(
            f"""
            SELECT id,
                   amount,
                   entry_date,
                   {label_column} AS label,
                   recurrence_frequency,
                   recurrence_end_date
            FROM {table}
            ORDER BY id
            """
        )


__all__ = ["SqlAlchemyRecordSource"]
