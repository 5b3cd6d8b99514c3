"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_source import RecordSourcePort
from src.application.use_cases.get_dashboard_view import (
    GetDashboardViewUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.json_record_source import JsonRecordSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.sql_record_source import SqlAlchemyRecordSource


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_source(
    settings: DashboardSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> RecordSourcePort:
    """Return the configured record source.

    Raises:
        RuntimeError: If RECORD_SOURCE names an unknown backend.
    """
    resolved = settings or DashboardSettings.from_env()
    if resolved.record_source == "sql":
        return SqlAlchemyRecordSource(
            db_port or build_database_adapter(),
            logger=get_app_logger(),
        )
    if resolved.record_source == "json":
        return JsonRecordSource(
            resolved.expense_file,
            resolved.income_file,
            logger=get_app_logger(),
        )
    raise RuntimeError(
        f"Unknown RECORD_SOURCE '{resolved.record_source}'. "
        "Expected 'json' or 'sql'."
    )


def build_dashboard_use_case(
    settings: DashboardSettings | None = None,
) -> GetDashboardViewUseCase:
    """Return the dashboard use case wired to the configured source."""
    return GetDashboardViewUseCase(
        record_source=build_record_source(settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_record_source",
    "build_dashboard_use_case",
]
