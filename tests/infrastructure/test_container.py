"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_dashboard_view import (
    GetDashboardViewUseCase,
)
from src.infrastructure import container
from src.infrastructure.json_record_source import JsonRecordSource
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.sql_record_source import SqlAlchemyRecordSource


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", MagicMock)


def test_json_source_is_default(tmp_path: Path):
    settings = DashboardSettings(
        expense_file=tmp_path / "e.json",
        income_file=tmp_path / "i.json",
    )

    source = container.build_record_source(settings)

    assert isinstance(source, JsonRecordSource)


def test_sql_source_uses_database_adapter():
    db_port = object()
    settings = DashboardSettings(record_source="sql")

    source = container.build_record_source(settings, db_port=db_port)

    assert isinstance(source, SqlAlchemyRecordSource)
    assert source._db_port is db_port


def test_unknown_source_raises_runtime_error():
    with pytest.raises(RuntimeError, match="RECORD_SOURCE"):
        container.build_record_source(DashboardSettings(record_source="csv"))


def test_build_dashboard_use_case_wires_source(tmp_path: Path):
    settings = DashboardSettings(
        expense_file=tmp_path / "e.json",
        income_file=tmp_path / "i.json",
    )

    use_case = container.build_dashboard_use_case(settings)

    assert isinstance(use_case, GetDashboardViewUseCase)
