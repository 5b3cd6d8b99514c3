"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from src.domain.constants import DEFAULT_PRESET_MONTHS, PRESET_MONTHS
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

RECORD_SOURCES = ("json", "sql")


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the reporting dashboard.

    Attributes:
        record_source: Record source identifier (json or sql).
        expense_file: Path to the expense JSON bundle.
        income_file: Path to the income JSON bundle.
        currency_symbol: Symbol displayed next to amounts.
        default_preset_months: Preset applied to a fresh dashboard state.
    """

    record_source: str = "json"
    expense_file: Path | None = None
    income_file: Path | None = None
    currency_symbol: str = "₹"
    default_preset_months: int = DEFAULT_PRESET_MONTHS

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables (and a local .env).

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        record_source = os.getenv("RECORD_SOURCE", "json").strip().lower()
        data_dir = get_project_root() / "data"
        expense_file = cls._resolve_path(
            os.getenv("EXPENSE_DATA_FILE"),
            data_dir / "dashboard-data.json",
        )
        income_file = cls._resolve_path(
            os.getenv("INCOME_DATA_FILE"),
            data_dir / "income-data.json",
        )
        currency_symbol = os.getenv("CURRENCY_SYMBOL", "₹").strip() or "₹"
        default_preset_months = cls._parse_preset(
            os.getenv("DEFAULT_PRESET_MONTHS"),
            logger=logger,
        )
        return cls(
            record_source=record_source,
            expense_file=expense_file,
            income_file=income_file,
            currency_symbol=currency_symbol,
            default_preset_months=default_preset_months,
        )

    @staticmethod
    def _resolve_path(raw_path: str | None, default: Path) -> Path:
        """Return the configured path, expanded, or the default one."""
        if not raw_path or not raw_path.strip():
            return default
        return Path(raw_path.strip()).expanduser().resolve()

    @staticmethod
    def _parse_preset(raw_value: str | None, logger) -> int:
        """Parse the default preset month count.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: A valid preset month count.
        """
        if not raw_value:
            return DEFAULT_PRESET_MONTHS
        try:
            months = int(raw_value)
        except ValueError:
            months = None
        if months not in PRESET_MONTHS:
            logger.warning(
                f"Invalid DEFAULT_PRESET_MONTHS '{raw_value}'. "
                f"Expected one of {PRESET_MONTHS}."
            )
            return DEFAULT_PRESET_MONTHS
        return months


__all__ = ["DashboardSettings", "RECORD_SOURCES"]
