"""CLI adapter printing the dashboard breakdown for a reporting window.

Configured through environment variables:
    REPORT_KIND: "expense" (default) or "income".
    REPORT_MONTHS: preset month count (1, 2, 6 or 12); other values keep
        DEFAULT_PRESET_MONTHS.
    REPORT_START_DATE / REPORT_END_DATE: custom range (YYYY-MM-DD); both
        are required to override the preset.
    REPORT_LABEL: label to drill into (defaults to the first bucket).
"""

from datetime import date
import os

from src.adapters.interface.streamlit.breakdown_chart import (
    drilldown_footer,
    format_amount,
)
from src.application.use_cases.dashboard_filters import (
    apply_custom_range,
    choose_preset,
    enter_custom_mode,
    pick_custom_end,
    pick_custom_start,
    select_label,
    switch_kind,
)
from src.domain.models import DashboardState, PresetMonths
from src.infrastructure.container import build_dashboard_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_months(value: str | None, default: int, logger) -> int:
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid REPORT_MONTHS '{value}'. Using {default}.")
        return default


def _build_state(
    settings: DashboardSettings,
    today: date,
    logger,
) -> DashboardState:
    """Build the dashboard state described by the REPORT_* variables."""
    state = DashboardState(
        selection=PresetMonths(settings.default_preset_months),
    )
    state = switch_kind(state, os.getenv("REPORT_KIND", "expense").strip())
    months = _parse_months(
        os.getenv("REPORT_MONTHS"),
        settings.default_preset_months,
        logger,
    )
    state = choose_preset(state, months)
    start_date = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), logger)
    if start_date and end_date:
        state = enter_custom_mode(state)
        state = pick_custom_end(state, end_date, today)
        state = pick_custom_start(state, start_date, today)
        state = apply_custom_range(state)
    label = os.getenv("REPORT_LABEL")
    if label:
        state = select_label(state, label.strip())
    return state


def main() -> None:
    """Print buckets and the drill-down for the configured window."""
    logger = get_app_logger()
    settings = DashboardSettings.from_env()
    today = date.today()
    try:
        use_case = build_dashboard_use_case(settings)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    state = _build_state(settings, today, logger)
    view = use_case.execute(state, now=today)
    symbol = settings.currency_symbol

    print(
        f"{view.kind.capitalize()} breakdown "
        f"({view.window.start.isoformat()} to {view.window.end.isoformat()})"
    )
    if view.is_empty:
        print("No data found.")
        return
    for bucket in view.buckets:
        print(f"  {bucket.label}: {format_amount(bucket.total, symbol)}")
    print(f"  Total: {format_amount(view.total, symbol)}")

    print(f"Details for {view.selected.label}")
    for record in view.drilldown.records:
        print(
            f"  {record.date.isoformat()}  "
            f"{format_amount(record.amount, symbol)}"
        )
    print(drilldown_footer(view.drilldown))


if __name__ == "__main__":  # pragma: no cover
    main()
