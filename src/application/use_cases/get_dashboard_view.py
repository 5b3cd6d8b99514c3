"""Use case computing the dashboard view from a record snapshot."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_source import (
    RecordSourcePort,
    fetch_records,
)
from src.application.use_cases.dashboard_filters import reconcile_selection
from src.domain.models import DashboardState, DashboardView
from src.domain.services.aggregation import (
    CLASSIFICATION_KEYS,
    filter_records,
    group_totals,
)
from src.domain.services.selection import build_drilldown, select_bucket
from src.domain.services.time_window import resolve_window
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardViewUseCase:
    """Resolve the window, aggregate, select and drill down in one pass."""

    def __init__(
        self,
        record_source: RecordSourcePort,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            record_source: Port providing expense and income records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning today's date, used when ``now`` is
                not passed to ``execute``.
        """
        self._record_source = record_source
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        state: DashboardState,
        now: date | None = None,
    ) -> DashboardView:
        """Return the derived dashboard view for ``state``.

        Args:
            state: Current dashboard state.
            now: Anchor date for preset windows; defaults to the clock.

        Returns:
            DashboardView: Window, buckets, active bucket and drill-down.
        """
        anchor = now or self._clock()
        records = fetch_records(self._record_source, state.kind)
        window = resolve_window(anchor, state.selection)
        key_of = CLASSIFICATION_KEYS[state.kind]

        filtered = filter_records(records, window, self._logger)
        buckets = group_totals(filtered, key_of)
        selected = select_bucket(buckets, state.selected_label)
        drilldown = build_drilldown(filtered, selected, key_of)
        self._logger.info(
            f"Dashboard {state.kind}: {len(filtered)}/{len(records)} records "
            f"in {window.start}..{window.end}, {len(buckets)} buckets"
        )
        return DashboardView(
            kind=state.kind,
            window=window,
            records_in_window=tuple(filtered),
            buckets=buckets,
            selected=selected,
            drilldown=drilldown,
        )


def refresh_state(
    state: DashboardState,
    view: DashboardView,
) -> DashboardState:
    """Return ``state`` without a selection that ``view`` no longer shows."""
    return reconcile_selection(state, view.buckets)


__all__ = ["GetDashboardViewUseCase", "refresh_state"]
