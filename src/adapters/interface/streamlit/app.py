"""Streamlit dashboard entry point."""

from datetime import date

import streamlit as st

from src.adapters.interface.streamlit.breakdown_chart import (
    build_donut_chart,
    build_drilldown_rows,
    drilldown_footer,
    format_amount,
    selected_label_from_event,
    slice_legend_label,
    to_chart_slices,
)
from src.application.use_cases.dashboard_filters import (
    apply_custom_range,
    can_apply_custom_range,
    choose_preset,
    enter_custom_mode,
    pick_custom_end,
    pick_custom_start,
    select_label,
    switch_kind,
)
from src.application.use_cases.get_dashboard_view import refresh_state
from src.domain.models import DashboardState, DashboardView, PresetMonths
from src.infrastructure.container import build_dashboard_use_case
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import DashboardSettings

STATE_KEY = "dashboard_state"
CHART_LABEL_KEY = "last_chart_label"
CHART_GENERATION_KEY = "chart_generation"

KIND_LABELS = {"expense": "Spending", "income": "Income"}
TITLES = {"expense": "Spending Breakdown", "income": "Income Breakdown"}
CUSTOM_LABEL = "Custom"
FILTER_OPTIONS: list[tuple[str, int | None]] = [
    ("1 Month", 1),
    ("2 Months", 2),
    ("6 Months", 6),
    ("1 Year", 12),
    (CUSTOM_LABEL, None),
]


def _fetch_dashboard_view(
    state: DashboardState,
    today: date,
) -> DashboardView:
    """Compute the dashboard view with the configured record source."""
    use_case = build_dashboard_use_case()
    return use_case.execute(state, now=today)


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard_view(
    state: DashboardState,
    today: date,
    schema_version: int = 1,
) -> DashboardView:
    """Cached wrapper around _fetch_dashboard_view."""
    _ = schema_version
    return _fetch_dashboard_view(state, today)


def _initial_state(settings: DashboardSettings) -> DashboardState:
    """Return a fresh state using the configured default preset."""
    return DashboardState(
        selection=PresetMonths(settings.default_preset_months),
    )


def _filter_label(state: DashboardState) -> str:
    """Return the filter option matching the current state."""
    if state.custom_mode:
        return CUSTOM_LABEL
    if isinstance(state.selection, PresetMonths):
        for label, months in FILTER_OPTIONS:
            if months == state.selection.months:
                return label
    return FILTER_OPTIONS[0][0]


def _apply_filter_choice(state: DashboardState, label: str) -> DashboardState:
    """Translate a filter option click into a state transition."""
    if label == _filter_label(state):
        return state
    if label == CUSTOM_LABEL:
        return enter_custom_mode(state)
    months = dict(FILTER_OPTIONS).get(label)
    if months is None:
        return state
    return choose_preset(state, months)


def _kind_from_label(label: str) -> str:
    """Return the record kind for a tab label."""
    for kind, kind_label in KIND_LABELS.items():
        if kind_label == label:
            return kind
    return "expense"


def _render_kind_tabs(state: DashboardState, usage_logger) -> DashboardState:
    """Render the Spending/Income switch."""
    labels = list(KIND_LABELS.values())
    choice = st.radio(
        "View",
        labels,
        index=labels.index(KIND_LABELS[state.kind]),
        horizontal=True,
    )
    kind = _kind_from_label(choice)
    if kind != state.kind:
        usage_logger.info(f"Switched tab to {kind}")
        return switch_kind(state, kind)
    return state


def _render_filters(
    state: DashboardState,
    today: date,
    usage_logger,
) -> DashboardState:
    """Render preset buttons and, in custom mode, the range pickers."""
    labels = [label for label, _months in FILTER_OPTIONS]
    choice = st.radio(
        "Period",
        labels,
        index=labels.index(_filter_label(state)),
        horizontal=True,
    )
    updated = _apply_filter_choice(state, choice)
    if updated != state:
        usage_logger.info(f"Filter changed to {choice}")
    if not updated.custom_mode:
        return updated
    return _render_custom_range(updated, today, usage_logger)


def _render_custom_range(
    state: DashboardState,
    today: date,
    usage_logger,
) -> DashboardState:
    """Render the From/To pickers and the Apply button."""
    start_col, end_col, apply_col = st.columns(3)
    picked_start = start_col.date_input(
        "From",
        value=state.pending_start,
        max_value=state.pending_end or today,
    )
    if picked_start is not None and picked_start != state.pending_start:
        state = pick_custom_start(state, picked_start, today)
    picked_end = end_col.date_input(
        "To",
        value=state.pending_end,
        min_value=state.pending_start,
        max_value=today,
    )
    if picked_end is not None and picked_end != state.pending_end:
        state = pick_custom_end(state, picked_end, today)
    if apply_col.button(
        "Apply",
        disabled=not can_apply_custom_range(state),
    ):
        usage_logger.info(
            f"Applied custom range {state.pending_start}..{state.pending_end}"
        )
        state = apply_custom_range(state)
    return state


def _render_breakdown(
    state: DashboardState,
    view: DashboardView,
    symbol: str,
    usage_logger,
) -> DashboardState:
    """Render the donut, the value list and the label picker."""
    slices = to_chart_slices(view.buckets)
    generation = st.session_state.get(CHART_GENERATION_KEY, 0)
    event = st.altair_chart(
        build_donut_chart(slices, symbol),
        on_select="rerun",
        key=f"breakdown_chart_{generation}",
    )
    clicked = selected_label_from_event(event)
    if clicked is not None and clicked != st.session_state.get(CHART_LABEL_KEY):
        st.session_state[CHART_LABEL_KEY] = clicked
        usage_logger.info(f"Selected slice {clicked}")
        return select_label(state, clicked)

    for chart_slice in slices:
        st.markdown(
            f"<span style='color:{chart_slice.color}'>&#9679;</span> "
            f"{slice_legend_label(chart_slice, symbol)}",
            unsafe_allow_html=True,
        )

    labels = [bucket.label for bucket in view.buckets]
    current = view.selected.label if view.selected else labels[0]
    picked = st.selectbox(
        "Details for",
        labels,
        index=labels.index(current),
    )
    if picked != current:
        usage_logger.info(f"Selected row {picked}")
        return select_label(state, picked)
    return state


def _sync_chart_selection(state: DashboardState) -> None:
    """Reset the chart widget when the selection moved away from its click.

    A fresh widget key drops the stale Altair selection, so clicking the
    same slice again is reported as a new event.
    """
    last_click = st.session_state.get(CHART_LABEL_KEY)
    if last_click is None or last_click == state.selected_label:
        return
    st.session_state.pop(CHART_LABEL_KEY, None)
    st.session_state[CHART_GENERATION_KEY] = (
        st.session_state.get(CHART_GENERATION_KEY, 0) + 1
    )


def _render_drilldown(view: DashboardView, symbol: str) -> None:
    """Render the highlight card and the drill-down table."""
    if view.selected is None:
        return
    st.metric(view.selected.label, format_amount(view.selected.total, symbol))
    rows = build_drilldown_rows(view.drilldown, symbol)
    if rows:
        st.subheader(f"Details for {view.selected.label}")
        st.dataframe(rows, width="stretch", hide_index=True)
    st.caption(drilldown_footer(view.drilldown))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="centered")
    settings = DashboardSettings.from_env()
    usage_logger = get_usage_logger()
    today = date.today()

    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = _initial_state(settings)
    state = st.session_state[STATE_KEY]

    st.title(TITLES[state.kind])
    state = _render_kind_tabs(state, usage_logger)
    state = _render_filters(state, today, usage_logger)

    view = _load_dashboard_view(state, today)
    state = refresh_state(state, view)
    st.session_state[STATE_KEY] = state
    _sync_chart_selection(state)

    st.caption(
        f"{view.window.start.isoformat()} to {view.window.end.isoformat()}"
        f" | Total {format_amount(view.total, settings.currency_symbol)}"
    )
    if view.is_empty:
        st.info("No data found.")
        return

    updated = _render_breakdown(
        state,
        view,
        settings.currency_symbol,
        usage_logger,
    )
    if updated != state:
        st.session_state[STATE_KEY] = updated
        st.rerun()
    _render_drilldown(view, settings.currency_symbol)


if __name__ == "__main__":  # pragma: no cover
    main()
