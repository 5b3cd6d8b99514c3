"""Breakdown chart presentation logic for the Streamlit UI.

This module contains pure, testable transformations from the buckets and
drill-down of a ``DashboardView`` to chart slices, legend labels and table
rows, plus the Altair donut built from those slices.

The UI is responsible for:
    - loading the ``DashboardView`` (no IO here),
    - persisting ``DashboardState`` in ``st.session_state``,
    - feeding chart selection events back as selected labels.

Colours are assigned by bucket position, ``palette[i % len(palette)]``, so
a given bucket order always renders with the same colours.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.models import AggregateBucket, DrilldownView

if TYPE_CHECKING:  # pragma: no cover
    import altair as alt


DEFAULT_PALETTE = (
    "#5b00ff",
    "#36A2EB",
    "#FF6384",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#00C49A",
    "#FF6F61",
    "#FFD700",
)

SELECTION_NAME = "slice"


@dataclass(frozen=True)
class ChartSlice:
    """One donut slice."""

    label: str
    value: Decimal
    color: str


def to_chart_slices(
    buckets: Sequence[AggregateBucket],
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> list[ChartSlice]:
    """Project buckets to coloured chart slices, keeping bucket order.

    Args:
        buckets: Aggregated buckets in display order.
        palette: Non-empty colour cycle.

    Returns:
        list[ChartSlice]: One slice per bucket.
    """
    colors = list(palette) or list(DEFAULT_PALETTE)
    return [
        ChartSlice(
            label=bucket.label,
            value=bucket.total,
            color=colors[index % len(colors)],
        )
        for index, bucket in enumerate(buckets)
    ]


def format_amount(value: Decimal, symbol: str = "₹") -> str:
    """Format an amount for display, e.g. ``₹1,250.00``."""
    return f"{symbol}{value:,.2f}"


def slice_legend_label(chart_slice: ChartSlice, symbol: str = "₹") -> str:
    """Return the legend label, e.g. ``Rent (₹100.00)``."""
    return f"{chart_slice.label} ({format_amount(chart_slice.value, symbol)})"


def build_drilldown_rows(
    drilldown: DrilldownView,
    symbol: str = "₹",
) -> list[dict[str, str]]:
    """Return table rows (Label, Amount, Date) for the drill-down records."""
    return [
        {
            "Label": record.classification,
            "Amount": format_amount(record.amount, symbol),
            "Date": record.date.isoformat(),
        }
        for record in drilldown.records
    ]


def drilldown_footer(drilldown: DrilldownView) -> str:
    """Summarize the drill-down record count and date span."""
    if not drilldown.count:
        return "No records for this selection."
    noun = "record" if drilldown.count == 1 else "records"
    return (
        f"Showing {drilldown.count} {noun} from "
        f"{drilldown.earliest.isoformat()} to {drilldown.latest.isoformat()}"
    )


def chart_rows(
    slices: Sequence[ChartSlice],
    symbol: str = "₹",
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows for the donut chart."""
    total = sum((item.value for item in slices), start=Decimal("0"))
    rows: list[dict[str, str | float]] = []
    for item in slices:
        share = (item.value / total) * Decimal("100") if total else Decimal("0")
        rows.append(
            {
                "label": item.label,
                "amount": float(item.value),
                "amount_label": format_amount(item.value, symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return rows


def selected_label_from_event(event) -> str | None:
    """Extract the clicked slice label from a Streamlit chart event.

    Args:
        event: Return value of ``st.altair_chart(..., on_select="rerun")``;
            a mapping or attribute object exposing ``selection``.

    Returns:
        str | None: Label of the clicked slice, if any.
    """
    if event is None:
        return None
    selection = (
        event.get("selection")
        if isinstance(event, dict)
        else getattr(event, "selection", None)
    )
    if not selection:
        return None
    points = selection.get(SELECTION_NAME) if hasattr(selection, "get") else None
    if not points:
        return None
    first = points[0]
    if isinstance(first, dict):
        return first.get("label")
    return None


def build_donut_chart(
    slices: Sequence[ChartSlice],
    symbol: str = "₹",
    chart_size: int = 300,
) -> "alt.Chart":
    """Build an Altair donut chart whose colours follow the slices.

    Args:
        slices: Chart slices in display order.
        symbol: Currency symbol for tooltips.
        chart_size: Width/height for the chart canvas.

    Returns:
        Altair chart with a point selection named ``slice`` on ``label``.
    """
    import altair as alt

    data = chart_rows(slices, symbol)
    click = alt.selection_point(name=SELECTION_NAME, fields=["label"])

    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        padAngle=0.01,
    ).encode(
        theta=alt.Theta("amount:Q", stack=True),
        color=alt.Color(
            "label:N",
            scale=alt.Scale(
                domain=[item.label for item in slices],
                range=[item.color for item in slices],
            ),
            legend=None,
        ),
        opacity=alt.condition(click, alt.value(1.0), alt.value(0.4)),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )

    return base.add_params(click).properties(
        width=chart_size,
        height=chart_size,
    )


__all__ = [
    "DEFAULT_PALETTE",
    "SELECTION_NAME",
    "ChartSlice",
    "to_chart_slices",
    "format_amount",
    "slice_legend_label",
    "build_drilldown_rows",
    "drilldown_footer",
    "chart_rows",
    "selected_label_from_event",
    "build_donut_chart",
]
