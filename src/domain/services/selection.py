"""Bucket selection and drill-down derivation."""

from collections.abc import Iterable, Sequence

from src.domain.models import AggregateBucket, DrilldownView, FinancialRecord
from src.domain.services.aggregation import KeyFunc, classification_of


def select_bucket(
    buckets: Sequence[AggregateBucket],
    requested_label: str | None = None,
) -> AggregateBucket | None:
    """Return the active bucket.

    The requested label wins when it is present; otherwise the first bucket
    is active, or none when there are no buckets.

    Args:
        buckets: Aggregated buckets in display order.
        requested_label: Label emitted by the selection sink, if any.

    Returns:
        AggregateBucket | None: Active bucket.
    """
    if requested_label is not None:
        for bucket in buckets:
            if bucket.label == requested_label:
                return bucket
    return buckets[0] if buckets else None


def build_drilldown(
    filtered_records: Iterable[FinancialRecord],
    bucket: AggregateBucket | None,
    key_of: KeyFunc = classification_of,
) -> DrilldownView:
    """Return the window-filtered records behind ``bucket``.

    Args:
        filtered_records: Records already filtered to the active window.
        bucket: Active bucket, or None.
        key_of: Grouping key extractor used by the aggregation.

    Returns:
        DrilldownView: Matching records in source order with date bounds.
    """
    if bucket is None:
        return DrilldownView()
    records = tuple(
        record for record in filtered_records if key_of(record) == bucket.label
    )
    if not records:
        return DrilldownView(label=bucket.label)
    dates = [record.date for record in records]
    return DrilldownView(
        label=bucket.label,
        records=records,
        earliest=min(dates),
        latest=max(dates),
    )


__all__ = ["select_bucket", "build_drilldown"]
