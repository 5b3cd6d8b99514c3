"""Domain services package."""

from .aggregation import (
    CLASSIFICATION_KEYS,
    aggregate_records,
    classification_of,
    filter_records,
    group_totals,
)
from .normalization import normalize_label
from .selection import build_drilldown, select_bucket
from .time_window import preset_window, resolve_window, shift_months
from .validation import coerce_record, is_well_formed_record

__all__ = [
    "CLASSIFICATION_KEYS",
    "aggregate_records",
    "classification_of",
    "filter_records",
    "group_totals",
    "normalize_label",
    "build_drilldown",
    "select_bucket",
    "preset_window",
    "resolve_window",
    "shift_months",
    "coerce_record",
    "is_well_formed_record",
]
