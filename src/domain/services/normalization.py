"""Domain normalization helpers."""


def normalize_label(label: str | None) -> str | None:
    """Normalize classification labels.

    Surrounding whitespace is removed; case is preserved because labels are
    shown as-is in the dashboard.

    Args:
        label: Raw category or source label.

    Returns:
        str | None: Cleaned label, or None when blank.
    """
    if label is None:
        return None
    cleaned = str(label).strip()
    return cleaned or None


__all__ = ["normalize_label"]
