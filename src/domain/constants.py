"""Domain constants for dashboard reporting."""

PRESET_MONTHS = (1, 2, 6, 12)

DEFAULT_PRESET_MONTHS = 1

RECORD_KINDS = ("expense", "income")


__all__ = ["PRESET_MONTHS", "DEFAULT_PRESET_MONTHS", "RECORD_KINDS"]
