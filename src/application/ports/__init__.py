"""Application ports package."""

from .database import DatabaseEnginePort
from .record_source import RecordSourcePort, fetch_records

__all__ = [
    "DatabaseEnginePort",
    "RecordSourcePort",
    "fetch_records",
]
