"""Database ports for the finance dashboard.

This module defines the application-layer protocol for accessing the
database engine holding ledger tables. Infrastructure implementations are
expected to provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the records database engine.

    Record sources can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_records_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger tables.
        """


__all__ = ["DatabaseEnginePort"]
