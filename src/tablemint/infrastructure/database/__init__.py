"""SQLite database engine, schema, and identifier counter via SQLAlchemy Core."""

from tablemint.infrastructure.database.counters import (
    claim_next_identifier,
    peek_next_identifier,
)
from tablemint.infrastructure.database.engine import create_db_engine, init_database
from tablemint.infrastructure.database.schema import id_counters, metadata, ownership

__all__ = [
    "claim_next_identifier",
    "create_db_engine",
    "id_counters",
    "init_database",
    "metadata",
    "ownership",
    "peek_next_identifier",
]
