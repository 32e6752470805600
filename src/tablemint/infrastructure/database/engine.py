"""Database engine setup for SQLite with WAL mode.

SQLite is the persistence layer for the issuance counter and the default
ownership ledger: WAL mode for concurrent reads, ACID transactions for
gapless issuance. The DB is stored at {registry_root}/.tablemint/{db_name}.

SQLAlchemy Core (not ORM) is used because tablemint is a short-lived
CLI process — no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, insert, select
from sqlalchemy.engine import Engine

from tablemint.domain.ids import FIRST_IDENTIFIER
from tablemint.infrastructure.database.counters import IDENTIFIER_COUNTER
from tablemint.infrastructure.database.schema import id_counters, metadata

DATA_DIR = ".tablemint"
DEFAULT_DB_NAME = "tablemint.db"


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()

    return engine


def init_database(registry_root: Path, db_name: str = DEFAULT_DB_NAME) -> Engine:
    """Initialize the tablemint database at ``{registry_root}/.tablemint/{db_name}``.

    Creates the ``.tablemint/`` directory, all tables from
    :data:`schema.metadata`, and seeds the identifier counter at 0.

    Idempotent — safe to call on an existing registry.

    Returns the engine ready for use.
    """
    data_dir = registry_root / DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(data_dir / db_name)
    metadata.create_all(engine)
    _seed_counters(engine)
    return engine


def _seed_counters(engine: Engine) -> None:
    """Insert the identifier counter row if it doesn't exist."""
    with engine.begin() as conn:
        row = conn.execute(
            select(id_counters.c.name).where(id_counters.c.name == IDENTIFIER_COUNTER)
        ).first()
        if row is None:
            conn.execute(
                insert(id_counters).values(name=IDENTIFIER_COUNTER, next_value=FIRST_IDENTIFIER)
            )
