"""Registry — the single dependency injected into every service.

The Registry owns the database engine, the issuance lock, the ownership
ledger, and the frozen settings (including the locator's base location
and table names).

:meth:`transaction` is re-entrant per thread: a nested call joins the
transaction already open on the current thread, so the counter increment
and a ledger write made from inside it commit or roll back together.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tablemint.infrastructure.database.counters import (
    claim_next_identifier,
    peek_next_identifier,
)
from tablemint.infrastructure.database.engine import init_database

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from tablemint.config.settings import TablemintSettings
    from tablemint.domain.tables import TableReference
    from tablemint.infrastructure.ledger import OwnershipLedger

logger = logging.getLogger(__name__)


@dataclass
class RegistryTransaction:
    """Active transaction context wrapping a DB connection."""

    conn: Connection

    def claim_identifier(self) -> int:
        """Claim the next identifier within this transaction."""
        return claim_next_identifier(self.conn)

    def next_identifier(self) -> int:
        """The identifier the next claim would return."""
        return peek_next_identifier(self.conn)


class Registry:
    """Transactional access to the issuance counter and ownership ledger."""

    def __init__(
        self,
        settings: TablemintSettings,
        *,
        ledger: OwnershipLedger | None = None,
    ) -> None:
        self._settings = settings
        self._root = settings.registry_root
        self._engine = init_database(self._root, settings.registry.db_name)
        self._local = threading.local()
        self._ledger = ledger
        self.issuance_lock = threading.Lock()
        logger.debug("Opened registry at %s", self._root)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def settings(self) -> TablemintSettings:
        return self._settings

    @property
    def base_location(self) -> str:
        """Locator prefix; empty when the registry is unconfigured."""
        return self._settings.locator.base_location

    @property
    def tables(self) -> TableReference:
        """The configured (main, attributes) table pair."""
        return self._settings.locator.tables

    @property
    def ledger(self) -> OwnershipLedger:
        """The ownership ledger (SQL-backed unless one was injected)."""
        if self._ledger is None:
            from tablemint.infrastructure.ledger import SqlOwnershipLedger

            self._ledger = SqlOwnershipLedger(self)
        return self._ledger

    @contextmanager
    def transaction(self) -> Iterator[RegistryTransaction]:
        """Open a DB transaction, or join the one active on this thread.

        Commits when the outermost block exits normally; rolls back and
        re-raises on any exception.
        """
        active: RegistryTransaction | None = getattr(self._local, "txn", None)
        if active is not None:
            yield active
            return

        with self._engine.begin() as conn:
            txn = RegistryTransaction(conn=conn)
            self._local.txn = txn
            try:
                yield txn
            finally:
                self._local.txn = None

    def close(self) -> None:
        """Release the database engine's pooled connections."""
        self._engine.dispose()
