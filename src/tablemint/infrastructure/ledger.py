"""Ownership ledger — records who each identifier was issued to.

The issuer and locator only depend on :class:`OwnershipLedger`. Any object
with the same methods can be injected into the :class:`Registry`;
:class:`SqlOwnershipLedger` is the default, backed by the ``ownership``
table in the registry database.

Ledger errors are never caught by callers in this package: they propagate
to whoever invoked the service.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from sqlalchemy import insert, select

from tablemint.infrastructure.database.schema import ownership

if TYPE_CHECKING:
    from tablemint.infrastructure.registry import Registry

logger = logging.getLogger(__name__)


class OwnershipLedger(Protocol):
    """External ownership bookkeeping consulted by the core."""

    def record(self, identifier: int, owner: str) -> None: ...

    def exists(self, identifier: int) -> bool: ...

    def owner_of(self, identifier: int) -> str | None: ...


class SqlOwnershipLedger:
    """Ledger stored in the registry's ``ownership`` table.

    Writes go through :meth:`Registry.transaction`, so a ``record`` made
    while the issuer holds a transaction joins it.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def record(self, identifier: int, owner: str) -> None:
        issued_at = datetime.now(UTC).isoformat()
        with self._registry.transaction() as txn:
            txn.conn.execute(
                insert(ownership).values(id=identifier, owner=owner, issued_at=issued_at)
            )
        logger.debug("Recorded ownership of %d for %s", identifier, owner)

    def exists(self, identifier: int) -> bool:
        with self._registry.transaction() as txn:
            row = txn.conn.execute(
                select(ownership.c.id).where(ownership.c.id == identifier)
            ).first()
        return row is not None

    def owner_of(self, identifier: int) -> str | None:
        with self._registry.transaction() as txn:
            owner: str | None = txn.conn.execute(
                select(ownership.c.owner).where(ownership.c.id == identifier)
            ).scalar_one_or_none()
        return owner
