"""Atomic sequential identifier allocation.

Uses the ``id_counters`` table so that identifiers are gapless and never
reused, across process restarts as well as concurrent callers.

The caller owns the transaction — pass a ``Connection`` obtained from
``engine.begin()`` (or a registry transaction) so the counter increment
commits or rolls back together with the ownership record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select, update

from tablemint.domain.ids import MAX_COUNTER_VALUE, CounterExhaustedError
from tablemint.infrastructure.database.schema import id_counters

if TYPE_CHECKING:
    from sqlalchemy import Connection

IDENTIFIER_COUNTER = "identifier"


def claim_next_identifier(conn: Connection) -> int:
    """Claim the next identifier and advance the counter by one.

    The conditional ``UPDATE`` runs first so SQLite takes its write lock
    before the value is read back; no other connection can claim the same
    value in between.

    Args:
        conn: Active SQLAlchemy connection (caller owns the transaction).

    Returns:
        The claimed identifier (the counter value before the increment).

    Raises:
        CounterExhaustedError: If the counter is already at its maximum.
    """
    result = conn.execute(
        update(id_counters)
        .where(
            id_counters.c.name == IDENTIFIER_COUNTER,
            id_counters.c.next_value < MAX_COUNTER_VALUE,
        )
        .values(next_value=id_counters.c.next_value + 1)
    )
    if result.rowcount == 0:
        raise CounterExhaustedError(peek_next_identifier(conn))

    next_value: int = conn.execute(
        select(id_counters.c.next_value).where(id_counters.c.name == IDENTIFIER_COUNTER)
    ).scalar_one()
    return next_value - 1


def peek_next_identifier(conn: Connection) -> int:
    """Return the identifier the next claim would hand out, without claiming it."""
    value: int = conn.execute(
        select(id_counters.c.next_value).where(id_counters.c.name == IDENTIFIER_COUNTER)
    ).scalar_one()
    return value
