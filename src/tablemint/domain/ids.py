"""Identifier bounds and validation.

Identifiers are non-negative integers handed out by a single monotonic
counter starting at 0. They are stored as SQLite 64-bit signed integers,
so the counter itself can never exceed ``MAX_COUNTER_VALUE``.

INVARIANT: Identifiers are permanent. Once issued, an identifier is never
reissued and never removed.
"""

from __future__ import annotations

FIRST_IDENTIFIER = 0

# Largest value the persisted counter may hold. The last issuable
# identifier is one below it.
MAX_COUNTER_VALUE = 2**63 - 1
MAX_IDENTIFIER = MAX_COUNTER_VALUE - 1


class CounterExhaustedError(RuntimeError):
    """Raised when the issuance counter has no identifiers left to hand out."""

    def __init__(self, next_value: int) -> None:
        self.next_value = next_value
        super().__init__(f"Identifier counter exhausted at {next_value}")


def is_identifier(value: object) -> bool:
    """Return True if *value* is a well-formed identifier (not necessarily issued)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return FIRST_IDENTIFIER <= value <= MAX_IDENTIFIER
