"""IdentifierIssuer — gapless sequential identifier issuance.

``mint`` claims the next counter value, records ``(identifier, owner)``
with the ownership ledger, and commits both in one registry transaction
while holding the registry's issuance lock. If the ledger raises, the
transaction rolls back, the counter stays where it was, and the
exception reaches the caller untouched.
"""

from __future__ import annotations

import logging

from tablemint.domain.ids import CounterExhaustedError
from tablemint.services.base import BaseService
from tablemint.services.result import ServiceResult
from tablemint.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class IdentifierIssuer(BaseService):
    """Issues identifiers 0, 1, 2, ... exactly once each."""

    @traced
    def mint(self, owner: str) -> ServiceResult:
        """Issue the next identifier to *owner*.

        Returns:
            ``data = {"id": <int>, "owner": <str>}`` on success.
            ``INVALID_OWNER`` if *owner* is blank, ``COUNTER_EXHAUSTED``
            if no identifiers remain.
        """
        op = "mint"
        if not owner or not owner.strip():
            return self._failure(op, "INVALID_OWNER", "Owner must be a non-empty string")

        ledger = self._registry.ledger
        with self._registry.issuance_lock, self._registry.transaction() as txn:
            try:
                with trace_span("claim"):
                    identifier = txn.claim_identifier()
            except CounterExhaustedError as exc:
                logger.warning("Identifier counter exhausted at %d", exc.next_value)
                return self._failure(
                    op,
                    "COUNTER_EXHAUSTED",
                    "No identifiers left to issue",
                    next_value=exc.next_value,
                )
            with trace_span("ledger.record"):
                ledger.record(identifier, owner)

        logger.info("Issued identifier %d to %s", identifier, owner)
        return ServiceResult(ok=True, op=op, data={"id": identifier, "owner": owner})

    @traced
    def total_issued(self) -> ServiceResult:
        """Report how many identifiers have been issued so far."""
        with self._registry.transaction() as txn:
            total = txn.next_identifier()
        return ServiceResult(ok=True, op="supply", data={"total": total, "next_id": total})
