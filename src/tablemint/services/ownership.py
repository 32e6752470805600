"""OwnershipService — read-only lookups against the ownership ledger."""

from __future__ import annotations

from tablemint.domain.ids import is_identifier
from tablemint.services.base import BaseService
from tablemint.services.result import ServiceResult
from tablemint.services.telemetry import traced


class OwnershipService(BaseService):
    """Answers "who was this identifier issued to?"."""

    @traced
    def owner_of(self, identifier: int) -> ServiceResult:
        op = "owner"
        owner = self._registry.ledger.owner_of(identifier) if is_identifier(identifier) else None
        if owner is None:
            return self._failure(
                op,
                "NOT_FOUND",
                f"Identifier {identifier} has not been issued",
                id=identifier,
            )
        return ServiceResult(ok=True, op=op, data={"id": identifier, "owner": owner})
