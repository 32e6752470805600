"""BaseService — foundation for all tablemint services.

Every service receives a :class:`Registry` at construction time. The
Registry provides transactional access to the counter and the ownership
ledger, plus the frozen locator configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tablemint.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tablemint.infrastructure.registry import Registry


class BaseService:
    """Base for service-layer classes.

    Usage::

        class IdentifierIssuer(BaseService):
            def mint(self, owner: str) -> ServiceResult:
                with self._registry.transaction() as txn:
                    ...
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: object) -> ServiceResult:
        """Build an ``ok=False`` result."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=dict(detail)),
        )
