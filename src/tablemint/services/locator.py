"""LocatorBuilder — resolve an issued identifier to its metadata locator.

Resolution per identifier::

    Start -> base location empty?  -> Empty   (ok, uri "")
          -> ledger.exists()?  no  -> NOT_FOUND
                               yes -> compose -> ok, uri

Nothing is cached and nothing is written; each call is independent.
"""

from __future__ import annotations

import logging

from tablemint.domain.ids import is_identifier
from tablemint.domain.locator import compose_locator, render_query
from tablemint.services.base import BaseService
from tablemint.services.result import ServiceResult
from tablemint.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class LocatorBuilder(BaseService):
    """Builds percent-encoded metadata locators for issued identifiers."""

    @traced
    def resolve(self, identifier: int, *, decoded: bool = False) -> ServiceResult:
        """Return the locator for *identifier*.

        Args:
            identifier: The identifier to resolve.
            decoded: Also include the unencoded query text as ``data["query"]``.
        """
        op = "resolve"
        base_location = self._registry.base_location
        if not base_location:
            logger.debug("No base location configured; returning empty locator")
            return ServiceResult(ok=True, op=op, data={"id": identifier, "uri": ""})

        with trace_span("ledger.exists") as span:
            found = is_identifier(identifier) and self._registry.ledger.exists(identifier)
            if span:
                span.annotate("found", found)
        if not found:
            return self._failure(
                op,
                "NOT_FOUND",
                f"Identifier {identifier} has not been issued",
                id=identifier,
            )

        tables = self._registry.tables
        with trace_span("compose") as span:
            uri = compose_locator(base_location, tables, identifier)
            if span:
                span.annotate("length", len(uri))

        data: dict[str, object] = {"id": identifier, "uri": uri}
        if decoded:
            data["query"] = render_query(tables, identifier)

        warnings: list[str] = []
        if not tables.is_complete:
            warnings.append("Table names are not fully configured; locator is degenerate")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
