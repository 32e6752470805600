"""Metadata locator composition.

A locator is the base location followed by a percent-encoded SQL query
that joins the main table to the attributes table on ``id`` and shapes
the row into a single metadata document, followed by ``&mode=list`` so
the table service returns list-style JSON.

The query is modelled as a sequence of typed fragments:

- :class:`LiteralFragment` — fixed query text, percent-encoded on output.
- :class:`RawFragment` — caller-supplied table names and the decimal
  identifier, emitted verbatim.

Every character of a literal fragment other than ASCII letters, digits
and ``_`` is encoded as ``%XX`` (upper-case hex, UTF-8 bytes). This is
stricter than :func:`urllib.parse.quote`, which leaves ``.`` alone; the
table service expects ``.`` as ``%2E``.

Composition is pure: no table or network access happens here.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tablemint.domain.tables import TableReference

LIST_MODE_SUFFIX = "&mode=list"

_SAFE_CHARS = frozenset(string.ascii_letters + string.digits + "_")

SELECT_CLAUSE = (
    "SELECT json_object("
    "'name',name,"
    "'description',description,"
    "'attributes',json_group_array(json_object('trait_type',trait_type,'value',value))"
    ") FROM "
)


def percent_encode(text: str) -> str:
    """Encode every character of *text* outside ``[A-Za-z0-9_]`` as ``%XX``."""
    parts: list[str] = []
    for ch in text:
        if ch in _SAFE_CHARS:
            parts.append(ch)
        else:
            parts.extend(f"%{byte:02X}" for byte in ch.encode("utf-8"))
    return "".join(parts)


@dataclass(frozen=True)
class LiteralFragment:
    """Fixed query text, escaped when encoded."""

    text: str

    def encode(self) -> str:
        return percent_encode(self.text)

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class RawFragment:
    """Substituted value, never escaped."""

    text: str

    def encode(self) -> str:
        return self.text

    def render(self) -> str:
        return self.text


Fragment = LiteralFragment | RawFragment


def metadata_query(tables: TableReference, identifier: int) -> tuple[Fragment, ...]:
    """Build the fragment sequence selecting the metadata row for *identifier*."""
    if isinstance(identifier, bool) or not isinstance(identifier, int) or identifier < 0:
        msg = f"Identifier must be a non-negative integer, got {identifier!r}"
        raise ValueError(msg)

    main = tables.main_table
    attrs = tables.attributes_table
    return (
        LiteralFragment(SELECT_CLAUSE),
        RawFragment(main),
        LiteralFragment(" JOIN "),
        RawFragment(attrs),
        LiteralFragment(" WHERE "),
        RawFragment(main),
        LiteralFragment(".id = "),
        RawFragment(attrs),
        LiteralFragment(".id and "),
        RawFragment(main),
        LiteralFragment(".id="),
        RawFragment(str(identifier)),
    )


def encode_fragments(fragments: Iterable[Fragment]) -> str:
    """Join fragments in their encoded form."""
    return "".join(fragment.encode() for fragment in fragments)


def render_query(tables: TableReference, identifier: int) -> str:
    """Return the unencoded query text for *identifier* (for display only)."""
    return "".join(fragment.render() for fragment in metadata_query(tables, identifier))


def compose_locator(base_location: str, tables: TableReference, identifier: int) -> str:
    """Compose the full locator for *identifier*.

    Returns an empty string when *base_location* is empty, regardless of
    the identifier. The result is a pure function of its arguments.
    """
    if not base_location:
        return ""
    query = encode_fragments(metadata_query(tables, identifier))
    return f"{base_location}{query}{LIST_MODE_SUFFIX}"
