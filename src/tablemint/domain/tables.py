"""TableReference — the pair of externally hosted metadata tables.

Table names are interpolated verbatim into the composed locator, so a
non-empty name must be a plain SQL identifier token. Empty names are
accepted and yield a degenerate locator.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_table_name(name: str) -> str:
    """Return *name* unchanged if it is empty or identifier-safe.

    Raises:
        ValueError: If *name* contains characters that would need escaping.
    """
    if name and TABLE_NAME_PATTERN.match(name) is None:
        msg = (
            f"Invalid table name {name!r}: expected letters, digits and "
            "underscores, not starting with a digit"
        )
        raise ValueError(msg)
    return name


class TableReference(BaseModel):
    """Immutable (main, attributes) table name pair."""

    model_config = {"frozen": True}

    main_table: str = ""
    attributes_table: str = ""

    @field_validator("main_table", "attributes_table")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_table_name(value)

    @property
    def is_complete(self) -> bool:
        """Whether both names are set."""
        return bool(self.main_table and self.attributes_table)
