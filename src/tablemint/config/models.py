"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tablemint.toml only contains
overrides. An unconfigured registry still issues identifiers; it just
resolves every locator to the empty string.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from tablemint.domain.tables import TableReference

_TABLE_KEYS = ("main_table", "attributes_table")


class LocatorConfig(BaseModel):
    """[locator] section.

    ``main_table`` and ``attributes_table`` are flat keys in TOML and env
    vars; they are gathered into a single validated :class:`TableReference`.
    """

    model_config = {"frozen": True}

    base_location: str = ""
    tables: TableReference = Field(default_factory=TableReference)

    @model_validator(mode="before")
    @classmethod
    def _gather_tables(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "tables" in data:
            return data
        data = dict(data)
        data["tables"] = {key: data.pop(key) for key in _TABLE_KEYS if key in data}
        return data

    @property
    def main_table(self) -> str:
        return self.tables.main_table

    @property
    def attributes_table(self) -> str:
        return self.tables.attributes_table


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    db_name: str = "tablemint.db"
