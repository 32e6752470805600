"""SQLAlchemy Core table definitions for the tablemint database.

``id_counters`` holds the issuance counter; ``ownership`` is the default
ownership ledger. The two metadata tables the locator points at live in
the external table service and are not modelled here.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, Table, Text

metadata = MetaData()

id_counters = Table(
    "id_counters",
    metadata,
    Column("name", Text, primary_key=True),
    Column("next_value", Integer, nullable=False, default=0, server_default="0"),
)

ownership = Table(
    "ownership",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("owner", Text, nullable=False),
    Column("issued_at", Text, nullable=False),
)
