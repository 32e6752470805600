"""Shared pytest fixtures and test helpers for tablemint tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from tablemint.config.models import LocatorConfig
from tablemint.config.settings import TablemintSettings
from tablemint.infrastructure.database.engine import init_database
from tablemint.infrastructure.registry import Registry
from tablemint.services.telemetry import disable_telemetry

BASE_LOCATION = "https://tables.example/"
MAIN_TABLE = "main_1"
ATTRIBUTES_TABLE = "attrs_1"

CONFIGURED_TOML = f"""\
[locator]
base_location = "{BASE_LOCATION}"
main_table = "{MAIN_TABLE}"
attributes_table = "{ATTRIBUTES_TABLE}"
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TABLEMINT_* variables out of every test."""
    for name in (
        "TABLEMINT_CONFIG",
        "TABLEMINT_REGISTRY_ROOT",
        "TABLEMINT_LOCATOR__BASE_LOCATION",
        "TABLEMINT_LOCATOR__MAIN_TABLE",
        "TABLEMINT_LOCATOR__ATTRIBUTES_TABLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """Verbose CLI runs enable telemetry for the whole thread; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def locator_config() -> LocatorConfig:
    return LocatorConfig(
        base_location=BASE_LOCATION,
        main_table=MAIN_TABLE,
        attributes_table=ATTRIBUTES_TABLE,
    )


@pytest.fixture
def settings(tmp_path: Path, locator_config: LocatorConfig) -> TablemintSettings:
    """Settings for a fully configured registry rooted at ``tmp_path``."""
    return TablemintSettings.from_cli(registry_root=tmp_path, locator=locator_config)


@pytest.fixture
def registry(settings: TablemintSettings) -> Generator[Registry]:
    """Fully configured registry on a temp directory."""
    r = Registry(settings)
    try:
        yield r
    finally:
        r.close()


@pytest.fixture
def unconfigured_registry(tmp_path: Path) -> Generator[Registry]:
    """Registry with no base location or table names."""
    r = Registry(TablemintSettings.from_cli(registry_root=tmp_path))
    try:
        yield r
    finally:
        r.close()


@pytest.fixture
def _isolated_registry(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory holding a configured tablemint.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_registry")`` on command
    test classes.
    """
    (tmp_path / "tablemint.toml").write_text(CONFIGURED_TOML, encoding="utf-8")
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Test ledgers
# ---------------------------------------------------------------------------


class MemoryLedger:
    """In-memory OwnershipLedger that counts calls."""

    def __init__(self) -> None:
        self.owners: dict[int, str] = {}
        self.exists_calls = 0

    def record(self, identifier: int, owner: str) -> None:
        self.owners[identifier] = owner

    def exists(self, identifier: int) -> bool:
        self.exists_calls += 1
        return identifier in self.owners

    def owner_of(self, identifier: int) -> str | None:
        return self.owners.get(identifier)


class LedgerUnavailable(Exception):
    """Raised by :class:`BrokenLedger`."""


class BrokenLedger:
    """OwnershipLedger whose every call fails."""

    def record(self, identifier: int, owner: str) -> None:
        raise LedgerUnavailable("record")

    def exists(self, identifier: int) -> bool:
        raise LedgerUnavailable("exists")

    def owner_of(self, identifier: int) -> str | None:
        raise LedgerUnavailable("owner_of")
