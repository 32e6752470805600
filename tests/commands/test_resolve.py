"""Tests for the resolve command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tablemint.cli import cli

EXPECTED_ONE = (
    "https://tables.example/SELECT%20json_object%28%27name%27%2Cname%2C%27description"
    "%27%2Cdescription%2C%27attributes%27%2Cjson_group_array%28json_object%28%27trait_type"
    "%27%2Ctrait_type%2C%27value%27%2Cvalue%29%29%29%20FROM%20main_1%20JOIN%20attrs_1"
    "%20WHERE%20main_1%2Eid%20%3D%20attrs_1%2Eid%20and%20main_1%2Eid%3D1&mode=list"
)


def _mint_three(runner: CliRunner) -> None:
    for owner in ("alice", "bob", "carol"):
        runner.invoke(cli, ["mint", owner])


@pytest.mark.usefixtures("_isolated_registry")
class TestResolveCommand:
    def test_scenario_json(self, cli_runner: CliRunner) -> None:
        _mint_three(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "resolve", "1"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["uri"] == EXPECTED_ONE

    def test_quiet_prints_bare_locator(self, cli_runner: CliRunner) -> None:
        _mint_three(cli_runner)
        result = cli_runner.invoke(cli, ["-q", "resolve", "1"])
        assert result.exit_code == 0
        assert result.output == EXPECTED_ONE + "\n"

    def test_not_found(self, cli_runner: CliRunner) -> None:
        _mint_three(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "resolve", "5"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_FOUND"

    def test_decoded(self, cli_runner: CliRunner) -> None:
        _mint_three(cli_runner)
        result = cli_runner.invoke(cli, ["--json", "resolve", "2", "--decoded"])
        data = json.loads(result.output)
        assert data["data"]["query"].endswith("main_1.id=2")

    def test_negative_rejected_by_cli(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve", "--", "-1"])
        assert result.exit_code == 2

    def test_verbose_shows_meta(self, cli_runner: CliRunner) -> None:
        _mint_three(cli_runner)
        result = cli_runner.invoke(cli, ["-v", "resolve", "0"])
        assert result.exit_code == 0
        assert "meta:" in result.output
        assert "LocatorBuilder.resolve" in result.output


class TestResolveUnconfigured:
    def test_empty_locator(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        cli_runner.invoke(cli, ["mint", "alice"])
        for identifier in ("0", "9"):
            result = cli_runner.invoke(cli, ["--json", "resolve", identifier])
            assert result.exit_code == 0
            assert json.loads(result.output)["data"]["uri"] == ""

    def test_explicit_config_flag(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config = tmp_path / "conf" / "alt.toml"
        config.parent.mkdir()
        config.write_text(
            '[locator]\nbase_location = "https://alt/"\n'
            'main_table = "m"\nattributes_table = "a"\n'
        )
        monkeypatch.chdir(tmp_path)
        cli_runner.invoke(cli, ["-c", str(config), "mint", "alice"])
        result = cli_runner.invoke(cli, ["-q", "-c", str(config), "resolve", "0"])
        assert result.exit_code == 0
        assert result.output.startswith("https://alt/SELECT%20")
        assert result.output.strip().endswith("m%2Eid%3D0&mode=list")
