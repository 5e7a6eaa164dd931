"""Tests for the root CLI group and global flags."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from solidctl import __version__
from solidctl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestRootGroup:
    def test_no_command_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "SOLID design principles" in result.output
        assert "run-all" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["nope"]).exit_code == 2

    def test_explicit_config_flag(
        self, cli_runner: CliRunner, tmp_path_factory: pytest.TempPathFactory
    ) -> None:
        config = tmp_path_factory.mktemp("cfg") / "other.toml"
        config.write_text('[demo]\nuser_data = "Karan"\n', encoding="utf-8")
        result = cli_runner.invoke(cli, ["-c", str(config), "run", "dip"])
        assert result.stdout.splitlines()[:2] == [
            "Connecting SQL database.",
            "Saving user data : [Karan] to DB : [SQL]",
        ]

    def test_invalid_config_is_reported(self, cli_runner: CliRunner) -> None:
        with open("solidctl.toml", "w", encoding="utf-8") as fh:
            fh.write("[demo\n")
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_log_json_keeps_stdout_clean(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "--log-json", "-q", "save", "x"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Connecting SQL database.",
            "Saving user data : [x] to DB : [SQL]",
        ]
