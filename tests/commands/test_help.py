"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from solidctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["list", "run", "run-all", "discount", "tiers", "save", "--json", "--quiet"]),
    (["list", "--help"], ["List the SOLID principles"]),
    (["run", "--help"], ["PRINCIPLE", "--variant", "srp", "dip"]),
    (["run-all", "--help"], ["--variant"]),
    (["discount", "--help"], ["AMOUNT", "--tier"]),
    (["tiers", "--help"], ["List discount tiers"]),
    (["save", "--help"], ["DATA", "--db"]),
]


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=["_".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"
