"""Shared pytest fixtures and test helpers for solidctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from solidctl.config.settings import SolidSettings
from solidctl.plugins.manager import PluginManager
from solidctl.services.telemetry import _active, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory with no config and no env overrides."""
    for var in ("SOLIDCTL_CONFIG", "SOLIDCTL_DEMO__AMOUNT", "SOLIDCTL_DEMO__USER_DATA"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> SolidSettings:
    return SolidSettings.from_cli(project_root=project_root)


@pytest.fixture
def plugin_manager() -> PluginManager:
    """A plugin manager with nothing registered."""
    return PluginManager()


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI finds no stray config or plugins.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None, None, None]:
    """``-v`` in one CLI test must not leave telemetry on for the next."""
    yield
    disable_telemetry()
    _active.set(None)


def write_config(root: Path, body: str) -> Path:
    """Write ``solidctl.toml`` under *root* and return its path."""
    path = root / "solidctl.toml"
    path.write_text(body, encoding="utf-8")
    return path


class Transcript:
    """Line sink for domain tests: pass ``transcript.echo`` as the echo."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def echo(self, line: str) -> None:
        self.lines.append(line)

    def __eq__(self, other: Any) -> bool:
        return self.lines == other


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()
