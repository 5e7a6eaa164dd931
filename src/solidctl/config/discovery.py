"""Where ``solidctl.toml`` comes from, and reading it.

Lookup order: the ``--config`` flag, then ``$SOLIDCTL_CONFIG``, then the
nearest ``solidctl.toml`` in the starting directory or one of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "solidctl.toml"
CONFIG_ENV_VAR = "SOLIDCTL_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | None = None) -> Path | None:
    """Locate the config file for this run, or None to use the built-in defaults.

    A path named by *explicit* or by the environment is taken as-is and never
    searched for. If it does not exist, no file is used.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
