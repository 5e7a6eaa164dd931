"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``SOLIDCTL_*`` prefix
  3. TOML file: ``solidctl.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reads whatever file :func:`~solidctl.config.discovery.find_config` picked.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from solidctl.config.discovery import find_config, read_config
from solidctl.config.models import DemoConfig, DiscountsConfig, PluginsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from the chosen ``solidctl.toml``, if any."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class SolidSettings(BaseSettings):
    """Unified settings for the solidctl CLI.

    Stored on the :class:`~solidctl.commands._context.AppContext` at the CLI
    root and frozen after construction.

    Attributes:
        project_root: Parent of ``solidctl.toml``, or CWD if none was found.
            Relative plugin directories resolve against it.
        config_path: The config file actually used, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SOLIDCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    demo: DemoConfig = Field(default_factory=DemoConfig)
    discounts: DiscountsConfig = Field(default_factory=DiscountsConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> SolidSettings:
        """Construct settings from a CLI invocation.

        Discovers ``solidctl.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path = find_config(project_root, explicit=config_path)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    @property
    def plugin_dir(self) -> Path:
        """Local plugin directory, resolved against :attr:`project_root`."""
        local_dir = self.plugins.local_dir
        if local_dir.is_absolute():
            return local_dir
        return self.project_root / local_dir
