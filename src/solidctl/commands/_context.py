"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Loads plugins lazily and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from solidctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from solidctl.config.settings import SolidSettings
    from solidctl.plugins.manager import PluginManager
    from solidctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered on first use, so ``--help`` and ``--version``
    never import plugin code.
    """

    def __init__(self, settings: SolidSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from solidctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from solidctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugin manager, or None when ``[plugins] enabled = false``."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from solidctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
        if not self._plugins.is_loaded:
            names = self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
            logger.debug("Loaded plugins: %s", names)
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
