"""BaseService: shared foundation for solidctl services.

Every service receives the resolved :class:`SolidSettings` and, optionally,
a loaded :class:`PluginManager`. Services never build either themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from solidctl.config.settings import SolidSettings
    from solidctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DemoService(BaseService):
            def run(self, principle: str) -> ServiceResult:
                ...
    """

    def __init__(
        self,
        settings: SolidSettings,
        plugins: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugins

    def _collect_plugin_variants(self, hook_name: str, warnings: list[str]) -> dict[str, Any]:
        """Merge name -> variant mappings returned by every plugin for *hook_name*.

        No-op without a plugin manager.
        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return {}
        try:
            return self._plugins.collect(hook_name)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
            return {}
