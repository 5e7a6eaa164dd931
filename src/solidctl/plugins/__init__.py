"""Extension layer: new variants via pluggy.

Discovery: entry_points (``solidctl.plugins`` group) plus single-file plugins
in the local plugin directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from solidctl.plugins.hookspecs import hookimpl
from solidctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
