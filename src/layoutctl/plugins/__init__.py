"""Extension layer — lifecycle hooks via pluggy.

Discovery: the ``layoutctl.plugins`` entry-point group, or direct registration.
INVARIANT: Plugin failures are warnings, never errors.
"""

from layoutctl.plugins.manager import PluginManager, hookimpl

__all__ = ["PluginManager", "hookimpl"]
