"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) in the ``spatialwriter.plugins``
group via pluggy's setuptools entrypoint loader.
Capabilities: extra binary strategies, post-conversion notifications.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

import pluggy

from spatialwriter.plugins.hookspecs import SpatialWriterHookSpec
from spatialwriter.writer.registry import StrategyRegistry

PROJECT_NAME = "spatialwriter"
ENTRY_POINT_GROUP = "spatialwriter.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, strategy registration, and hook dispatch.

    Args:
        registry: Registry receiving plugin strategies. A fresh one when None.
    """

    def __init__(self, registry: StrategyRegistry | None = None) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SpatialWriterHookSpec)
        self.registry = registry or StrategyRegistry()
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and collect their strategies.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        for plugin in self._pm.get_plugins():
            self._register_plugin_strategies(plugin, self._plugin_name(plugin))
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly and collect its strategies."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        self._register_plugin_strategies(plugin, resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance. Strategies it added stay registered."""
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._plugin_name(p) for p in self._pm.get_plugins()]

    def notify_converted(self, **payload: Any) -> list[str]:
        """Call ``post_convert`` on every plugin.

        INVARIANT: Plugin failures are warnings, never errors.
        Returns the warnings to surface to the caller.
        """
        try:
            self._pm.hook.post_convert(**payload)
        except Exception:
            logger.warning("post_convert hook failed", exc_info=True)
            return ["post_convert hook failed"]
        return []

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _plugin_name(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or plugin.__class__.__name__

    def _normalize_plugin_instances(self) -> None:
        """Replace plugin classes registered by entry points with instances.

        Hook dispatch against a class object leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s", plugin_name, exc_info=True
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    def _register_plugin_strategies(self, plugin: object, plugin_name: str) -> None:
        hook = getattr(plugin, "register_binary_strategies", None)
        if hook is None:
            return

        try:
            strategy_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect binary strategies from plugin %s", plugin_name, exc_info=True
            )
            return

        if strategy_map is None:
            return
        if not isinstance(strategy_map, dict):
            logger.warning("Plugin %s returned non-dict strategy registrations", plugin_name)
            return

        for format_name, strategy_cls in strategy_map.items():
            try:
                self.registry.register(format_name, strategy_cls)
            except (TypeError, ValueError) as exc:
                logger.warning("Plugin %s: %s", plugin_name, exc)
                continue
            logger.debug("Plugin %s registered format %s", plugin_name, format_name)
