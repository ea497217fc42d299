"""This module provides an utility function to retrieve the global hook_manager singleton
in guardkit's execution process.
"""

import logging
import threading
from collections.abc import Iterable
from inspect import isclass
from typing import Any

from pluggy import PluginManager

from .markers import HOOK_NAMESPACE
from .specs import ErrorKindSpecs, GuardSpecs

_PLUGIN_HOOKS = "guardkit.hooks"
logger = logging.getLogger(__name__)

_hook_manager: PluginManager | None = None
_hook_manager_lock = threading.Lock()


def _create_hook_manager(enable_tracing: bool = True) -> PluginManager:
    """Create a new PluginManager instance and register guardkit's hook specs.

    Args:
        enable_tracing: If True (default), enables pluggy's tracing and routes it
            to this module's logger at debug level.
    """
    manager = PluginManager(HOOK_NAMESPACE)

    if enable_tracing:
        manager.trace.root.setwriter(
            logger.debug if logger.getEffectiveLevel() <= logging.DEBUG else None
        )
        manager.enable_tracing()

    manager.add_hookspecs(ErrorKindSpecs)
    manager.add_hookspecs(GuardSpecs)
    return manager


def _register_hooks(hook_manager: PluginManager, hooks: Iterable[Any]) -> None:
    for hooks_collection in hooks:
        if not hook_manager.is_registered(hooks_collection):
            if isclass(hooks_collection):
                raise TypeError(
                    "guardkit expects hooks to be registered as instances. "
                    "Have you forgotten the `()` when registering a hook class ?"
                )
            hook_manager.register(hooks_collection)


def _register_hooks_entry_points(
    hook_manager: PluginManager, disabled_plugins: Iterable[str]
) -> None:
    already_registered = hook_manager.get_plugins()
    hook_manager.load_setuptools_entrypoints(_PLUGIN_HOOKS)
    disabled_plugins = set(disabled_plugins)

    plugininfo = hook_manager.list_plugin_distinfo()
    plugin_names = set()
    disabled_plugin_names = set()
    for plugin, dist in plugininfo:
        if dist.project_name in disabled_plugins:
            hook_manager.unregister(plugin=plugin)
            disabled_plugin_names.add(f"{dist.project_name}-{dist.version}")
        elif plugin not in already_registered:
            plugin_names.add(f"{dist.project_name}-{dist.version}")

    if disabled_plugin_names:
        logger.debug(
            "Hooks are disabled for plugin(s): %s",
            ", ".join(sorted(disabled_plugin_names)),
        )
    if plugin_names:
        logger.debug(
            "Registered hooks from %d installed plugin(s): %s",
            len(plugin_names),
            ", ".join(sorted(plugin_names)),
        )


def get_hook_manager() -> PluginManager:
    """Return the process-wide hook manager, creating it on first use from the
    ``HOOKS`` and ``DISABLE_HOOKS_FOR_PLUGINS`` settings and the hooks exposed
    by installed plugins.
    """
    global _hook_manager  # noqa: PLW0603
    with _hook_manager_lock:
        if _hook_manager is None:
            # Imported here to avoid circular imports
            from guardkit.framework.project import settings

            manager = _create_hook_manager()
            _register_hooks(manager, settings.HOOKS)
            _register_hooks_entry_points(manager, settings.DISABLE_HOOKS_FOR_PLUGINS)
            _hook_manager = manager
    return _hook_manager


def _reset_hook_manager() -> None:
    global _hook_manager  # noqa: PLW0603
    with _hook_manager_lock:
        _hook_manager = None
