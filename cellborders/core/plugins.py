"""Contain a registry of grid plugins."""

from __future__ import annotations

import logging
from pkgutil import resolve_name
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

    from cellborders.core.host import GridHost

log = logging.getLogger(__name__)

PLUGIN_CLASSES: dict[str, str] = {}


def register_plugin(name: str, path: str) -> None:
    """Register a plugin class under a name.

    Args:
        name: The name used to load the plugin
        path: The import path of the plugin class, in the form ``module:Class``

    """
    if name in PLUGIN_CLASSES and PLUGIN_CLASSES[name] != path:
        log.warning(
            "Replacing plugin `%s` (%s) with %s", name, PLUGIN_CLASSES[name], path
        )
    PLUGIN_CLASSES[name] = path


def load_plugin(name: str, host: GridHost, *args: Any, **kwargs: Any) -> Any:
    """Create an instance of a registered plugin for a grid.

    Args:
        name: The name the plugin was registered under
        host: The grid the plugin instance should decorate
        args: Additional positional arguments for the plugin
        kwargs: Additional keyword arguments for the plugin

    Returns:
        A new plugin instance

    Raises:
        KeyError: Raised if no plugin is registered with the given name

    """
    try:
        path = PLUGIN_CLASSES[name]
    except KeyError as e:
        raise KeyError(f"Unknown plugin: {name}") from e
    PluginClass = resolve_name(path)
    return PluginClass(host, *args, **kwargs)


def register_default_plugins() -> None:
    """Register the plugins which ship with cellborders."""
    register_plugin("customBorders", "cellborders.core.plugin:CustomBorders")
