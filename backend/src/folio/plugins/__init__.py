"""Plugins and the hook handlers they contribute."""

from folio.plugins.plugin import HookHandler, Plugin
from folio.plugins.registry import PluginError, PluginNotFoundError, PluginRegistry

__all__ = [
    "HookHandler",
    "Plugin",
    "PluginError",
    "PluginNotFoundError",
    "PluginRegistry",
]
