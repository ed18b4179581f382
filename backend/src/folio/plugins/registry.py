"""Plugin registry for resolving the plugins a book asks for."""

import logging

from folio.plugins.plugin import Plugin

logger = logging.getLogger(__name__)


class PluginError(Exception):
    """Base exception for plugin resolution errors."""

    pass


class PluginNotFoundError(PluginError):
    """Raised when a book requests a plugin that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'plugin "{name}" is not registered')


class PluginRegistry:
    """Registry of available plugins.

    Books select plugins by name. Plugins flagged as default are loaded for
    every book unless the book disables them with a ``-name`` entry.
    """

    def __init__(self, plugins: list[Plugin] | None = None):
        """Initialize registry.

        Args:
            plugins: Plugins to register, in registration order.
        """
        self._plugins: dict[str, Plugin] = {}
        for plugin in plugins or []:
            self.register(plugin)

    def register(self, plugin: Plugin) -> None:
        """Register a plugin, replacing any previous plugin of the same name."""
        if plugin.name in self._plugins:
            logger.debug(f'replacing registered plugin "{plugin.name}"')
        self._plugins[plugin.name] = plugin

    def get(self, name: str) -> Plugin | None:
        return self._plugins.get(name)

    @property
    def defaults(self) -> list[Plugin]:
        """Plugins loaded for every book, in registration order."""
        return [p for p in self._plugins.values() if p.default]

    def resolve(self, names: list[str]) -> list[Plugin]:
        """Resolve a book's plugin list into loaded plugins.

        Default plugins come first, followed by the requested ones in the
        order given. A name prefixed with ``-`` removes a plugin.

        Args:
            names: Plugin names from the book config.

        Returns:
            Plugins to load, without duplicates.

        Raises:
            PluginNotFoundError: If a requested plugin is not registered.
        """
        disabled = {name[1:] for name in names if name.startswith("-")}
        requested = [name for name in names if name and not name.startswith("-")]

        ordered = [p.name for p in self.defaults] + requested
        result: list[Plugin] = []
        seen: set[str] = set()
        for name in ordered:
            if name in disabled or name in seen:
                continue
            plugin = self.get(name)
            if plugin is None:
                raise PluginNotFoundError(name)
            seen.add(name)
            result.append(plugin)
        return result
