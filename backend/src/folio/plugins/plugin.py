"""Plugin model: a named bundle of hook handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

if TYPE_CHECKING:
    from folio.models.output import Output

# A handler receives the hook payload and the current Output and returns the
# (possibly modified) payload. Returning None keeps the payload unchanged.
HookHandler = Callable[[Any, "Output"], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class Plugin:
    """A loaded plugin.

    Attributes:
        name: Plugin name, as listed in the book's ``plugins`` config.
        hooks: Mapping of hook name to handler.
        default: Whether the plugin is loaded unless the book disables it.
    """

    name: str
    hooks: dict[str, HookHandler] = field(default_factory=dict)
    default: bool = False

    def get_hook(self, name: str) -> HookHandler | None:
        """Return the handler registered for hook ``name``, if any."""
        return self.hooks.get(name)
