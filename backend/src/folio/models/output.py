"""Output: the build context threaded through every pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from folio.models.book import Book
from folio.models.generator import GeneratorOptions
from folio.models.page import Page

if TYPE_CHECKING:
    from folio.plugins.plugin import Plugin


@dataclass(frozen=True)
class Output:
    """Immutable build context for one language variant of a book.

    Stages never modify an Output; they return a new one via ``evolve``.
    ``state`` is an opaque, generator-owned map carried forward through one
    language's build.

    Attributes:
        book: Book being generated.
        options: Resolved generator options (holds the output root).
        state: Generator state persisted across hooks and callbacks.
        generator: Name of the active generator.
        plugins: Loaded plugins, in hook invocation order.
        pages: Pages to generate, in generation order.
        assets: Asset paths relative to the content root.
    """

    book: Book
    options: GeneratorOptions
    state: dict[str, Any] = field(default_factory=dict)
    generator: str = ""
    plugins: tuple[Plugin, ...] = ()
    pages: tuple[Page, ...] = ()
    assets: tuple[str, ...] = ()

    @property
    def root(self) -> Path:
        """Output root directory."""
        return Path(self.options.root)

    def evolve(self, **changes: Any) -> Output:
        """Return a copy of this Output with ``changes`` applied."""
        return replace(self, **changes)

    def get_page(self, path: str) -> Page | None:
        for page in self.pages:
            if page.path == path:
                return page
        return None
