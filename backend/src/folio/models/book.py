"""Book model: the read-mostly source of truth for one build."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from folio.constants.files import README_NAME
from folio.models.config import BookConfig
from folio.models.summary import Summary, normalize_ref


@dataclass(frozen=True)
class Book:
    """A parsed book: summary tree, configuration and language variants.

    A multilingual book carries one child Book per language in ``books``; each
    child has its own root (``<root>/<language>``), summary and config.

    Attributes:
        root: Directory containing the book sources.
        summary: Navigation hierarchy of the book.
        config: Book configuration values.
        readme: Relative path of the index document.
        language: Language code for a language variant, None otherwise.
        books: Language variants of a multilingual book.
    """

    root: Path
    summary: Summary = field(default_factory=Summary)
    config: BookConfig = field(default_factory=BookConfig)
    readme: str = README_NAME
    language: str | None = None
    books: tuple[Book, ...] = ()

    @property
    def content_root(self) -> Path:
        """Directory the page and asset paths are relative to."""
        subdir = self.config.get("root")
        if subdir:
            return self.root / subdir
        return self.root

    def is_multilingual(self) -> bool:
        return len(self.books) > 0

    def get_books(self) -> list[Book]:
        """Language variants, in declaration order."""
        return list(self.books)

    def get_language_book(self, language: str) -> Book | None:
        for book in self.books:
            if book.language == language:
                return book
        return None

    def is_referenced(self, path: str) -> bool:
        """Whether the navigation hierarchy still references ``path``."""
        ref = normalize_ref(path)
        return ref == normalize_ref(self.readme) or self.summary.get_by_path(ref) is not None

    def page_paths(self) -> list[str]:
        """Readme first, then each summary article path, without duplicates."""
        paths = [normalize_ref(self.readme)]
        seen = set(paths)
        for article in self.summary.iter_articles():
            if article.path and article.path not in seen:
                seen.add(article.path)
                paths.append(article.path)
        return paths
