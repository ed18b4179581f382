"""Summary tree: the navigation hierarchy of a book.

Nodes are addressed by dotted levels. A part has a single-component level
(``"1"``), its articles extend it (``"1.1"``, ``"1.1.2"``). Parts carry no
path, so the parent of a top-level article is a node without a document;
callers map that to the book's index document.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Any, Iterator, Union


def normalize_ref(path: str) -> str:
    """Normalize an article reference to a relative POSIX path without anchor."""
    ref = path.split("#", 1)[0].replace("\\", "/")
    if not ref:
        return ""
    return posixpath.normpath(ref).lstrip("/")


@dataclass
class SummaryArticle:
    """An entry of the navigation hierarchy, optionally pointing at a page.

    Attributes:
        title: Display title of the entry.
        level: Dotted position in the hierarchy, e.g. ``"1.2.1"``.
        path: Relative path of the referenced page, or None for a heading.
        articles: Nested entries.
    """

    title: str
    level: str
    path: str | None = None
    articles: list[SummaryArticle] = field(default_factory=list)


@dataclass
class SummaryPart:
    """A top-level section grouping articles. Parts never reference a page."""

    title: str
    level: str
    articles: list[SummaryArticle] = field(default_factory=list)

    @property
    def path(self) -> None:
        return None


SummaryNode = Union[SummaryPart, SummaryArticle]


def _build_articles(entries: list[dict[str, Any]], parent_level: str) -> list[SummaryArticle]:
    articles = []
    for index, entry in enumerate(entries, start=1):
        level = f"{parent_level}.{index}"
        raw_path = entry.get("path")
        articles.append(
            SummaryArticle(
                title=entry.get("title", raw_path or ""),
                level=level,
                path=normalize_ref(raw_path) if raw_path else None,
                articles=_build_articles(entry.get("articles", []), level),
            )
        )
    return articles


@dataclass
class Summary:
    """Navigation hierarchy mapping relative paths to parent/child nodes."""

    parts: list[SummaryPart] = field(default_factory=list)

    @classmethod
    def from_entries(cls, entries: list[dict[str, Any]], title: str = "") -> Summary:
        """Build a single-part summary from nested ``{"title", "path", "articles"}`` dicts.

        Args:
            entries: Top-level article entries, in navigation order.
            title: Title of the enclosing part.

        Returns:
            Summary with one part at level ``"1"``.
        """
        return cls(parts=[SummaryPart(title=title, level="1", articles=_build_articles(entries, "1"))])

    def iter_articles(self) -> Iterator[SummaryArticle]:
        """Yield every article depth-first, in navigation order."""
        stack: list[SummaryArticle] = []
        for part in reversed(self.parts):
            stack.extend(reversed(part.articles))
        while stack:
            article = stack.pop()
            yield article
            stack.extend(reversed(article.articles))

    def get_by_path(self, path: str) -> SummaryArticle | None:
        """Find the first article referencing ``path``.

        Args:
            path: Relative page path; anchors and backslashes are ignored.

        Returns:
            Matching article, or None if the summary does not reference the path.
        """
        ref = normalize_ref(path)
        if not ref:
            return None
        for article in self.iter_articles():
            if article.path == ref:
                return article
        return None

    def get_by_level(self, level: str) -> SummaryNode | None:
        """Find the part or article at a dotted level."""
        for part in self.parts:
            if part.level == level:
                return part
        for article in self.iter_articles():
            if article.level == level:
                return article
        return None

    def get_parent(self, node: SummaryNode) -> SummaryNode | None:
        """Return the parent of ``node``; parts are roots and have no parent."""
        if "." not in node.level:
            return None
        parent_level = node.level.rsplit(".", 1)[0]
        return self.get_by_level(parent_level)
