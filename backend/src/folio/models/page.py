"""Page model."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Page:
    """A source document of the book and, once rendered, its derived content.

    Attributes:
        path: Path of the source document relative to the content root.
        content: Page content; empty until the page has been rendered.
        attributes: Frontmatter attributes extracted while rendering.
    """

    path: str
    content: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    def with_content(self, content: str, attributes: dict[str, Any] | None = None) -> Page:
        """Return a copy carrying new content (and attributes, when given)."""
        if attributes is None:
            return replace(self, content=content)
        return replace(self, content=content, attributes=attributes)
