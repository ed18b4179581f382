"""Per-book configuration values."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass(frozen=True)
class BookConfig:
    """Read-mostly view of a book's configuration values.

    Updates return a new BookConfig; the wrapped dict is never mutated.
    """

    values: dict[str, Any] = field(default_factory=dict)

    def get_values(self) -> dict[str, Any]:
        """Return a deep copy of the configuration values."""
        return copy.deepcopy(self.values)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a value by dotted key, e.g. ``"pluginsConfig.search.maxIndexSize"``."""
        current: Any = self.values
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def update_values(self, values: dict[str, Any]) -> BookConfig:
        """Deep-merge ``values`` into a new BookConfig."""
        return BookConfig(values=_deep_merge(self.values, values))
