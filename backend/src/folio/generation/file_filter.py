"""Asset filtering with default excludes and .bookignore support."""

import fnmatch
import logging
from pathlib import Path
from typing import Optional

from folio.constants.files import BOOK_IGNORE_FILE, DEFAULT_ASSET_EXCLUDES

logger = logging.getLogger(__name__)


class AssetFilter:
    """Decide which files under a book's content root are assets."""

    def __init__(
        self,
        content_root: Path,
        exclude_patterns: Optional[list[str]] = None,
        ignore_path: Optional[Path] = None,
    ):
        """Initialize asset filter.

        Args:
            content_root: Directory the asset paths are relative to.
            exclude_patterns: Base fnmatch patterns. Defaults to DEFAULT_ASSET_EXCLUDES.
            ignore_path: Path to ignore file. Defaults to content_root/.bookignore.
        """
        self.content_root = content_root

        self.exclude_patterns = list(
            DEFAULT_ASSET_EXCLUDES if exclude_patterns is None else exclude_patterns
        )

        if ignore_path is None:
            ignore_path = content_root / BOOK_IGNORE_FILE

        if ignore_path.exists():
            for line in ignore_path.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if line and not line.startswith("#"):
                    self.exclude_patterns.append(line)

    def _is_excluded(self, path: str) -> bool:
        """Check if path matches any exclude pattern.

        Args:
            path: Relative file path.

        Returns:
            True if path should be excluded.
        """
        parts = path.split("/")

        for pattern in self.exclude_patterns:
            # Trailing slash means directory: match any path component
            if pattern.endswith("/"):
                dir_pattern = pattern.rstrip("/")
                for part in parts[:-1]:
                    if fnmatch.fnmatch(part, dir_pattern):
                        return True
            # Patterns containing "/" match as path prefixes
            elif "/" in pattern:
                if path.startswith(pattern + "/") or path == pattern:
                    return True
                if fnmatch.fnmatch(path, pattern) or fnmatch.fnmatch(path, pattern + "/*"):
                    return True
            else:
                for part in parts:
                    if fnmatch.fnmatch(part, pattern):
                        return True
                if fnmatch.fnmatch(path, pattern):
                    return True

        return False

    def get_files(self) -> list[str]:
        """List asset paths under the content root.

        Returns:
            Sorted relative POSIX paths of files that are not excluded.
        """
        if not self.content_root.exists():
            return []

        files = []
        for file_path in self.content_root.rglob("*"):
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(self.content_root).as_posix()
            if self._is_excluded(relative):
                continue
            files.append(relative)

        logger.debug(f"found {len(files)} assets under {self.content_root}")
        return sorted(files)
