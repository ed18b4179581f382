"""Cleanup of stale output before a build.

Pages removed from the summary leave their copied source and derived output
behind. Cleanup runs in two phases so the decision can be inspected and
tested without touching the disk:

- ``plan_cleanup`` walks the output tree and lists what to delete
- ``apply_cleanup`` deletes it

A stale markdown file directly in an output root is deleted together with
its derived output. A stale markdown file deeper down marks its whole
directory for deletion.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from folio.config import Config, load_settings
from folio.constants.files import MARKDOWN_SUFFIX
from folio.generation.paths import derived_output_name
from folio.models.book import Book
from folio.models.output import Output

logger = logging.getLogger(__name__)


@dataclass
class CleanupResult:
    """Summary of cleanup operations performed."""

    files_deleted: int = field(default=0)
    directories_deleted: int = field(default=0)


@dataclass
class CleanupPlan:
    """Paths scheduled for deletion.

    A directory scheduled for deletion absorbs any file or directory already
    scheduled inside it, so applying the plan never touches a removed path.
    """

    files: list[Path] = field(default_factory=list)
    directories: list[Path] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.directories

    def add_file(self, path: Path) -> None:
        if path not in self.files and not self._covered(path):
            self.files.append(path)

    def add_directory(self, path: Path) -> None:
        if path in self.directories or self._covered(path):
            return
        self.files = [f for f in self.files if not f.is_relative_to(path)]
        self.directories = [d for d in self.directories if not d.is_relative_to(path)]
        self.directories.append(path)

    def _covered(self, path: Path) -> bool:
        return any(path.is_relative_to(d) for d in self.directories)


def _is_markdown(path: Path) -> bool:
    return path.suffix.lower() == MARKDOWN_SUFFIX


def _plan_directory(
    directory: Path,
    root: Path,
    book: Book,
    reserved_dirs: frozenset[str],
    extension: str,
    directory_index: bool,
    plan: CleanupPlan,
) -> None:
    """Schedule stale output under ``directory``, relative to one book's ``root``."""
    if directory.relative_to(root).as_posix() in reserved_dirs:
        return

    for item in sorted(directory.iterdir()):
        if item.is_dir():
            lang_book = book.get_language_book(item.name) if directory == root else None
            if lang_book is not None:
                # Each language tree is checked against its own summary
                _plan_directory(
                    item, item, lang_book, reserved_dirs, extension, directory_index, plan
                )
            else:
                _plan_directory(
                    item, root, book, reserved_dirs, extension, directory_index, plan
                )
            continue

        if not _is_markdown(item):
            continue

        relative = item.relative_to(root).as_posix()
        if book.is_referenced(relative):
            continue

        if directory == root:
            plan.add_file(item)
            derived = root / derived_output_name(relative, extension, directory_index)
            if derived != item and derived.exists():
                plan.add_file(derived)
        else:
            plan.add_directory(directory)
            # The directory is going away; nothing left to inspect in it
            return


def plan_cleanup(
    root: Path,
    book: Book,
    reserved_dirs: Iterable[str],
    extension: str,
    directory_index: bool = True,
) -> CleanupPlan:
    """Compute the stale output under an output root.

    Args:
        root: Output root directory.
        book: Book whose summary defines which pages still exist.
        reserved_dirs: Top-level directories never inspected.
        extension: Extension of derived output files.
        directory_index: Whether README.md maps to the directory index.

    Returns:
        CleanupPlan listing files and directories to delete.
    """
    plan = CleanupPlan()
    if not root.exists():
        return plan

    _plan_directory(
        root, root, book, frozenset(reserved_dirs), extension, directory_index, plan
    )
    return plan


def apply_cleanup(plan: CleanupPlan) -> CleanupResult:
    """Delete everything in ``plan``.

    Filesystem errors propagate; cleanup is re-run on the next build.

    Returns:
        CleanupResult with counts of deleted items.
    """
    result = CleanupResult()

    for path in plan.files:
        logger.info(f"cleanup file: {path}")
        path.unlink()
        result.files_deleted += 1

    for path in plan.directories:
        logger.info(f"cleanup folder: {path}")
        shutil.rmtree(path)
        result.directories_deleted += 1

    return result


def cleanup_output(output: Output, settings: Config | None = None) -> CleanupResult:
    """Remove stale output for pages that left the summary.

    Args:
        output: Output whose root is cleaned.
        settings: Generation settings. Defaults to load_settings().

    Returns:
        CleanupResult with counts of deleted items.
    """
    settings = settings or load_settings()
    plan = plan_cleanup(
        output.root,
        output.book,
        reserved_dirs=settings.reserved_dirs,
        extension=output.options.extension,
        directory_index=output.options.directory_index,
    )
    result = apply_cleanup(plan)
    if result.files_deleted or result.directories_deleted:
        logger.info(
            f"Deleted {result.files_deleted} stale files and "
            f"{result.directories_deleted} stale folders"
        )
    return result
