# backend/src/folio/generation/pages.py
"""Incremental page generation.

Pages are generated strictly in order. For each page the generator:

1. Checks whether the existing output can be trusted (change detection). If
   the copied source matches the current source, ignoring CR/LF/tab, and the
   derived output file exists, the page is skipped.
2. Ensures every ancestor of the page in the navigation hierarchy has been
   generated first, so index pages referenced for navigation are never
   missing when a deep page is generated on its own.
3. Creates missing output directories, copies the raw source next to the
   derived output, renders the page and hands it to the generator.

A completed set, owned by one PageGenerator, guarantees that no page is
generated twice within one pass.
"""

import logging
import shutil
from pathlib import Path
from typing import Awaitable, Callable

from folio.constants.generation import WHITESPACE_PATTERN
from folio.generation.page import render_page
from folio.generation.paths import file_to_output
from folio.models.book import Book
from folio.models.generator import Generator
from folio.models.output import Output
from folio.models.page import Page
from folio.models.summary import normalize_ref

logger = logging.getLogger(__name__)

# Type alias for the content renderer
PageRenderer = Callable[[Output, Page], Awaitable[Page]]


def normalize_whitespace(text: str) -> str:
    """Strip carriage returns, newlines and tabs for change detection."""
    return WHITESPACE_PATTERN.sub("", text)


def is_page_up_to_date(output: Output, file_path: str) -> bool:
    """Check whether a page's existing output can be trusted.

    Both the raw copy and the derived output must exist; a raw copy alone is
    never enough to skip regeneration.

    Args:
        output: Current Output.
        file_path: Page path relative to the content root.

    Returns:
        True if the page does not need to be regenerated.
    """
    destination = output.root / file_path
    if not destination.is_file():
        return False

    source = output.book.content_root / file_path
    source_text = source.read_text(encoding="utf-8")
    destination_text = destination.read_text(encoding="utf-8")
    if normalize_whitespace(source_text) != normalize_whitespace(destination_text):
        return False

    return (output.root / file_to_output(output, file_path)).exists()


def ensure_directory(directory: Path) -> None:
    """Create ``directory`` and any missing parents, parents first.

    Existing directories are left untouched, so calling this repeatedly is
    safe.
    """
    if directory.exists():
        return
    ensure_directory(directory.parent)
    directory.mkdir()


def resolve_ancestors(book: Book, file_path: str) -> list[str]:
    """List the ancestor page paths of ``file_path``, nearest first.

    The walk follows the summary's parent links up to the hierarchy root.
    Entries without a page are passed through, except the root itself, which
    stands for the book's index document (the readme).

    Args:
        book: Book whose summary defines the hierarchy.
        file_path: Page path relative to the content root.

    Returns:
        Ancestor paths, nearest first. Empty for the readme and for pages the
        summary does not reference.
    """
    readme = normalize_ref(book.readme)
    ref = normalize_ref(file_path)
    if ref == readme:
        return []

    summary = book.summary
    node = summary.get_by_path(ref)
    if node is None:
        return []

    ancestors: list[str] = []
    seen = {ref}
    parent = summary.get_parent(node)
    while parent is not None:
        if parent.path is not None:
            path = parent.path
        elif "." not in parent.level:
            # Hierarchy root: the top-level parent stands for the readme
            path = readme
        else:
            path = None

        if path is not None:
            if path in seen:
                break
            seen.add(path)
            ancestors.append(path)

        parent = summary.get_parent(parent)

    return ancestors


class PageGenerator:
    """Generates the pages of one Output, ancestors first.

    Attributes:
        generator: Active generator; its ``on_page`` callback must be set.
        renderer: Content renderer producing the page passed to ``on_page``.
        completed: Paths already generated or found up to date in this pass.
        generated: Paths actually (re)generated in this pass, in order.
    """

    def __init__(self, generator: Generator, renderer: PageRenderer = render_page):
        self.generator = generator
        self.renderer = renderer
        self.completed: set[str] = set()
        self.generated: list[str] = []

    async def run(self, output: Output) -> Output:
        """Generate every page of ``output`` in order.

        Args:
            output: Current Output.

        Returns:
            Output after the last page callback.
        """
        for page in output.pages:
            output = await self._generate_with_ancestors(output, page)

        skipped = len(self.completed) - len(self.generated)
        logger.info(f"generated {len(self.generated)} pages ({skipped} up to date)")
        return output

    async def _generate_with_ancestors(self, output: Output, page: Page) -> Output:
        """Generate the ancestors of ``page`` top-down, then ``page`` itself."""
        if page.path in self.completed:
            return output

        for ancestor_path in reversed(resolve_ancestors(output.book, page.path)):
            if ancestor_path in self.completed:
                continue
            ancestor = output.get_page(ancestor_path)
            if ancestor is None:
                if not (output.book.content_root / ancestor_path).is_file():
                    logger.debug(f'ancestor "{ancestor_path}" of "{page.path}" has no source')
                    continue
                ancestor = Page(path=ancestor_path)
            output = await self._generate_page(output, ancestor)

        return await self._generate_page(output, page)

    async def _generate_page(self, output: Output, page: Page) -> Output:
        """Generate a single page unless its output is up to date."""
        if page.path in self.completed:
            return output

        logger.debug(f'generate page "{page.path}"')

        if is_page_up_to_date(output, page.path):
            logger.debug(f'page "{page.path}" is up to date')
            self.completed.add(page.path)
            return output

        source = output.book.content_root / page.path
        destination = output.root / page.path
        ensure_directory(destination.parent)
        shutil.copyfile(source, destination)

        try:
            rendered = await self.renderer(output, page)
            output = await self.generator.on_page(output, rendered)
        except Exception:
            logger.error(f'error while generating page "{page.path}":')
            raise

        self.completed.add(page.path)
        self.generated.append(page.path)
        return output


async def generate_pages(
    generator: Generator,
    output: Output,
    renderer: PageRenderer = render_page,
) -> Output:
    """Generate all pages of ``output`` through the generator.

    Args:
        generator: Active generator.
        output: Current Output.
        renderer: Content renderer used for pages that need regeneration.

    Returns:
        Output after the last page callback, or ``output`` unchanged if the
        generator does not handle pages.
    """
    if generator.on_page is None:
        return output

    return await PageGenerator(generator, renderer).run(output)
