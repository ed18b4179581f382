"""Default content renderer for a single page.

Markdown conversion belongs to the generator; this renderer only loads the
source, separates its frontmatter and lets plugins rewrite the content
through the ``page:before`` and ``page`` hooks.
"""

import logging

from folio.constants.generation import HOOK_PAGE, HOOK_PAGE_BEFORE
from folio.generation.frontmatter import parse_frontmatter
from folio.generation.hooks import call_page_hook
from folio.models.output import Output
from folio.models.page import Page

logger = logging.getLogger(__name__)


async def render_page(output: Output, page: Page) -> Page:
    """Render ``page`` for the generator.

    Args:
        output: Current Output.
        page: Page to render; only its path is used.

    Returns:
        Page with content and frontmatter attributes filled in.

    Raises:
        OSError: If the source file cannot be read.
    """
    source_path = output.book.content_root / page.path
    raw = source_path.read_text(encoding="utf-8")

    attributes, body = parse_frontmatter(raw)
    rendered = page.with_content(body, attributes)

    rendered = await call_page_hook(HOOK_PAGE_BEFORE, output, rendered)
    rendered = await call_page_hook(HOOK_PAGE, output, rendered)
    logger.debug(f'rendered page "{page.path}" ({len(rendered.content)} chars)')
    return rendered
