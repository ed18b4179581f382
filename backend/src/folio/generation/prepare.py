"""Preparation stages run before any hook or generator callback.

Each stage takes an Output and returns a new one:

- ``prepare_plugins`` resolves the plugins the book asks for
- ``prepare_pages`` lists the pages to generate
- ``prepare_assets`` lists the asset files to hand to the generator
"""

import logging
from pathlib import Path

from folio.config import Config, load_settings
from folio.generation.file_filter import AssetFilter
from folio.models.output import Output
from folio.models.page import Page
from folio.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


def prepare_plugins(output: Output, registry: PluginRegistry) -> Output:
    """Load the plugins listed in the book config.

    Language variants are not resolved again; they inherit the plugins of
    their multilingual root.

    Args:
        output: Current Output.
        registry: Available plugins.

    Returns:
        Output carrying the resolved plugins.

    Raises:
        PluginNotFoundError: If the book requests an unregistered plugin.
    """
    if output.book.language is not None:
        # Language variants keep the plugins loaded for the multilingual root
        return output

    names = output.book.config.get("plugins", []) or []
    if isinstance(names, str):
        names = [name.strip() for name in names.split(",")]

    plugins = registry.resolve(list(names))
    logger.debug(f"loaded {len(plugins)} plugins: {', '.join(p.name for p in plugins) or '-'}")
    return output.evolve(plugins=tuple(plugins))


def prepare_pages(output: Output) -> Output:
    """List the pages of the book, in generation order.

    The readme comes first, followed by the summary articles. Pages whose
    source file is missing are skipped. A multilingual root has no pages of
    its own; each language lists its pages in its own build.

    Args:
        output: Current Output.

    Returns:
        Output carrying the page list.
    """
    book = output.book
    if book.is_multilingual():
        return output.evolve(pages=())

    pages = []
    for path in book.page_paths():
        if not (book.content_root / path).is_file():
            logger.warning(f'page "{path}" is referenced but does not exist, skipping')
            continue
        pages.append(Page(path=path))

    logger.info(f"found {len(pages)} pages")
    return output.evolve(pages=tuple(pages))


def _relative_prefix(path: Path, root: Path) -> str | None:
    """Relative POSIX path of ``path`` under ``root``, or None if outside it."""
    try:
        relative = path.resolve().relative_to(root.resolve())
    except ValueError:
        return None
    prefix = relative.as_posix()
    return None if prefix == "." else prefix


def prepare_assets(output: Output, settings: Config | None = None) -> Output:
    """List the asset files of the book.

    Assets are all files under the content root except pages, ignored names,
    the output root itself and, for a multilingual root, language directories.

    Args:
        output: Current Output.
        settings: Generation settings. Defaults to load_settings().

    Returns:
        Output carrying sorted asset paths.
    """
    settings = settings or load_settings()
    book = output.book
    content_root = book.content_root

    skipped_prefixes = []
    output_prefix = _relative_prefix(output.root, content_root)
    if output_prefix:
        skipped_prefixes.append(output_prefix)
    for lang_book in book.get_books():
        if lang_book.language:
            skipped_prefixes.append(lang_book.language)

    page_paths = {page.path for page in output.pages}
    asset_filter = AssetFilter(content_root, exclude_patterns=settings.assets.ignore)

    assets = []
    for path in asset_filter.get_files():
        if path in page_paths:
            continue
        if any(path == prefix or path.startswith(prefix + "/") for prefix in skipped_prefixes):
            continue
        assets.append(path)

    logger.debug(f"found {len(assets)} assets")
    return output.evolve(assets=tuple(assets))
