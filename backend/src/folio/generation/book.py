"""Entry point generating a whole book with a generator.

The overall process is:

1. Resolve the generator options and its initial state
2. Create the output root and remove stale output (cleanup)
3. Run the generation orchestrator
4. Log the total duration
"""

import logging
import time
from typing import Any

from pydantic import ValidationError

from folio.config import Config, ConfigError, load_settings
from folio.generation.cleanup import cleanup_output
from folio.generation.orchestrator import GenerationOrchestrator, ProgressCallback
from folio.generation.page import render_page
from folio.generation.pages import PageRenderer
from folio.models.book import Book
from folio.models.generator import Generator, GeneratorOptions
from folio.models.output import Output
from folio.plugins.plugin import Plugin
from folio.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


def resolve_options(
    generator: Generator,
    options: dict[str, Any] | None,
    settings: Config,
) -> GeneratorOptions:
    """Validate caller options against the generator's options model.

    ``extension`` and ``directory_index`` default to the configured output
    settings when the caller leaves them out.

    Args:
        generator: Active generator.
        options: Raw options; must provide ``root``.
        settings: Generation settings.

    Returns:
        Validated options.

    Raises:
        ConfigError: If the options do not validate.
    """
    raw = {
        "extension": settings.output.extension,
        "directory_index": settings.output.directory_index,
        **(options or {}),
    }
    try:
        return generator.options_model.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f'Invalid options for generator "{generator.name}": {e}') from e


def create_state(generator: Generator) -> dict[str, Any]:
    """Build the generator's initial state, or an empty map if it declares none."""
    # Looked up on the class so a plain function is not bound as a method
    factory = type(generator).state_factory
    if factory is None:
        return {}
    return factory({})


async def generate_book(
    generator: Generator,
    book: Book,
    options: dict[str, Any] | None = None,
    *,
    plugins: list[Plugin] | None = None,
    renderer: PageRenderer = render_page,
    settings: Config | None = None,
    progress_callback: ProgressCallback | None = None,
) -> Output:
    """Generate ``book`` into the output root with ``generator``.

    Args:
        generator: Generator producing the output format.
        book: Book to generate.
        options: Raw generator options; ``root`` is the output directory.
        plugins: Plugins available to the book.
        renderer: Content renderer for pages.
        settings: Generation settings. Defaults to load_settings().
        progress_callback: Optional async callback for progress updates.

    Returns:
        Output after the "finish" hook.

    Raises:
        ConfigError: If the options do not validate.
    """
    settings = settings or load_settings()
    resolved = resolve_options(generator, options, settings)
    start = time.monotonic()

    output = Output(
        book=book,
        options=resolved,
        state=create_state(generator),
        generator=generator.name,
    )

    output.root.mkdir(parents=True, exist_ok=True)
    cleanup_output(output, settings)

    orchestrator = GenerationOrchestrator(
        generator,
        registry=PluginRegistry(plugins),
        renderer=renderer,
        settings=settings,
        progress_callback=progress_callback,
    )
    output = await orchestrator.process(output)

    duration = time.monotonic() - start
    logger.info(f"generation finished with success in {duration:.1f}s !")
    return output
