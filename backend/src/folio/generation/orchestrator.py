# backend/src/folio/generation/orchestrator.py
"""Generation orchestrator for the output pipeline.

This module provides the GenerationOrchestrator class that runs one book
variant through every stage of output generation, strictly in sequence:

1. Prepare - Load plugins, list pages and list assets
2. Config - Let plugins rewrite the book configuration ("config" hook)
3. Init - "init" hook, then the generator's on_init callback
4. Assets - Hand style assets to the generator
5. Pages - Incrementally generate pages, ancestors first
6. Languages - Recurse into each language of a multilingual book
7. Finish - "finish:before" hook, on_finish callback, "finish" hook
"""

import copy
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Coroutine

from folio.config import Config, load_settings
from folio.constants.generation import (
    HOOK_CONFIG,
    HOOK_FINISH,
    HOOK_FINISH_BEFORE,
    HOOK_INIT,
)
from folio.generation.assets import generate_assets
from folio.generation.hooks import HOOKS, HookSpec, dispatch
from folio.generation.page import render_page
from folio.generation.pages import PageRenderer, generate_pages
from folio.generation.prepare import prepare_assets, prepare_pages, prepare_plugins
from folio.models.generator import Generator
from folio.models.output import Output
from folio.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


class GenerationPhase(Enum):
    """Phases of output generation."""

    PREPARE = "prepare"
    CONFIG = "config"
    INIT = "init"
    ASSETS = "assets"
    PAGES = "pages"
    LANGUAGES = "languages"
    FINISH = "finish"


@dataclass
class GenerationProgress:
    """Progress update during generation.

    Attributes:
        phase: Phase about to run.
        language: Language of the book variant, None for a monolingual book
            or a multilingual root.
        message: Human-readable progress message.
        timestamp: Time of progress update.
    """

    phase: GenerationPhase
    language: str | None = None
    message: str = ""
    timestamp: datetime = field(default_factory=datetime.now)


# Type alias for progress callback
ProgressCallback = Callable[[GenerationProgress], Coroutine[Any, Any, None]]


class GenerationOrchestrator:
    """Orchestrates output generation for a book and its languages.

    Every stage consumes the Output returned by the previous one; no stage
    starts before the previous one has completed.

    Attributes:
        generator: Active generator.
        registry: Plugins available to the book.
        renderer: Content renderer for pages.
        settings: Generation settings.
        progress_callback: Optional async callback receiving phase updates.
    """

    def __init__(
        self,
        generator: Generator,
        registry: PluginRegistry | None = None,
        renderer: PageRenderer = render_page,
        settings: Config | None = None,
        progress_callback: ProgressCallback | None = None,
        hooks: dict[str, HookSpec] | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            generator: Active generator.
            registry: Plugins available to the book. Defaults to an empty registry.
            renderer: Content renderer for pages.
            settings: Generation settings. Defaults to load_settings().
            progress_callback: Optional async callback for progress updates.
            hooks: Pipeline hook specs keyed by hook name. Defaults to HOOKS;
                given specs replace the built-in ones of the same name.
        """
        self.generator = generator
        self.registry = registry or PluginRegistry()
        self.renderer = renderer
        self.settings = settings or load_settings()
        self.progress_callback = progress_callback
        self.hooks = {**HOOKS, **(hooks or {})}

    async def process(self, output: Output) -> Output:
        """Run the complete pipeline for one book variant.

        Args:
            output: Initial Output of the variant.

        Returns:
            Output after the "finish" hook.
        """
        language = output.book.language

        await self._emit_progress(GenerationPhase.PREPARE, language, "Preparing book...")
        output = prepare_plugins(output, self.registry)
        output = prepare_pages(output)
        output = prepare_assets(output, self.settings)

        await self._emit_progress(GenerationPhase.CONFIG, language, 'Calling hook "config"')
        output = await self._call_hook(HOOK_CONFIG, output)

        await self._emit_progress(GenerationPhase.INIT, language, "Initializing generator...")
        output = await self._call_hook(HOOK_INIT, output)
        if self.generator.on_init is not None:
            output = await self.generator.on_init(output)

        await self._emit_progress(
            GenerationPhase.ASSETS, language, f"Copying {len(output.assets)} assets..."
        )
        output = await generate_assets(self.generator, output, self.settings)

        await self._emit_progress(
            GenerationPhase.PAGES, language, f"Generating {len(output.pages)} pages..."
        )
        output = await generate_pages(self.generator, output, self.renderer)

        if output.book.is_multilingual():
            await self._emit_progress(
                GenerationPhase.LANGUAGES, language, "Generating languages..."
            )
            await self._run_languages(output)

        await self._emit_progress(GenerationPhase.FINISH, language, "Finishing generation...")
        output = await self._call_hook(HOOK_FINISH_BEFORE, output)
        if self.generator.on_finish is not None:
            output = await self.generator.on_finish(output)
        output = await self._call_hook(HOOK_FINISH, output)

        return output

    async def _run_languages(self, output: Output) -> None:
        """Generate each language of a multilingual book, one after the other.

        Each language inherits the plugins, options and a copy of the state
        of ``output``, with its root moved to ``<root>/<language>``.

        Args:
            output: Output of the multilingual root, after page generation.

        Raises:
            ValueError: If a language book has no language code.
        """
        for lang_book in output.book.get_books():
            if not lang_book.language:
                raise ValueError(f"language book at {lang_book.root} has no language code")
            lang_options = output.options.model_copy(
                update={"root": output.root / lang_book.language}
            )
            lang_output = Output(
                book=lang_book,
                options=lang_options,
                state=copy.deepcopy(output.state),
                generator=output.generator,
                plugins=output.plugins,
            )

            logger.info(f'generating language "{lang_book.language}"')
            lang_output.root.mkdir(parents=True, exist_ok=True)
            await self.process(lang_output)

    async def _call_hook(self, name: str, output: Output) -> Output:
        """Dispatch the pipeline hook registered under ``name``."""
        return await dispatch(self.hooks[name], output)

    async def _emit_progress(
        self,
        phase: GenerationPhase,
        language: str | None,
        message: str,
    ) -> None:
        """Emit a progress update if a callback is provided."""
        if self.progress_callback:
            await self.progress_callback(
                GenerationProgress(phase=phase, language=language, message=message)
            )
