# backend/src/folio/generation/__init__.py
"""Output generation pipeline module."""

from folio.generation.assets import generate_assets, is_style_asset
from folio.generation.book import create_state, generate_book, resolve_options
from folio.generation.cleanup import (
    CleanupPlan,
    CleanupResult,
    apply_cleanup,
    cleanup_output,
    plan_cleanup,
)
from folio.generation.hooks import (
    CONFIG_HOOK,
    FINISH_BEFORE_HOOK,
    FINISH_HOOK,
    HOOKS,
    INIT_HOOK,
    HookSpec,
    call_hook,
    call_page_hook,
    dispatch,
)
from folio.generation.orchestrator import (
    GenerationOrchestrator,
    GenerationPhase,
    GenerationProgress,
)
from folio.generation.page import render_page
from folio.generation.pages import (
    PageGenerator,
    ensure_directory,
    generate_pages,
    is_page_up_to_date,
    normalize_whitespace,
    resolve_ancestors,
)
from folio.generation.paths import derived_output_name, file_to_output
from folio.generation.prepare import prepare_assets, prepare_pages, prepare_plugins

__all__ = [
    # Entry point
    "create_state",
    "generate_book",
    "resolve_options",
    # Orchestrator
    "GenerationOrchestrator",
    "GenerationPhase",
    "GenerationProgress",
    # Hooks
    "CONFIG_HOOK",
    "FINISH_BEFORE_HOOK",
    "FINISH_HOOK",
    "HOOKS",
    "INIT_HOOK",
    "HookSpec",
    "call_hook",
    "call_page_hook",
    "dispatch",
    # Preparation
    "prepare_assets",
    "prepare_pages",
    "prepare_plugins",
    # Assets
    "generate_assets",
    "is_style_asset",
    # Pages
    "PageGenerator",
    "ensure_directory",
    "generate_pages",
    "is_page_up_to_date",
    "normalize_whitespace",
    "render_page",
    "resolve_ancestors",
    # Paths
    "derived_output_name",
    "file_to_output",
    # Cleanup
    "CleanupPlan",
    "CleanupResult",
    "apply_cleanup",
    "cleanup_output",
    "plan_cleanup",
]
