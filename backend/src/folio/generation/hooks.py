# backend/src/folio/generation/hooks.py
"""Hook dispatch for the output pipeline.

A hook is a named extension point. Dispatching one follows three steps:

1. ``extract`` pulls the part of the Output relevant to the hook.
2. Every loaded plugin handling the hook transforms that value in turn.
3. ``merge`` folds the final value back into a new Output.

A hook nobody handles is an identity pass-through.
"""

import inspect
import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, TypeVar, Union

from folio.constants.generation import (
    HOOK_CONFIG,
    HOOK_FINISH,
    HOOK_FINISH_BEFORE,
    HOOK_INIT,
)
from folio.models.output import Output
from folio.models.page import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExtractFn = Callable[[Output], Any]
MergeFn = Callable[[Output, Any], Output]


async def maybe_await(value: Union[T, Awaitable[T]]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


async def invoke_hook(name: str, value: Any, output: Output) -> Any:
    """Pass ``value`` through every plugin handler registered for ``name``.

    Args:
        name: Hook name.
        value: Initial payload.
        output: Output handed to handlers for context.

    Returns:
        The payload after the last handler, or ``value`` when no plugin
        handles the hook.
    """
    result = value
    for plugin in output.plugins:
        handler = plugin.get_hook(name)
        if handler is None:
            continue
        logger.debug(f'call hook "{name}" of plugin "{plugin.name}"')
        returned = await maybe_await(handler(result, output))
        if returned is not None:
            result = returned
    return result


async def call_hook(name: str, extract: ExtractFn, merge: MergeFn, output: Output) -> Output:
    """Dispatch hook ``name`` against ``output``.

    Handler errors propagate unchanged.

    Args:
        name: Hook name.
        extract: Builds the hook payload from the Output.
        merge: Folds the handlers' result back into a new Output.
        output: Current Output.

    Returns:
        Output produced by ``merge``.
    """
    value = extract(output)
    result = await invoke_hook(name, value, output)
    return merge(output, result)


@dataclass(frozen=True)
class HookSpec:
    """A pipeline extension point and how its payload maps onto the Output."""

    name: str
    extract: ExtractFn
    merge: MergeFn


async def dispatch(spec: HookSpec, output: Output) -> Output:
    """Dispatch a registered hook spec."""
    return await call_hook(spec.name, spec.extract, spec.merge, output)


def _no_payload(output: Output) -> dict[str, Any]:
    return {}


def _keep_output(output: Output, result: Any) -> Output:
    return output


def _extract_config(output: Output) -> dict[str, Any]:
    return output.book.config.get_values()


def _merge_config(output: Output, result: dict[str, Any]) -> Output:
    config = output.book.config.update_values(result)
    return output.evolve(book=replace(output.book, config=config))


CONFIG_HOOK = HookSpec(HOOK_CONFIG, _extract_config, _merge_config)
INIT_HOOK = HookSpec(HOOK_INIT, _no_payload, _keep_output)
FINISH_BEFORE_HOOK = HookSpec(HOOK_FINISH_BEFORE, _no_payload, _keep_output)
FINISH_HOOK = HookSpec(HOOK_FINISH, _no_payload, _keep_output)

HOOKS: dict[str, HookSpec] = {
    spec.name: spec for spec in (CONFIG_HOOK, INIT_HOOK, FINISH_BEFORE_HOOK, FINISH_HOOK)
}


async def call_page_hook(name: str, output: Output, page: Page) -> Page:
    """Dispatch a page-level hook.

    Handlers receive ``{"path", "content", "attributes"}`` and may return a
    modified copy; only ``content`` and ``attributes`` are read back.
    """
    payload = {
        "path": page.path,
        "content": page.content,
        "attributes": dict(page.attributes),
    }
    result = await invoke_hook(name, payload, output)
    return page.with_content(
        result.get("content", page.content),
        result.get("attributes", page.attributes),
    )
