"""Generator capability bundle and its options.

A generator knows how to turn pages and assets into a target format. Every
callback is optional: a callback left as ``None`` means the pipeline skips
that step for this generator.

Example:
    class JsonGenerator(Generator):
        name = "json"

        async def on_page(self, output, page):
            ...
            return output
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Awaitable, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from folio.constants.files import DEFAULT_OUTPUT_EXTENSION

if TYPE_CHECKING:
    from folio.models.output import Output
    from folio.models.page import Page


class GeneratorOptions(BaseModel):
    """Options shared by every generator.

    Generators needing more options subclass this model and point
    ``Generator.options_model`` at the subclass. Unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow")

    root: Path = Field(..., description="Output root directory")
    directory_index: bool = Field(
        True,
        description="Render README.md as index output of its directory",
    )
    extension: str = Field(
        DEFAULT_OUTPUT_EXTENSION,
        description="Extension of the derived output file of each page",
    )


AssetCallback = Callable[["Output", str], Awaitable["Output"]]
PageCallback = Callable[["Output", "Page"], Awaitable["Output"]]
OutputCallback = Callable[["Output"], Awaitable["Output"]]


class Generator:
    """Base class for output generators.

    Subclasses set ``name`` and define any of ``on_asset``, ``on_page``,
    ``on_init`` and ``on_finish`` as ``async def`` methods. Each returns the
    Output the next pipeline stage should see.
    """

    name: ClassVar[str] = "base"
    options_model: ClassVar[type[GeneratorOptions]] = GeneratorOptions
    state_factory: ClassVar[Optional[Callable[[dict[str, Any]], dict[str, Any]]]] = None

    on_asset: Optional[AssetCallback] = None
    on_page: Optional[PageCallback] = None
    on_init: Optional[OutputCallback] = None
    on_finish: Optional[OutputCallback] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
