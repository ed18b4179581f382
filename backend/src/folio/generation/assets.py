"""Asset generation: hand style assets to the generator, one at a time."""

import logging

from folio.config import Config, load_settings
from folio.models.generator import Generator
from folio.models.output import Output

logger = logging.getLogger(__name__)


def is_style_asset(asset_path: str, style_dir: str | None = None) -> bool:
    """Check whether an asset lives under the style directory.

    Args:
        asset_path: Asset path relative to the content root.
        style_dir: Leading directory name; defaults to the configured one.

    Returns:
        True if the first path segment equals ``style_dir``, ignoring case.
    """
    if style_dir is None:
        style_dir = load_settings().assets.style_dir
    first_segment = asset_path.replace("\\", "/").lstrip("/").split("/", 1)[0]
    return first_segment.lower() == style_dir.lower()


async def generate_assets(
    generator: Generator,
    output: Output,
    settings: Config | None = None,
) -> Output:
    """Copy style assets through the generator's asset callback.

    Assets are processed strictly in order; each callback's Output feeds the
    next one. A failing callback aborts the remaining assets.

    Args:
        generator: Active generator.
        output: Current Output.
        settings: Generation settings. Defaults to load_settings().

    Returns:
        Output after the last asset callback.
    """
    if generator.on_asset is None:
        return output

    style_dir = (settings or load_settings()).assets.style_dir

    for asset_path in output.assets:
        if not is_style_asset(asset_path, style_dir):
            continue

        logger.debug(f'copy asset "{asset_path}"')
        try:
            output = await generator.on_asset(output, asset_path)
        except Exception:
            logger.error(f'error while copying asset "{asset_path}"')
            raise

    return output
