"""Mapping from source page paths to the generator's derived output paths."""

import re

from folio.constants.files import INDEX_NAME
from folio.models.output import Output

_README_PATTERN = re.compile(r"README\.md$", re.IGNORECASE)
_MARKDOWN_PATTERN = re.compile(r"\.md$", re.IGNORECASE)


def derived_output_name(file_path: str, extension: str, directory_index: bool = True) -> str:
    """Compute the derived output name of a source page.

    ``README.md`` becomes the directory index (``index.html``) when
    ``directory_index`` is set; any other ``.md`` path keeps its stem.

    Args:
        file_path: Source path relative to the content root.
        extension: Extension of the derived file, including the dot.
        directory_index: Whether readmes map to the directory index.

    Returns:
        Derived output path relative to the output root.
    """
    name = file_path.replace("\\", "/")
    if directory_index:
        name = _README_PATTERN.sub(INDEX_NAME, name)
    return _MARKDOWN_PATTERN.sub(extension, name)


def file_to_output(output: Output, file_path: str) -> str:
    """Derived output path of ``file_path`` under the Output's options."""
    return derived_output_name(
        file_path,
        extension=output.options.extension,
        directory_index=output.options.directory_index,
    )
