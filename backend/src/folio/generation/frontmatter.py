"""Parsing of YAML frontmatter at the top of source pages.

Frontmatter is metadata delimited by ``---`` lines before the page body:

    ---
    title: Getting started
    ---

    # Getting started

It becomes the rendered page's ``attributes``.
"""

import logging
import re
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Opening delimiter, lazily matched block, closing delimiter on its own line,
# then one optional blank line separating the body.
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n(?P<block>.*?)^---[ \t]*(?:\n|\Z)\n?",
    re.DOTALL | re.MULTILINE,
)


def parse_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split page content into frontmatter attributes and body.

    Args:
        content: Raw page source.

    Returns:
        ``(attributes, body)``. Without a well-formed mapping block the
        attributes are empty and the content is returned untouched.
    """
    text = content.replace("\r\n", "\n")
    match = _FRONTMATTER_PATTERN.match(text)
    if match is None:
        return {}, content

    try:
        attributes = yaml.safe_load(match.group("block"))
    except yaml.YAMLError as e:
        logger.warning(f"ignoring invalid frontmatter: {e}")
        return {}, content

    if attributes is None:
        attributes = {}
    if not isinstance(attributes, dict):
        logger.warning("ignoring frontmatter that is not a mapping")
        return {}, content

    return attributes, text[match.end():]
