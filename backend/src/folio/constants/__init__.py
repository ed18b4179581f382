"""Configuration constants.

Re-exports all constants for convenient importing:
    from folio.constants import README_NAME, STYLE_ASSET_DIR
"""

from folio.constants.files import *  # noqa: F403
from folio.constants.generation import *  # noqa: F403
