"""Generation pipeline constants.

These settings control how pages and assets flow through the output
pipeline and which extension points plugins can hook into.
"""

import re

# =============================================================================
# Assets
# =============================================================================
# Only assets under this leading path segment reach the generator's asset
# callback. Matching is case-insensitive.

STYLE_ASSET_DIR = "style"

# =============================================================================
# Change Detection
# =============================================================================
# Characters stripped from both source and destination text before comparing
# them. A page that differs only in these characters is considered unchanged.

WHITESPACE_PATTERN = re.compile(r"[\r\n\t]")

# =============================================================================
# Hooks
# =============================================================================
# Names of the extension points invoked by the output pipeline, in the order
# they fire during one build.

HOOK_CONFIG = "config"
HOOK_INIT = "init"
HOOK_PAGE_BEFORE = "page:before"
HOOK_PAGE = "page"
HOOK_FINISH_BEFORE = "finish:before"
HOOK_FINISH = "finish"
