"""File naming and output layout constants.

These settings describe how source documents map onto the output tree and
which parts of the output tree belong to tooling rather than to pages.
"""

# =============================================================================
# Source Documents
# =============================================================================
# Pages are markdown documents. The readme is the book's index document: it
# sits at the top of the navigation hierarchy and is rendered as the
# directory index of the output root.

MARKDOWN_SUFFIX = ".md"
README_NAME = "README.md"
INDEX_NAME = "index.md"

# =============================================================================
# Derived Output
# =============================================================================
# Every copied page has a derived artifact produced by the generator. Its
# name is the page path with the markdown suffix swapped for this extension.

DEFAULT_OUTPUT_EXTENSION = ".html"

# =============================================================================
# Reserved Output Directories
# =============================================================================
# Top-level output directories used for internal tooling, source caching and
# styling. Orphan cleanup never descends into them.

RESERVED_OUTPUT_DIRS = ["gitbook", "src", "style"]

# =============================================================================
# Asset Discovery
# =============================================================================
# Names skipped when listing assets under the content root. Dotfiles are
# always skipped. BOOK_IGNORE_FILE holds extra fnmatch patterns, one per line.

DEFAULT_ASSET_EXCLUDES = [
    ".*",
    "_book",
    "node_modules",
    "__pycache__",
]
BOOK_IGNORE_FILE = ".bookignore"
