"""
apkver - Alpine package version comparison

A Python library and CLI for ordering package version strings under the
Alpine (apk) version grammar, as used by a package manager to decide
upgrades, downgrades and equality.

apkver provides:
  - A cursor-based tokenizer for apk version strings
  - Lock-step three-way comparison with apk's tie-break rules
    (leading zeros, pre/post-release suffixes, revisions)
  - Ordering-mask constants and relational operator strings
  - A small CLI for comparing and sorting versions

Quick Start
-----------
Compare two versions:

    $ apkver compare 1.2.3_rc1 1.2.3
    <

Sort versions:

    $ apkver sort 1.10 1.2 1.2_alpha

For full CLI documentation:

    $ apkver --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
config : package
    YAML settings loading.
versioning : package
    Tokenizer, comparator and ordering masks.
exceptions : module
    Exception hierarchy.
logging : module
    Prefix-style logger used by library code.

Public API
----------
    from apkver import Version, compare_versions, is_less_than
    from apkver.versioning import sort_versions, op_string
    from apkver.config import load_settings

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__description__ = "Alpine package version comparison"

# Re-export commonly used functions for convenience
from apkver.versioning import (
    VERSION_EQUAL,
    VERSION_GREATER,
    VERSION_LESS,
    Version,
    compare_versions,
    is_less_than,
    op_string,
    sort_versions,
)

__all__ = [
    "__version__",
    "__description__",
    "Version",
    "compare_versions",
    "is_less_than",
    "sort_versions",
    "op_string",
    "VERSION_EQUAL",
    "VERSION_GREATER",
    "VERSION_LESS",
]
