"""
Version comparison for Alpine (apk) package versions.

This package tokenizes version strings under the apk version grammar and
compares them token by token, producing an ordering mask that a package
manager can use to decide upgrades and downgrades.

Modules
-------
tokens : module
    Token kinds, their ranks, and the suffix word tables.
cursor : module
    VersionCursor, the left-to-right tokenizer over one version string.
compare : module
    Lock-step comparison of two versions and sorting helpers.
masks : module
    Ordering-mask bits and relational operator strings.

Public API
----------
Version : dataclass
    Immutable handle for a version string.
compare_versions : function
    Compare two versions, returning VERSION_LESS, VERSION_EQUAL or
    VERSION_GREATER (all three when exactly one side is None).
is_less_than : function
    Check if one version is strictly older than another.
sort_versions : function
    Sort version strings oldest first.
op_string : function
    Operator string ("<", "<=", "=", ...) for a mask.

Grammar
-------
    <number>{.<number>}[<letter>]{_<suffix>[<number>]}[-r<number>]

    Pre-release suffixes (older than no suffix):  alpha, beta, pre, rc
    Post-release suffixes (newer than no suffix): cvs, svn, git, hg, p

Examples
--------
Basic version comparison:

    >>> from apkver.versioning import compare_versions, op_string
    >>> op_string(compare_versions("1.2", "1.10"))
    '<'
    >>> op_string(compare_versions("1.0_rc1", "1.0"))
    '<'
    >>> op_string(compare_versions("1.0-r1", "1.0"))
    '>'

Sorting:

    >>> from apkver.versioning import sort_versions
    >>> sort_versions(["1.0", "1.0_alpha", "1.0_p1", "1.0-r1"])
    ['1.0_alpha', '1.0', '1.0-r1', '1.0_p1']

Notes
-----
- Malformed strings never raise; they compare through INVALID tokens.
- Digit runs longer than 18 characters are treated as INVALID by default.
"""

from .compare import (
    Version,
    compare_key,
    compare_versions,
    is_less_than,
    sort_versions,
)
from .cursor import MAX_DIGITS, VersionCursor
from .masks import (
    DEPMASK_ANY,
    DEPMASK_CHECKSUM,
    VERSION_EQUAL,
    VERSION_FUZZY,
    VERSION_GREATER,
    VERSION_LESS,
    VERSION_UNKNOWN,
    op_mask,
    op_string,
)
from .tokens import TokenType

__all__ = [
    "Version",
    "VersionCursor",
    "TokenType",
    "MAX_DIGITS",
    "compare_key",
    "compare_versions",
    "is_less_than",
    "sort_versions",
    "op_mask",
    "op_string",
    "VERSION_UNKNOWN",
    "VERSION_EQUAL",
    "VERSION_LESS",
    "VERSION_GREATER",
    "VERSION_FUZZY",
    "DEPMASK_ANY",
    "DEPMASK_CHECKSUM",
]
