# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Three-way comparison of apk version strings.

Two cursors are walked in lock step, one token at a time, until the token
kinds or values differ. A value difference decides directly. A structural
difference (one side ran out, or the sides moved to different kinds of
token) is decided by token rank, with one exception: a pending pre-release
suffix on one side makes that side older ("1.0_rc1" < "1.0").

This module is pure: no I/O, no caching, no state between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterable, Union

from apkver.logging import get_global_logger
from apkver.versioning.cursor import MAX_DIGITS, VersionCursor
from apkver.versioning.masks import (
    VERSION_EQUAL,
    VERSION_GREATER,
    VERSION_LESS,
    op_string,
)
from apkver.versioning.tokens import TokenType

# ----------------------------
# Version handle
# ----------------------------


@dataclass(frozen=True)
class Version:
    """Immutable handle for a version string.

    No validation is done here; malformed strings are accepted and
    compare through INVALID tokens.

    Attributes:
        text: Raw version string (e.g., "1.2.3_rc1-r0").

    """

    text: str

    def __str__(self) -> str:
        return self.text

    def cursor(self, *, max_digits: int = MAX_DIGITS) -> VersionCursor:
        """Return a fresh cursor positioned at the start of the string."""
        return VersionCursor(self.text, max_digits=max_digits)


VersionLike = Union[Version, str]


def _text(version: VersionLike) -> str:
    return version.text if isinstance(version, Version) else version


# ----------------------------
# Comparison core
# ----------------------------


def compare_versions(
    a: VersionLike | None,
    b: VersionLike | None,
    *,
    max_digits: int = MAX_DIGITS,
) -> int:
    """Compare two versions and return an ordering mask.

    Args:
        a: Left-hand version, or None if absent.
        b: Right-hand version, or None if absent.
        max_digits: Longest digit run accepted by the tokenizer.

    Returns:
        VERSION_LESS, VERSION_EQUAL or VERSION_GREATER describing `a`
        relative to `b`. If exactly one side is None the result is
        VERSION_LESS | VERSION_EQUAL | VERSION_GREATER, meaning no strict
        relation applies; two absent versions are VERSION_EQUAL.

    Example:
        ```python
        compare_versions("1.2", "1.10")  # VERSION_LESS
        compare_versions("1.0_alpha", "1.0")  # VERSION_LESS
        compare_versions("1.0_git", "1.0")  # VERSION_GREATER
        ```

    """
    if a is None or b is None:
        if a is None and b is None:
            return VERSION_EQUAL
        return VERSION_EQUAL | VERSION_GREATER | VERSION_LESS

    result = _compare_cursors(
        VersionCursor(_text(a), max_digits=max_digits),
        VersionCursor(_text(b), max_digits=max_digits),
    )
    get_global_logger().debug(
        "VERSION", f"{_text(a)!r} {op_string(result)} {_text(b)!r}"
    )
    return result


def _compare_cursors(a: VersionCursor, b: VersionCursor) -> int:
    a_type = b_type = TokenType.DIGIT
    a_value = b_value = 0

    while a_type is b_type and not a_type.is_terminal and a_value == b_value:
        a_type, a_value = a.extract(a_type)
        b_type, b_value = b.extract(b_type)

    if a_value < b_value:
        return VERSION_LESS
    if a_value > b_value:
        return VERSION_GREATER

    # Both reached END, or both reached INVALID
    if a_type is b_type:
        return VERSION_EQUAL

    # Leading components are equal. The side with more left is newer,
    # unless what it has left is a pre-release suffix.
    if a_type is TokenType.SUFFIX and a.extract(a_type)[1] < 0:
        return VERSION_LESS
    if b_type is TokenType.SUFFIX and b.extract(b_type)[1] < 0:
        return VERSION_GREATER
    if a_type.rank > b_type.rank:
        return VERSION_LESS
    if b_type.rank > a_type.rank:
        return VERSION_GREATER
    return VERSION_EQUAL


def is_less_than(a: VersionLike | None, b: VersionLike | None) -> bool:
    """Return True iff `a` is strictly older than `b`."""
    return compare_versions(a, b) == VERSION_LESS


# ----------------------------
# Sorting helpers
# ----------------------------


def _cmp(a: VersionLike, b: VersionLike, max_digits: int = MAX_DIGITS) -> int:
    result = compare_versions(a, b, max_digits=max_digits)
    if result == VERSION_LESS:
        return -1
    if result == VERSION_GREATER:
        return 1
    return 0


compare_key: Callable[[VersionLike], object] = cmp_to_key(_cmp)


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    reverse: bool = False,
    max_digits: int = MAX_DIGITS,
) -> list[VersionLike]:
    """Return versions ordered oldest first (newest first if reverse).

    The sort is stable, so versions that compare equal ("1.0" and "01.0")
    keep their input order.
    """
    key = cmp_to_key(lambda a, b: _cmp(a, b, max_digits))
    return sorted(versions, key=key, reverse=reverse)
