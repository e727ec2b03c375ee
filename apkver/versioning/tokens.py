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

"""Token taxonomy for apk version strings.

A version string is read as a stream of tokens. Each token has a kind
(TokenType) and, for value-bearing kinds, an integer payload. Kinds carry
a rank that decides ordering when two versions diverge in structure
rather than in value.

Example:
    Rank lookups and transition checks:
        ```python
        from apkver.versioning.tokens import TokenType, clamp_transition

        TokenType.SUFFIX.rank  # 3
        clamp_transition(TokenType.DIGIT, TokenType.DIGIT_OR_ZERO)  # allowed
        clamp_transition(TokenType.REVISION_NO, TokenType.DIGIT)  # INVALID
        ```
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "TokenType",
    "PRE_RELEASE_SUFFIXES",
    "POST_RELEASE_SUFFIXES",
    "RANK_DECREASE_ALLOWED",
    "clamp_transition",
    "is_digit",
    "is_lower",
]


class TokenType(Enum):
    """Kinds of token produced by the version tokenizer."""

    INVALID = "invalid"
    DIGIT_OR_ZERO = "digit_or_zero"
    DIGIT = "digit"
    LETTER = "letter"
    SUFFIX = "suffix"
    SUFFIX_NO = "suffix_no"
    REVISION_NO = "revision_no"
    END = "end"

    @property
    def rank(self) -> int:
        """Position of this kind in the tie-break order.

        INVALID sorts below every value-bearing kind and END above them.
        """
        return _RANKS[self]

    @property
    def is_numeric_run(self) -> bool:
        """True for kinds whose payload is a plain digit run."""
        return self in _NUMERIC_RUNS

    @property
    def is_terminal(self) -> bool:
        """True for END and INVALID; nothing is extracted after these."""
        return self is TokenType.END or self is TokenType.INVALID


_RANKS: dict[TokenType, int] = {
    TokenType.INVALID: -1,
    TokenType.DIGIT_OR_ZERO: 0,
    TokenType.DIGIT: 1,
    TokenType.LETTER: 2,
    TokenType.SUFFIX: 3,
    TokenType.SUFFIX_NO: 4,
    TokenType.REVISION_NO: 5,
    TokenType.END: 6,
}

_NUMERIC_RUNS = frozenset(
    {
        TokenType.DIGIT_OR_ZERO,
        TokenType.DIGIT,
        TokenType.SUFFIX_NO,
        TokenType.REVISION_NO,
    }
)

# Pre-release words sort before the plain release, post-release words after.
# Order within each tuple is priority order, not alphabetical.
PRE_RELEASE_SUFFIXES: tuple[str, ...] = ("alpha", "beta", "pre", "rc")
POST_RELEASE_SUFFIXES: tuple[str, ...] = ("cvs", "svn", "git", "hg", "p")

# (previous, next) pairs where next may rank lower than previous.
# Each one continues a run that has already started:
#   "1.2"   digit       -> digit_or_zero
#   "_rc1_p" suffix_no  -> suffix
#   "1a2"   letter      -> digit
RANK_DECREASE_ALLOWED: frozenset[tuple[TokenType, TokenType]] = frozenset(
    {
        (TokenType.DIGIT, TokenType.DIGIT_OR_ZERO),
        (TokenType.SUFFIX_NO, TokenType.SUFFIX),
        (TokenType.LETTER, TokenType.DIGIT),
    }
)


def clamp_transition(previous: TokenType, proposed: TokenType) -> TokenType:
    """Apply the monotonicity rule to a proposed token transition.

    Token kinds must appear in non-decreasing rank order. A proposed kind
    that ranks below the previous one is forced to INVALID unless the pair
    is listed in RANK_DECREASE_ALLOWED.

    Args:
        previous: Kind of the token just produced.
        proposed: Kind decided for the upcoming token.

    Returns:
        The proposed kind, or TokenType.INVALID if the transition is not allowed.

    """
    if proposed.rank < previous.rank:
        if (previous, proposed) not in RANK_DECREASE_ALLOWED:
            return TokenType.INVALID
    return proposed


def is_digit(char: str) -> bool:
    """ASCII digit test (str.isdigit also accepts non-ASCII digits)."""
    return "0" <= char <= "9"


def is_lower(char: str) -> bool:
    return "a" <= char <= "z"
