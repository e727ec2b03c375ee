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

"""Cursor-based tokenizer for apk version strings.

A VersionCursor walks one version string left to right. Tokens are pulled
one at a time: the caller passes the kind of the token it expects next
(the kind returned by the previous call) and gets back the value of that
token together with the kind of the token after it.

Grammar summary (Alpine package versions):

    1.2.3         dotted numeric components
    1.2a          single lowercase letter after a number
    1.2_rc3       suffix word after "_", optional number after it
    1.2_p1-r4     packaging revision after "-r"

Leading zeros in a dotted component are special: "1.007" yields a token
with value -2 for the two zeros, then a plain digit token with value 7.
More leading zeros therefore compare lower.

Digit runs longer than the cursor's max_digits are rejected as INVALID
rather than accumulated, so results match fixed-width implementations.

Example:
    Walking a version by hand:
        ```python
        from apkver.versioning.cursor import VersionCursor
        from apkver.versioning.tokens import TokenType

        cursor = VersionCursor("1.2_rc3")
        kind = TokenType.DIGIT
        while not kind.is_terminal:
            next_kind, value = cursor.extract(kind)
            print(kind.name, value)
            kind = next_kind
        # DIGIT 1
        # DIGIT_OR_ZERO 2
        # SUFFIX -1
        # SUFFIX_NO 3
        ```

Note:
    Cursors are single use. Create a new one for every comparison; they
    are never shared between threads.
"""

from __future__ import annotations

from typing import Callable

from apkver.exceptions import CursorOverrunError
from apkver.logging import get_global_logger
from apkver.versioning.tokens import (
    POST_RELEASE_SUFFIXES,
    PRE_RELEASE_SUFFIXES,
    TokenType,
    clamp_transition,
    is_digit,
    is_lower,
)

__all__ = ["MAX_DIGITS", "INVALID_VALUE", "VersionCursor"]

# 18 decimal digits always fit a signed 64-bit integer.
MAX_DIGITS = 18

# Value reported alongside TokenType.INVALID from extract().
INVALID_VALUE = -1


class VersionCursor:
    """Read position over a single immutable version string.

    Attributes:
        version: The version string being tokenized.
        position: Offset of the next unread character.
        max_digits: Longest digit run accepted before the token is INVALID.

    """

    __slots__ = ("_version", "_pos", "_max_digits")

    def __init__(self, version: str, *, max_digits: int = MAX_DIGITS) -> None:
        if max_digits < 1:
            raise ValueError(f"max_digits must be positive, got {max_digits}")
        self._version = version
        self._pos = 0
        self._max_digits = max_digits

    def __repr__(self) -> str:
        return f"VersionCursor({self._version!r}, position={self._pos})"

    @property
    def version(self) -> str:
        return self._version

    @property
    def position(self) -> int:
        return self._pos

    @property
    def max_digits(self) -> int:
        return self._max_digits

    # ----------------------------
    # Low-level reads
    # ----------------------------

    def remaining(self) -> int:
        """Number of characters left after the current position."""
        return len(self._version) - self._pos

    def at_end(self) -> bool:
        return self._pos == len(self._version)

    def peek(self, offset: int = 0) -> str:
        """Return the character `offset` places ahead without advancing.

        Raises:
            CursorOverrunError: If the read falls outside the string.

        """
        index = self._pos + offset
        if index < 0 or index >= len(self._version):
            raise CursorOverrunError(
                f"peek at {index} outside {self._version!r} (length {len(self._version)})"
            )
        return self._version[index]

    def peek_run(self, count: int) -> str:
        """Return up to `count` characters from the current position."""
        return self._version[self._pos : self._pos + count]

    def _skip(self, count: int) -> None:
        self._pos += count
        if self._pos > len(self._version):
            raise CursorOverrunError(
                f"skipped to {self._pos} past end of {self._version!r}"
            )

    def _next_char(self) -> str:
        self._skip(1)
        return self._version[self._pos - 1]

    def _count_while(self, predicate: Callable[[str], bool]) -> int:
        count = 0
        left = self.remaining()
        while count < left and predicate(self.peek(count)):
            count += 1
        return count

    # ----------------------------
    # Tokenizer
    # ----------------------------

    def advance_to_next_type(self, previous: TokenType) -> TokenType:
        """Decide the kind of the upcoming token.

        Looks at no more than one character ahead. A separator ("." "_"
        "-r") is consumed; the token value itself is left for extract().

        Args:
            previous: Kind of the token just produced.

        Returns:
            Kind of the next token, after the monotonicity clamp.

        """
        if self.at_end():
            return TokenType.END

        char = self.peek()
        if previous in (TokenType.DIGIT, TokenType.DIGIT_OR_ZERO) and is_lower(char):
            proposed = TokenType.LETTER
        elif previous is TokenType.LETTER and is_digit(char):
            proposed = TokenType.DIGIT
        elif previous is TokenType.SUFFIX and is_digit(char):
            proposed = TokenType.SUFFIX_NO
        else:
            separator = self._next_char()
            if separator == ".":
                proposed = TokenType.DIGIT_OR_ZERO
            elif separator == "_":
                proposed = TokenType.SUFFIX
            elif separator == "-" and not self.at_end() and self.peek() == "r":
                self._skip(1)
                proposed = TokenType.REVISION_NO
            else:
                proposed = TokenType.INVALID

        return clamp_transition(previous, proposed)

    def extract(self, current: TokenType) -> tuple[TokenType, int]:
        """Consume the token of kind `current` and return its value.

        Args:
            current: Kind of the token at the cursor, as returned by the
                previous extract() call (or DIGIT for the first token).

        Returns:
            A (next_kind, value) tuple. next_kind is the kind of the token
            that follows; value is this token's payload. At end of input
            the result is (TokenType.END, 0) and nothing is consumed. For
            ill-formed input the result is (TokenType.INVALID, -1).

        """
        if self.at_end():
            return TokenType.END, 0

        leading_zeros = False
        if current is TokenType.DIGIT_OR_ZERO and self.peek() == "0":
            consumed = self._count_while(lambda c: c == "0")
            value = -consumed
            leading_zeros = True
        elif current.is_numeric_run:
            consumed = self._count_while(is_digit)
            if consumed > self._max_digits:
                get_global_logger().debug(
                    "TOKEN",
                    f"Digit run of {consumed} characters in {self._version!r} "
                    f"exceeds {self._max_digits}; treating as invalid",
                )
                return TokenType.INVALID, INVALID_VALUE
            value = int(self.peek_run(consumed)) if consumed else 0
        elif current is TokenType.LETTER:
            consumed = 1
            value = ord(self.peek())
        elif current is TokenType.SUFFIX:
            match = self._match_suffix()
            if match is None:
                return TokenType.INVALID, INVALID_VALUE
            value, consumed = match
        else:
            return TokenType.INVALID, INVALID_VALUE

        self._skip(consumed)
        if self.at_end():
            return TokenType.END, value
        if leading_zeros:
            # The digits after the zeros are a plain run: "007" -> -2, then 7.
            if is_digit(self.peek()):
                return TokenType.DIGIT, value
            return self.advance_to_next_type(TokenType.DIGIT), value
        return self.advance_to_next_type(current), value

    def _match_suffix(self) -> tuple[int, int] | None:
        """Match a suffix word at the cursor.

        Returns:
            (encoded_rank, length) for the first matching word, or None.
            Pre-release words encode as index - len(list) (negative),
            post-release words as their index.

        """
        for index, word in enumerate(PRE_RELEASE_SUFFIXES):
            if self.peek_run(len(word)) == word:
                return index - len(PRE_RELEASE_SUFFIXES), len(word)
        for index, word in enumerate(POST_RELEASE_SUFFIXES):
            if self.peek_run(len(word)) == word:
                return index, len(word)
        return None
