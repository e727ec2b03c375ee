"""
Tests for apkver.versioning.cursor module.

Tests the version tokenizer including:
- Read-only lookahead and bounds checks
- Next-token-type decisions and separator consumption
- Token value extraction (digits, leading zeros, letters, suffixes)
- The digit-run length bound
- Whole-string token streams
"""

from __future__ import annotations

import pytest

from apkver.exceptions import APKVerError, CursorOverrunError
from apkver.versioning.cursor import INVALID_VALUE, MAX_DIGITS, VersionCursor
from apkver.versioning.tokens import TokenType


def _tokens(text: str, **kwargs) -> tuple[list[tuple[TokenType, int]], TokenType]:
    """Walk a whole string; return extracted (kind, value) pairs and the final kind."""
    cursor = VersionCursor(text, **kwargs)
    kind = TokenType.DIGIT
    out: list[tuple[TokenType, int]] = []
    while not kind.is_terminal:
        next_kind, value = cursor.extract(kind)
        out.append((kind, value))
        kind = next_kind
    return out, kind


class TestLookahead:
    """Tests for remaining, peek and peek_run."""

    def test_fresh_cursor(self):
        """Test a new cursor starts at offset zero."""
        cursor = VersionCursor("1.2")
        assert cursor.position == 0
        assert cursor.remaining() == 3
        assert not cursor.at_end()
        assert cursor.version == "1.2"
        assert cursor.max_digits == MAX_DIGITS

    def test_empty_cursor_is_at_end(self):
        cursor = VersionCursor("")
        assert cursor.at_end()
        assert cursor.remaining() == 0

    def test_peek_does_not_advance(self):
        """Test that peek and peek_run never move the cursor."""
        cursor = VersionCursor("1.2")
        assert cursor.peek() == "1"
        assert cursor.peek(2) == "2"
        assert cursor.peek_run(2) == "1."
        assert cursor.position == 0

    def test_peek_run_is_truncated_at_end(self):
        """Test that peek_run returns fewer characters near the end."""
        assert VersionCursor("rc").peek_run(5) == "rc"

    def test_peek_past_end_is_fatal(self):
        """Test that reading outside the string raises CursorOverrunError."""
        cursor = VersionCursor("1")
        with pytest.raises(CursorOverrunError):
            cursor.peek(1)
        with pytest.raises(CursorOverrunError):
            cursor.peek(-1)

    def test_overrun_is_not_a_recoverable_error(self):
        """Test that invariant violations sit outside APKVerError."""
        assert issubclass(CursorOverrunError, AssertionError)
        assert not issubclass(CursorOverrunError, APKVerError)

    def test_invalid_max_digits_rejected(self):
        with pytest.raises(ValueError):
            VersionCursor("1", max_digits=0)


class TestAdvanceToNextType:
    """Tests for advance_to_next_type."""

    def test_end_of_input(self):
        assert VersionCursor("").advance_to_next_type(TokenType.DIGIT) is TokenType.END

    def test_letter_after_number(self):
        """Test a lowercase letter after a number is a LETTER, not consumed."""
        for previous in (TokenType.DIGIT, TokenType.DIGIT_OR_ZERO):
            cursor = VersionCursor("a")
            assert cursor.advance_to_next_type(previous) is TokenType.LETTER
            assert cursor.position == 0

    def test_digit_after_letter(self):
        cursor = VersionCursor("5")
        assert cursor.advance_to_next_type(TokenType.LETTER) is TokenType.DIGIT
        assert cursor.position == 0

    def test_suffix_number_after_suffix(self):
        cursor = VersionCursor("5")
        assert cursor.advance_to_next_type(TokenType.SUFFIX) is TokenType.SUFFIX_NO
        assert cursor.position == 0

    def test_dot_separator(self):
        """Test '.' is consumed and starts a DIGIT_OR_ZERO token."""
        cursor = VersionCursor(".1")
        assert cursor.advance_to_next_type(TokenType.DIGIT) is TokenType.DIGIT_OR_ZERO
        assert cursor.position == 1

    def test_underscore_separator(self):
        cursor = VersionCursor("_rc")
        assert cursor.advance_to_next_type(TokenType.DIGIT) is TokenType.SUFFIX
        assert cursor.position == 1

    def test_revision_marker(self):
        """Test '-r' is consumed as a whole."""
        cursor = VersionCursor("-r1")
        assert cursor.advance_to_next_type(TokenType.DIGIT) is TokenType.REVISION_NO
        assert cursor.position == 2

    @pytest.mark.parametrize("text", ["-", "-x", "+1", "~1", "A"])
    def test_unknown_separator_is_invalid(self, text):
        """Test that a bare '-' or other characters give INVALID."""
        cursor = VersionCursor(text)
        assert cursor.advance_to_next_type(TokenType.DIGIT) is TokenType.INVALID
        assert cursor.position == 1

    def test_clamp_after_revision(self):
        """Test a dotted component after a revision is rejected."""
        cursor = VersionCursor(".1")
        assert cursor.advance_to_next_type(TokenType.REVISION_NO) is TokenType.INVALID

    def test_clamp_after_letter(self):
        """Test a dotted component after a letter is rejected."""
        cursor = VersionCursor(".3")
        assert cursor.advance_to_next_type(TokenType.LETTER) is TokenType.INVALID

    def test_suffix_after_suffix_number_allowed(self):
        cursor = VersionCursor("_p")
        assert cursor.advance_to_next_type(TokenType.SUFFIX_NO) is TokenType.SUFFIX


class TestExtract:
    """Tests for extract."""

    def test_extract_at_end_is_noop(self):
        cursor = VersionCursor("")
        assert cursor.extract(TokenType.DIGIT) == (TokenType.END, 0)
        assert cursor.position == 0

    def test_digit_run_to_end(self):
        assert VersionCursor("123").extract(TokenType.DIGIT) == (TokenType.END, 123)

    def test_digit_run_then_separator(self):
        """Test the separator after a run is consumed with the next-type decision."""
        cursor = VersionCursor("12.3")
        assert cursor.extract(TokenType.DIGIT) == (TokenType.DIGIT_OR_ZERO, 12)
        assert cursor.position == 3

    def test_leading_zeros_then_digits(self):
        """Test '007' gives -2 for the zeros, then 7 as a plain digit run."""
        cursor = VersionCursor("007")
        assert cursor.extract(TokenType.DIGIT_OR_ZERO) == (TokenType.DIGIT, -2)
        assert cursor.position == 2
        assert cursor.extract(TokenType.DIGIT) == (TokenType.END, 7)

    def test_single_zero_component(self):
        assert VersionCursor("0").extract(TokenType.DIGIT_OR_ZERO) == (TokenType.END, -1)

    def test_zero_followed_by_suffix(self):
        """Test a zero run followed by '_' moves straight to the suffix."""
        cursor = VersionCursor("0_rc")
        assert cursor.extract(TokenType.DIGIT_OR_ZERO) == (TokenType.SUFFIX, -1)
        assert cursor.position == 2

    def test_zero_followed_by_letter(self):
        cursor = VersionCursor("0a")
        assert cursor.extract(TokenType.DIGIT_OR_ZERO) == (TokenType.LETTER, -1)
        assert cursor.position == 1

    def test_leading_zero_only_special_for_dotted_components(self):
        """Test the first component reads '01' as the number 1."""
        assert VersionCursor("01").extract(TokenType.DIGIT) == (TokenType.END, 1)

    def test_letter(self):
        assert VersionCursor("a").extract(TokenType.LETTER) == (TokenType.END, ord("a"))

    @pytest.mark.parametrize(
        "word, value",
        [
            ("alpha", -4),
            ("beta", -3),
            ("pre", -2),
            ("rc", -1),
            ("cvs", 0),
            ("svn", 1),
            ("git", 2),
            ("hg", 3),
            ("p", 4),
        ],
    )
    def test_suffix_words(self, word, value):
        """Test suffix encoding: negative for pre-release, index for post-release."""
        assert VersionCursor(word).extract(TokenType.SUFFIX) == (TokenType.END, value)

    def test_pre_wins_over_p(self):
        """Test 'pre1' matches the pre-release word, not 'p'."""
        cursor = VersionCursor("pre1")
        assert cursor.extract(TokenType.SUFFIX) == (TokenType.SUFFIX_NO, -2)

    def test_unknown_suffix_is_invalid(self):
        cursor = VersionCursor("foo")
        assert cursor.extract(TokenType.SUFFIX) == (TokenType.INVALID, INVALID_VALUE)
        assert cursor.position == 0

    def test_terminal_kinds_extract_invalid(self):
        """Test that asking for END or INVALID on remaining input is INVALID."""
        assert VersionCursor("1").extract(TokenType.END) == (TokenType.INVALID, -1)
        assert VersionCursor("1").extract(TokenType.INVALID) == (TokenType.INVALID, -1)


class TestDigitBound:
    """Tests for the digit-run length bound."""

    def test_run_at_bound_is_accepted(self):
        text = "9" * MAX_DIGITS
        assert VersionCursor(text).extract(TokenType.DIGIT) == (TokenType.END, int(text))

    def test_run_over_bound_is_invalid(self):
        """Test an overlong run is rejected without consuming it."""
        cursor = VersionCursor("9" * (MAX_DIGITS + 1))
        assert cursor.extract(TokenType.DIGIT) == (TokenType.INVALID, INVALID_VALUE)
        assert cursor.position == 0

    def test_custom_bound(self):
        assert VersionCursor("1234", max_digits=3).extract(TokenType.DIGIT) == (
            TokenType.INVALID,
            INVALID_VALUE,
        )
        assert VersionCursor("123", max_digits=3).extract(TokenType.DIGIT) == (
            TokenType.END,
            123,
        )


class TestTokenStreams:
    """Tests for walking complete version strings."""

    def test_full_grammar(self):
        """Test a version using every part of the grammar."""
        tokens, final = _tokens("1.2a_beta3_p1-r7")
        assert tokens == [
            (TokenType.DIGIT, 1),
            (TokenType.DIGIT_OR_ZERO, 2),
            (TokenType.LETTER, ord("a")),
            (TokenType.SUFFIX, -3),
            (TokenType.SUFFIX_NO, 3),
            (TokenType.SUFFIX, 4),
            (TokenType.SUFFIX_NO, 1),
            (TokenType.REVISION_NO, 7),
        ]
        assert final is TokenType.END

    def test_component_after_revision_is_invalid(self):
        tokens, final = _tokens("1.2-r1.3")
        assert tokens == [
            (TokenType.DIGIT, 1),
            (TokenType.DIGIT_OR_ZERO, 2),
            (TokenType.REVISION_NO, 1),
        ]
        assert final is TokenType.INVALID

    def test_garbage_terminates(self):
        """Test that arbitrary text ends in INVALID without raising."""
        tokens, final = _tokens("Hello, world")
        assert final is TokenType.INVALID
        assert tokens == [(TokenType.DIGIT, 0)]

    def test_empty_string(self):
        tokens, final = _tokens("")
        assert tokens == [(TokenType.DIGIT, 0)]
        assert final is TokenType.END
