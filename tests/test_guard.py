"""Tests for the input guard."""

import logging

import pytest

from terminal_to_html.codec.guard import (
    GuardedInput,
    describe_size,
    guard,
    guard_input,
    limit_line_length,
)
from terminal_to_html.core.constants import LINE_NOTICE, MEGABYTE, SIZE_NOTICE

DEFAULT_SIZE_NOTICE = SIZE_NOTICE.format(limit="4 megabyte")


class TestEncoding:
    """Encoding repair."""

    @pytest.mark.parametrize("raw", [None, "", b""])
    def test_empty_input(self, raw) -> None:
        assert guard(raw) == ""

    def test_bytes_are_decoded_as_utf8(self) -> None:
        assert guard("héllo ✔".encode()) == "héllo ✔"

    def test_invalid_bytes_are_replaced(self) -> None:
        assert guard(b"abc\xffdef") == "abc�def"

    def test_lone_surrogates_are_replaced(self) -> None:
        result = guard("a\ud800b")
        assert result[0] == "a" and result[-1] == "b"
        assert "�" in result
        assert "\ud800" not in result

    def test_text_passes_through(self) -> None:
        assert guard("  \n\x1b[31m\r\b") == "  \n\x1b[31m\r\b"


class TestSizeLimit:
    """Total size cap."""

    def test_under_the_limit_is_untouched(self) -> None:
        assert guard("x" * 100, max_size=100) == "x" * 100

    def test_over_the_limit_is_truncated_with_notice(self) -> None:
        result = guard("x" * 150, max_size=100)
        assert result == "x" * 100 + SIZE_NOTICE.format(limit="100 byte")

    def test_notice_is_kept_apart(self) -> None:
        guarded = guard_input("x" * 150, max_size=100)
        assert guarded == GuardedInput("x" * 100, SIZE_NOTICE.format(limit="100 byte"))
        assert guard_input("x" * 100, max_size=100) == GuardedInput("x" * 100)

    def test_default_limit(self) -> None:
        result = guard("x" * 5 * MEGABYTE, max_line_length=5 * MEGABYTE)
        assert result.endswith(DEFAULT_SIZE_NOTICE)
        assert result.count("Warning") == 1
        assert len(result) == 4 * MEGABYTE + len(DEFAULT_SIZE_NOTICE)

    def test_truncates_on_a_character_boundary(self) -> None:
        result = guard("ééé".encode(), max_size=3)
        assert result == "é" + SIZE_NOTICE.format(limit="3 byte")

    def test_notice_is_not_cut_by_line_limit(self) -> None:
        result = guard("x" * 150, max_size=100, max_line_length=10)
        assert result.endswith(SIZE_NOTICE.format(limit="100 byte"))
        assert result.count("chopped off the rest of the build") == 1

    def test_truncation_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="terminal_to_html"):
            guard("x" * 150, max_size=100)
        assert "truncating" in caplog.text

    def test_describe_size(self) -> None:
        assert describe_size(4 * MEGABYTE) == "4 megabyte"
        assert describe_size(1000) == "1000 byte"
        assert describe_size(0) == "0 byte"


class TestLineLimit:
    """Per-line cap."""

    def test_only_long_lines_are_cut(self) -> None:
        result = guard("abcdef\nxy\nabcd", max_line_length=4)
        notice = LINE_NOTICE.format(limit=4)
        assert result == f"abcd{notice}\nxy\nabcd"

    def test_notice_appended_once_per_line(self) -> None:
        result = limit_line_length("aaaaaa\nbbbbbb", 3)
        assert result.count("Warning") == 2

    def test_default_limit(self) -> None:
        result = guard("y" * 60_000)
        assert result == "y" * 50_000 + LINE_NOTICE.format(limit=50000)

    def test_short_text_is_returned_as_is(self) -> None:
        text = "short\nlines"
        assert limit_line_length(text, 10) is text
