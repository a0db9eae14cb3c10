"""Tests for the pure text-layout primitives.

Every function under test is deterministic and side-effect free, so
these tests compare exact strings.
"""

from __future__ import annotations

import pytest

from termframe.core.layout import (
    format_heading,
    frame,
    indent,
    join_lines,
    repeat,
    split_lines,
)


# ---------------------------------------------------------------------------
# split_lines / join_lines
# ---------------------------------------------------------------------------

class TestSplitLines:
    def test_single_line(self) -> None:
        assert split_lines("abc") == ["abc"]

    def test_multiple_lines(self) -> None:
        assert split_lines("a\nb\nc") == ["a", "b", "c"]

    def test_terminal_newline_dropped(self) -> None:
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_only_one_trailing_segment_dropped(self) -> None:
        assert split_lines("a\n\n") == ["a", ""]

    def test_inner_empty_lines_kept(self) -> None:
        assert split_lines("a\n\nb") == ["a", "", "b"]

    @pytest.mark.parametrize("text", ["", "\n"])
    def test_empty_text_yields_one_empty_line(self, text: str) -> None:
        assert split_lines(text) == [""]


class TestJoinLines:
    def test_every_line_terminated(self) -> None:
        assert join_lines(["a", "b"]) == "a\nb\n"

    def test_empty_sequence(self) -> None:
        assert join_lines([]) == ""

    def test_round_trip_adds_newline(self) -> None:
        assert join_lines(split_lines("a\nb")) == "a\nb\n"

    def test_round_trip_keeps_single_terminal_newline(self) -> None:
        assert join_lines(split_lines("a\nb\n")) == "a\nb\n"


# ---------------------------------------------------------------------------
# repeat / indent
# ---------------------------------------------------------------------------

class TestRepeat:
    def test_repeats(self) -> None:
        assert repeat("ab", 3) == "ababab"

    @pytest.mark.parametrize("n", [0, -1, -10])
    def test_non_positive_is_empty(self, n: int) -> None:
        assert repeat("ab", n) == ""


class TestIndent:
    def test_indents_all_lines_by_default(self) -> None:
        assert indent("a\nb", 2) == "  a\n  b\n"

    def test_lines_before_start_untouched(self) -> None:
        assert indent("a\nb\nc", 2, 1) == "a\n  b\n  c\n"

    def test_start_beyond_end_only_normalises(self) -> None:
        assert indent("a\nb", 4, 5) == "a\nb\n"

    def test_zero_depth(self) -> None:
        assert indent("a", 0) == "a\n"


# ---------------------------------------------------------------------------
# format_heading
# ---------------------------------------------------------------------------

class TestFormatHeading:
    def test_single_line(self) -> None:
        assert format_heading("hello", "INFO") == "INFO: hello\n"

    def test_continuation_lines_aligned(self) -> None:
        assert format_heading("L1\nL2", "INFO") == "INFO: L1\n      L2\n"

    @pytest.mark.parametrize("keyword", ["E", "WARN", "SOMETHING LONG"])
    def test_alignment_tracks_keyword_length(self, keyword: str) -> None:
        lines = format_heading("one\ntwo\nthree", keyword).split("\n")[:-1]
        assert lines[0].startswith(f"{keyword}: ")
        for line in lines[1:]:
            assert line.startswith(" " * (len(keyword) + 2))
            assert line[len(keyword) + 2] != " "

    def test_empty_message(self) -> None:
        assert format_heading("", "ERROR") == "ERROR: \n"


# ---------------------------------------------------------------------------
# frame
# ---------------------------------------------------------------------------

class TestFrame:
    def test_exact_layout(self) -> None:
        assert frame("ab\nc", "#") == "\n######\n# ab #\n# c  #\n######\n"

    def test_empty_text(self) -> None:
        assert frame("", "@") == "\n@@@@\n@  @\n@@@@\n"

    @pytest.mark.parametrize(
        "text",
        ["x", "short\na much longer line\nmid", "trailing\n", "a\n\nb"],
    )
    def test_all_rows_share_width(self, text: str) -> None:
        width = max(len(line) for line in split_lines(text))
        rows = frame(text, "%").split("\n")
        assert rows[0] == ""
        assert rows[-1] == ""
        body = rows[1:-1]
        assert body[0] == body[-1] == repeat("%", width + 4)
        assert all(len(row) == width + 4 for row in body)

    def test_composed_heading_frame(self) -> None:
        rendered = frame(format_heading("L1\nL2", "INFO"), "#")
        assert rendered == (
            "\n"
            "############\n"
            "# INFO: L1 #\n"
            "#       L2 #\n"
            "############\n"
        )
