"""Pure text-layout primitives: frames, headings, indentation.

Every function in this module is a **pure** transformation over
``str``: no I/O, no side effects, defined for every input.

Line convention
---------------
:func:`split_lines` drops one trailing empty segment produced by a
terminal newline, and :func:`join_lines` terminates *every* line with
``"\\n"``.  The pair is therefore lossy: ``join_lines(split_lines(s))``
equals ``s + "\\n"`` when *s* has no trailing newline, and equals *s*
when it has one.  :func:`frame`, :func:`format_heading` and
:func:`indent` all rely on this and always return newline-terminated
text.
"""

from __future__ import annotations

from collections.abc import Sequence


# ---------------------------------------------------------------------------
# Line handling
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split *text* on ``"\\n"``, dropping the segment after a final newline.

    ``""`` and ``"\\n"`` both yield ``[""]``, so callers always receive
    at least one line.
    """
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: Sequence[str]) -> str:
    """Concatenate *lines*, each followed by ``"\\n"`` (the last one too)."""
    return "".join(f"{line}\n" for line in lines)


def repeat(text: str, n: int) -> str:
    """Return *text* repeated *n* times; ``""`` when *n* is not positive."""
    return text * max(0, n)


# ---------------------------------------------------------------------------
# Indentation and headings
# ---------------------------------------------------------------------------

def indent(text: str, depth: int, start_line: int = 0) -> str:
    """Prefix *depth* spaces to every line whose index is >= *start_line*.

    Lines before *start_line* are returned untouched.
    """
    padding = repeat(" ", depth)
    lines = split_lines(text)
    return join_lines(
        [
            line if index < start_line else padding + line
            for index, line in enumerate(lines)
        ]
    )


def format_heading(text: str, keyword: str) -> str:
    """Render *text* as a ``"KEYWORD: message"`` block.

    The first line is prefixed with ``keyword + ": "``; continuation
    lines are indented by ``len(keyword) + 2`` spaces so they align
    under the message text::

        INFO: first line
              second line
    """
    lines = split_lines(text)
    lines[0] = f"{keyword}: {lines[0]}"
    return indent(join_lines(lines), len(keyword) + 2, 1)


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

def frame(text: str, border: str) -> str:
    """Draw an ASCII-art box of *border* characters around *text*.

    The box is sized to the longest line and preceded by a blank line::

        (blank)
        ##########
        # line 1 #
        # longer #
        ##########

    With a single-character *border* every row is ``width + 4`` wide.
    """
    lines = split_lines(text)
    width = max((len(line) for line in lines), default=0)
    edge = repeat(border, width + 4)

    output = ["", edge]
    for line in lines:
        output.append(f"{border} {line} {repeat(' ', width - len(line))}{border}")
    output.append(edge)
    return join_lines(output)
