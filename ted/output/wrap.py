"""
Word-wrap helpers used by the formatter.

Text is filled like fmt(1): runs of whitespace are collapsed and the words
are split into rows so that the sum of the squared gaps left at the end of
every row but the last is as small as possible (minimum raggedness).  Rows
only break at whitespace, no row of two or more words is wider than the
limit, and a word longer than the limit is left whole on a row of its own.
"""
from __future__ import annotations

import sys
import textwrap
from typing import List, Sequence

PLACEHOLDER = "@"

WORD_SPACE = 1
LONG_ROW_PENALTY = 100_000


def fill_words(
    words: Sequence[str],
    width: int,
    space: int = WORD_SPACE,
    penalty: int = LONG_ROW_PENALTY,
) -> List[List[str]]:
    """
    Split *words* into rows with minimum raggedness.

    Parameters
    ----------
    words:
        The words to lay out, in order.
    width:
        Maximum row width.
    space:
        Width of the gap between two words on a row.
    penalty:
        Extra cost of a row holding a single word wider than *width*.

    Returns
    -------
    List[List[str]]
        The words of each row.
    """
    n = len(words)
    offsets = [0]
    for word in words:
        offsets.append(offsets[-1] + len(word))

    def row_width(i: int, j: int) -> int:
        # words[i:j] joined by single gaps
        return offsets[j] - offsets[i] + (j - i - 1) * space

    # cost[i]: cheapest layout of words[i:]; breaks[i]: end of its first row
    cost = [0] * (n + 1)
    breaks = [n] * (n + 1)
    for i in range(n - 1, -1, -1):
        if row_width(i, n) <= width or i == n - 1:
            continue
        best = sys.maxsize
        for j in range(i + 1, n):
            used = row_width(i, j)
            if used > width and j > i + 1:
                break
            gap = width - used
            c = gap * gap + cost[j]
            if used > width:
                c += penalty
            if c < best:
                best = c
                breaks[i] = j
        cost[i] = best

    rows: List[List[str]] = []
    i = 0
    while i < n:
        rows.append(list(words[i:breaks[i]]))
        i = breaks[i]
    return rows


def wrap_rows(text: str, width: int) -> List[str]:
    """Return the rows of *text* filled to *width* columns."""
    return [" ".join(row) for row in fill_words(text.split(), max(width, 1))]


def wrap(text: str, width: int) -> str:
    """Fill *text* to *width* columns; rows are joined with newlines."""
    return "\n".join(wrap_rows(text, width))


def indent(text: str, margin: int) -> str:
    """Prefix every non-empty row of *text* with *margin* spaces."""
    return textwrap.indent(text, " " * margin)


def wrap_indented(text: str, indent_width: int, width: int) -> str:
    """
    Fill *text* as if it began at column *indent_width*.

    The indentation is stood in for by placeholder characters glued to the
    first word, so the fill counts it against the first row.  The
    placeholders are then swapped for spaces.
    """
    wrapped = wrap(PLACEHOLDER * indent_width + text, width)
    return " " * indent_width + wrapped[indent_width:]
