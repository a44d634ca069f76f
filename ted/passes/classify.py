"""
LineClassifyPass
================

Turns raw input lines into :class:`~ted.models.LogicalLine` objects.

Classification rules:
  * A trailing backslash marks the line *incomplete* (continued on the next
    line) and is stripped before anything else is looked at.
  * The leading whitespace run is measured in columns: a tab advances to the
    next multiple of ``tabstop``, any other whitespace character counts as
    one column.  The run is removed from ``text``.
  * A line whose tabs all sit inside the leading run is *quoted* (a quote
    block).  A line with any tab after the first non-blank character is
    *tabular* (tab-separated columns).
  * A line that is nothing but its leading run is *blank*.

Every input classifies; there are no error conditions.
"""
from __future__ import annotations

from typing import List

from ..models import LogicalLine

CONTINUATION_MARKER = "\\"


def classify_line(raw: str, tabstop: int) -> LogicalLine:
    """
    Classify a single raw line.

    Parameters
    ----------
    raw:
        One line of input, without its line terminator.
    tabstop:
        Columns per tab stop.

    Returns
    -------
    LogicalLine
    """
    incomplete = raw.endswith(CONTINUATION_MARKER)
    if incomplete:
        raw = raw[: -len(CONTINUATION_MARKER)]

    indent = 0
    indent_chars = 0
    tab_count = 0
    last_tab = -1
    in_indent = True
    for i, ch in enumerate(raw):
        if ch == "\t":
            tab_count += 1
            last_tab = i
            if in_indent:
                indent += tabstop - indent % tabstop
                indent_chars += 1
        elif ch.isspace():
            if in_indent:
                indent += 1
                indent_chars += 1
        else:
            in_indent = False

    blank = in_indent
    quoted = not blank and tab_count > 0 and last_tab < indent_chars
    tabular = not blank and tab_count > 0 and not quoted

    return LogicalLine(
        text=raw[indent_chars:],
        indent=indent,
        indented=indent > 0,
        incomplete=incomplete,
        blank=blank,
        tabular=tabular,
        quoted=quoted,
    )


class LineClassifyPass:
    """Classifies every raw line of the input."""

    def __init__(self, tabstop: int) -> None:
        self.tabstop = tabstop

    def run(self, lines: List[str]) -> List[LogicalLine]:
        """
        Classify raw lines.

        Parameters
        ----------
        lines:
            Raw input lines (line terminators already stripped).

        Returns
        -------
        List[LogicalLine]
            One logical line per input line, in input order.
        """
        return [classify_line(line, self.tabstop) for line in lines]
