"""
Core data model for the ted line formatter.

A raw input line is classified into a :class:`LogicalLine`; consecutive
logical lines may then be merged by the join pass before the formatter
renders them.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogicalLine:
    """
    One classified (possibly merged) line of input.

    ``text`` has the leading indentation run and a trailing continuation
    backslash stripped.  ``tabular`` and ``quoted`` are never both set, and
    neither is set on a ``blank`` line.
    """

    text: str
    indent: int = 0             # visual width of the leading whitespace run
    indented: bool = False      # indent > 0
    incomplete: bool = False    # raw line ended with a backslash
    blank: bool = False         # empty or whitespace only
    tabular: bool = False       # has tabs outside the leading run
    quoted: bool = False        # every tab is inside the leading run

    def concat(self, other: LogicalLine) -> LogicalLine:
        """
        Return a new line with *other* appended to this one.

        The tabular/quoted flags are re-derived so that a quote-indented
        line joined to a tabular one (or the reverse) ends up tabular.
        """
        becomes_tabular = self.tabular or other.tabular or other.quoted
        return LogicalLine(
            text=f"{self.text} {other.text}",
            indent=self.indent,
            indented=self.indented,
            incomplete=other.incomplete,
            blank=self.blank and other.blank,
            tabular=becomes_tabular,
            quoted=self.quoted and not becomes_tabular,
        )

    @property
    def kind(self) -> str:
        """Formatting category: TABULAR, BLANK, QUOTED, INDENTED or PROSE."""
        if self.tabular:
            return "TABULAR"
        if self.blank:
            return "BLANK"
        if self.quoted:
            return "QUOTED"
        if self.indented:
            return "INDENTED"
        return "PROSE"

    def __repr__(self) -> str:
        return (
            f"LogicalLine(kind={self.kind!r}, indent={self.indent}, "
            f"incomplete={self.incomplete}, text={self.text!r})"
        )
