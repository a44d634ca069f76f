"""
ElasticTabWriter
================

Column-aligning writer for tab-separated lines (elastic tabstops, see
http://nickgravgaard.com/elastictabstops/).

Lines are buffered until :meth:`ElasticTabWriter.flush`.  Each line is split
on tabs into cells; every cell but the last one on a line belongs to a
column.  A column's width is worked out over a *block*: a run of
consecutive lines that all own a cell in that column.  Blocks nest, so the
width of column ``n`` is computed inside the block of column ``n - 1``::

    one<TAB>two          one two
    1<TAB>22        ->   1   22
    long text            long text

The width of a column is ``max(minwidth, widest cell + padding)``; cells are
left-aligned and padded with spaces.  The last cell of a line is written
as-is.  Widths are never carried over from one flush to the next.
"""
from __future__ import annotations

import logging
from typing import List, TextIO

logger = logging.getLogger(__name__)


class ElasticTabWriter:
    """
    Buffers tab-separated lines and writes them column-aligned to *out*.

    Parameters
    ----------
    out:
        Text sink the aligned block is written to on :meth:`flush`.
    minwidth:
        Minimum width of a column, padding included.
    padding:
        Number of spaces added to the widest cell of a column.
    """

    def __init__(self, out: TextIO, minwidth: int = 0, padding: int = 1) -> None:
        self._out = out
        self.minwidth = minwidth
        self.padding = padding
        self._lines: List[str] = []
        self._partial = ""

    def write(self, text: str) -> None:
        """Buffer *text*; nothing reaches the sink before :meth:`flush`."""
        *complete, self._partial = (self._partial + text).split("\n")
        self._lines.extend(complete)

    def flush(self) -> None:
        """Write all buffered lines aligned, then forget them."""
        lines = self._lines + ([self._partial] if self._partial else [])
        if not lines:
            return
        logger.debug("Flushing tabular block of %d lines", len(lines))
        endings = ["\n"] * len(self._lines) + [""] * (len(lines) - len(self._lines))
        rows = [line.split("\t") for line in lines]
        self._lines = []
        self._partial = ""

        aligned: List[str] = [""] * len(rows)
        self._format(rows, 0, len(rows), [], aligned)
        for text, ending in zip(aligned, endings):
            self._out.write(text + ending)

    # ------------------------------------------------------------------

    def _format(
        self,
        rows: List[List[str]],
        start: int,
        end: int,
        widths: List[int],
        aligned: List[str],
    ) -> None:
        # Lay out rows[start:end] given the widths of the enclosing columns,
        # descending into every block that owns a cell in the next column.
        column = len(widths)
        block_start = start
        i = start
        while i < end:
            if column >= len(rows[i]) - 1:
                i += 1
                continue
            self._render(rows, block_start, i, widths, aligned)
            block_start = i
            width = self.minwidth
            while i < end and column < len(rows[i]) - 1:
                width = max(width, len(rows[i][column]) + self.padding)
                i += 1
            self._format(rows, block_start, i, widths + [width], aligned)
            block_start = i
        self._render(rows, block_start, end, widths, aligned)

    @staticmethod
    def _render(
        rows: List[List[str]],
        start: int,
        end: int,
        widths: List[int],
        aligned: List[str],
    ) -> None:
        for i in range(start, end):
            cells = rows[i]
            padded = [
                cell.ljust(widths[j]) if j < len(widths) else cell
                for j, cell in enumerate(cells)
            ]
            aligned[i] = "".join(padded)
