"""
Formatter
=========

Renders the joined sequence of :class:`~ted.models.LogicalLine` objects.

Per-category layout:

* **tabular** – buffered in an :class:`~ted.output.tabwriter.ElasticTabWriter`
  and written column-aligned when the block ends.
* **blank** – no content; only the line terminator, which keeps paragraphs
  apart.
* **quoted** – wrapped to ``length - 2 * tabstop`` and shifted right by
  ``tabstop`` spaces, leaving a margin on both sides.
* **indented** – wrapped to ``length`` with the indentation counted against
  the first row; the indentation is kept on the first row only.
* **prose** – wrapped to ``length``.

Every non-tabular line ends with a newline.  The tabular buffer is flushed
before any non-tabular line and at the end of the sequence.
"""
from __future__ import annotations

import io
import logging
from typing import Iterable, TextIO

from ..config import FormatConfig
from ..models import LogicalLine
from .tabwriter import ElasticTabWriter
from .wrap import indent, wrap, wrap_indented

logger = logging.getLogger(__name__)


class Formatter:
    """Formats logical lines according to a :class:`~ted.config.FormatConfig`."""

    def __init__(self, config: FormatConfig) -> None:
        self.config = config

    def format(self, lines: Iterable[LogicalLine], out: TextIO) -> None:
        """
        Write the formatted *lines* to *out*.

        Parameters
        ----------
        lines:
            Finished logical lines, in input order.
        out:
            An open text sink.  It is written to, never closed.
        """
        tabw = ElasticTabWriter(out, minwidth=self.config.tabstop, padding=1)
        for line in lines:
            if line.tabular:
                tabw.write(line.text + "\n")
                continue
            tabw.flush()
            out.write(self._render(line))
            out.write("\n")
        tabw.flush()

    def render(self, lines: Iterable[LogicalLine]) -> str:
        """Return the formatted *lines* as a string."""
        buf = io.StringIO()
        self.format(lines, buf)
        return buf.getvalue()

    # ------------------------------------------------------------------

    def _render(self, line: LogicalLine) -> str:
        tabstop, length = self.config.tabstop, self.config.length
        if line.blank:
            return ""
        if line.quoted:
            return indent(wrap(line.text, length - 2 * tabstop), tabstop)
        if line.indented:
            return wrap_indented(line.text, line.indent, length)
        return wrap(line.text, length)
