"""
TedPipeline
===========

Full formatting pipeline:

1. :class:`~ted.passes.classify.LineClassifyPass`
   – Classify every raw line (indentation, quote block, tabular data,
   continuation marker).
2. :class:`~ted.passes.line_join.LineJoinPass`
   – Merge continued lines, and all short lines when asked to.
3. :class:`~ted.output.formatter.Formatter`
   – Wrap, indent and align the logical lines.

The pipeline is a pure function of the raw lines and the
:class:`~ted.config.FormatConfig`; input is read completely before any
output is produced.
"""
from __future__ import annotations

import logging
from typing import List, Optional, TextIO

from ..config import FormatConfig
from ..models import LogicalLine
from ..output.formatter import Formatter
from ..passes.classify import LineClassifyPass
from ..passes.line_join import LineJoinPass
from .line_source import LineSource, ListLineSource, read_lines

logger = logging.getLogger(__name__)


class TedPipeline:
    """
    High-level facade for formatting text.

    Parameters
    ----------
    config:
        Formatting settings.  Defaults to :class:`~ted.config.FormatConfig`
        with its default values.
    """

    def __init__(self, config: Optional[FormatConfig] = None) -> None:
        self.config = config if config is not None else FormatConfig()
        self._classifier = LineClassifyPass(self.config.tabstop)
        self._joiner = LineJoinPass(self.config.join_short_lines)
        self._formatter = Formatter(self.config)

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def logical_lines(self, raw_lines: List[str]) -> List[LogicalLine]:
        """Classify and join *raw_lines*."""
        classified = self._classifier.run(raw_lines)
        return self._joiner.run(classified)

    def read(self, source: LineSource) -> List[LogicalLine]:
        """Drain *source* and return its logical lines."""
        return self.logical_lines(read_lines(source))

    def format_lines(self, lines: List[LogicalLine]) -> str:
        return self._formatter.render(lines)

    def format_text(self, text: str) -> str:
        """
        Format text supplied as a **string**.

        Parameters
        ----------
        text:
            Raw input; split into lines on ``\\n``.  A final newline does
            not start an extra empty line.

        Returns
        -------
        str
        """
        raw_lines = text.split("\n")
        if raw_lines and raw_lines[-1] == "":
            raw_lines.pop()
        return self.format_lines(self.read(ListLineSource(raw_lines)))

    def run(self, source: LineSource, sink: TextIO) -> int:
        """
        Read all of *source*, format it and write the result to *sink*.

        Nothing is written until the whole input has been read and
        formatted.  Errors raised by the source or the sink propagate.

        Returns
        -------
        int
            Number of characters written.
        """
        lines = self.read(source)
        logger.info("Formatting %d logical lines", len(lines))
        output = self.format_lines(lines)
        sink.write(output)
        return len(output)
