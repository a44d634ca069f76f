"""
Line sources
============

A line source hands the pipeline one raw line per call::

    text, more = source.next_line()

``more`` is ``False`` once input is exhausted; ``text`` is then meaningless.
The pipeline depends only on this protocol, so tests can feed canned lines
while the command line reads interactively through :mod:`readline`.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Protocol, TextIO, Tuple

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    def next_line(self) -> Tuple[str, bool]:
        ...


class ListLineSource:
    """Serves a fixed list of lines, then signals end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self._pos = 0

    def next_line(self) -> Tuple[str, bool]:
        if self._pos >= len(self._lines):
            return "", False
        line = self._lines[self._pos]
        self._pos += 1
        return line, True


class StreamLineSource:
    """Reads lines from an open text stream, dropping the line terminator."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def next_line(self) -> Tuple[str, bool]:
        line = self._stream.readline()
        if not line:
            return "", False
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line, True


class ReadlineLineSource:
    """
    Interactive source backed by the :mod:`readline` module.

    The tab key is bound to insert a literal tab instead of completing, so
    indentation and tab-separated columns can be typed directly.  End of
    input is Ctrl-D on an empty line.
    """

    def __init__(self, prompt: str = "") -> None:
        self.prompt = prompt
        self.line_editing = self._init_readline()

    @staticmethod
    def _init_readline() -> bool:
        try:
            import readline
        except ImportError:
            logger.debug("readline not available; line editing disabled")
            return False
        readline.parse_and_bind("tab: self-insert")
        return True

    def next_line(self) -> Tuple[str, bool]:
        try:
            return input(self.prompt), True
        except EOFError:
            return "", False


def read_lines(source: LineSource) -> List[str]:
    """Drain *source* and return every raw line it yields."""
    lines: List[str] = []
    text, more = source.next_line()
    while more:
        lines.append(text)
        text, more = source.next_line()
    logger.debug("Read %d raw lines", len(lines))
    return lines
