"""
LineJoinPass
============

Merges classified lines into the final sequence of logical lines.

The pass is a fold over the classified lines.  The accumulator is a
:class:`JoinState` holding the line still open for joining (``pending``)
and the lines already finalised (``finished``).  Each step returns a new
state; lines are never mutated.  ``finished`` is owned by the fold and is
only ever appended to, so a step costs O(1).

Join rules:
  * A non-blank line is appended to the pending line when the pending line
    ends with a continuation backslash, or when ``join_short_lines`` is on.
  * A blank line is never joined and never absorbs the line after it, so
    paragraphs stay separated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, List, Optional

from ..models import LogicalLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinState:
    pending: Optional[LogicalLine] = None
    finished: List[LogicalLine] = field(default_factory=list)

    def lines(self) -> List[LogicalLine]:
        """Finished lines followed by the pending one, if any."""
        if self.pending is None:
            return list(self.finished)
        return [*self.finished, self.pending]


def join_step(state: JoinState, line: LogicalLine, join_short_lines: bool) -> JoinState:
    """Advance *state* by one classified line."""
    prev = state.pending
    if (
        prev is not None
        and not line.blank
        and not prev.blank
        and (prev.incomplete or join_short_lines)
    ):
        logger.debug(
            "Joining %r onto %r (%s)",
            line.text,
            prev.text,
            "continuation" if prev.incomplete else "join short lines",
        )
        return JoinState(pending=prev.concat(line), finished=state.finished)

    if prev is not None:
        state.finished.append(prev)
    return JoinState(pending=line, finished=state.finished)


def join_lines(lines: Iterable[LogicalLine], join_short_lines: bool = False) -> List[LogicalLine]:
    """Fold *lines* through :func:`join_step` and return the final sequence."""
    state = reduce(
        lambda acc, line: join_step(acc, line, join_short_lines),
        lines,
        JoinState(),
    )
    return state.lines()


class LineJoinPass:
    """Joins continued (and optionally all short) lines."""

    def __init__(self, join_short_lines: bool = False) -> None:
        self.join_short_lines = join_short_lines

    def run(self, lines: List[LogicalLine]) -> List[LogicalLine]:
        """
        Collapse joinable lines.

        Parameters
        ----------
        lines:
            Classified lines, in input order.

        Returns
        -------
        List[LogicalLine]
            Possibly shorter list with joined lines merged in.
        """
        result = join_lines(lines, self.join_short_lines)
        if len(result) != len(lines):
            logger.debug("Joined %d lines into %d", len(lines), len(result))
        return result
