"""
ted – command-line interface
============================

Usage
-----
::

    python -m ted.cli [-l N] [-t N] [-j] [-a] [-v] [FILE]

Options
-------
--length, -l     Maximum length of an output line (default: 120).
--tabstop, -t    Number of spaces of a tab (default: 4).
--join, -j       Join short lines when wrapping text.
--append, -a     Append to FILE instead of overwriting it.
--verbose, -v    Enable DEBUG logging.

Examples
--------
::

    python -m ted.cli notes.txt
    python -m ted.cli -l 72 -j -a journal.txt
    printf 'one\\ttwo\\n1\\t22\\n' | python -m ted.cli
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from .config import DEFAULT_LENGTH, DEFAULT_TABSTOP, ConfigError, FormatConfig
from .pipeline.line_source import LineSource, ReadlineLineSource, StreamLineSource
from .pipeline.ted_pipeline import TedPipeline

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
Ted is a line-oriented text editor.

It reads each input line using readline and its text editing facilities.
The text is then written to file, filling and indenting lines like fmt(1).

Long lines are folded to fit the maximum line length. Short lines are not
joined unless the previous line ends with a backslash \\ or flag -j is set.

Initial indentation of lines is preserved. Lines that are indented only with
tabs are formatted with margins both at the left and right ends.

Lines that contain tabular data, i.e. data separated with tabs, are formatted
using elastic tabstops http://nickgravgaard.com/elastictabstops/index.html.

Ted writes the output to file, if specified, otherwise to stdout. Ted does not
support editing of existing files and by default it overwrites the file. Use
-a to append output to an existing file.
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ted",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", nargs="?", default="", help="Output file (default: stdout)")
    p.add_argument(
        "--length", "-l",
        type=int,
        default=DEFAULT_LENGTH,
        metavar="N",
        help=f"Maximum length of an output line (default: {DEFAULT_LENGTH})",
    )
    p.add_argument(
        "--tabstop", "-t",
        type=int,
        default=DEFAULT_TABSTOP,
        metavar="N",
        help=f"Number of spaces of a tab (default: {DEFAULT_TABSTOP})",
    )
    p.add_argument(
        "--join", "-j",
        action="store_true",
        help="Join short lines when wrapping text",
    )
    p.add_argument(
        "--append", "-a",
        action="store_true",
        help="Append to file instead of overwriting",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def _open_source(stdin: TextIO) -> LineSource:
    if stdin.isatty():
        return ReadlineLineSource()
    return StreamLineSource(stdin)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = FormatConfig(
            tabstop=args.tabstop,
            length=args.length,
            join_short_lines=args.join,
        )
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    pipeline = TedPipeline(config)

    # Read and format everything before touching the output file, so an
    # aborted session leaves it as it was.
    try:
        lines = pipeline.read(_open_source(sys.stdin))
    except KeyboardInterrupt:
        print(file=sys.stderr)
        logger.warning("Interrupted; nothing written")
        return 130
    except OSError as exc:
        logger.error("Reading input failed: %s", exc)
        return 1
    output = pipeline.format_lines(lines)

    if not args.file:
        sys.stdout.write(output)
        sys.stdout.flush()
        return 0

    mode = "a" if args.append else "w"
    try:
        with open(args.file, mode, encoding="utf-8") as fout:
            fout.write(output)
    except OSError as exc:
        logger.error("Writing %s failed: %s", args.file, exc)
        return 1
    logger.info("Output written to %s (%s)", args.file, "appended" if args.append else "overwritten")
    return 0


if __name__ == "__main__":
    sys.exit(main())
