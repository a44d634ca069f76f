"""
Formatter configuration.

A single immutable :class:`FormatConfig` value is handed to every stage of
the pipeline; nothing reads configuration from module-level state.
"""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TABSTOP = 4
DEFAULT_LENGTH = 120


class ConfigError(ValueError):
    """Raised when a :class:`FormatConfig` is built with invalid values."""


@dataclass(frozen=True)
class FormatConfig:
    """
    Settings shared by the classifier, the join pass and the formatter.

    Parameters
    ----------
    tabstop:
        Number of columns a tab advances to (also the quote-block margin
        and the minimum width of a tabular column).
    length:
        Maximum width of an output line.
    join_short_lines:
        Join every pair of consecutive non-blank lines, not only those
        continued with a trailing backslash.
    """

    tabstop: int = DEFAULT_TABSTOP
    length: int = DEFAULT_LENGTH
    join_short_lines: bool = False

    def __post_init__(self) -> None:
        for name in ("tabstop", "length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")
