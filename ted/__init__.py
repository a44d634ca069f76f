"""
ted
===

A line-oriented text formatter.  Raw lines are classified (blank, indented,
quote block, tabular data, continued), joined where needed and written out
wrapped like fmt(1), with tab-separated data aligned using elastic
tabstops.

Quick start
-----------
>>> from ted import FormatConfig, TedPipeline
>>> pipeline = TedPipeline(FormatConfig(length=40))
>>> print(pipeline.format_text("one\\ttwo\\n1\\t22\\n"), end="")
one two
1   22
"""

from .config import ConfigError, FormatConfig
from .models import LogicalLine
from .output.formatter import Formatter
from .output.tabwriter import ElasticTabWriter
from .passes.classify import LineClassifyPass, classify_line
from .passes.line_join import LineJoinPass, join_lines
from .pipeline.line_source import ListLineSource, ReadlineLineSource, StreamLineSource
from .pipeline.ted_pipeline import TedPipeline

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "FormatConfig",
    "LogicalLine",
    "Formatter",
    "ElasticTabWriter",
    "LineClassifyPass",
    "classify_line",
    "LineJoinPass",
    "join_lines",
    "ListLineSource",
    "ReadlineLineSource",
    "StreamLineSource",
    "TedPipeline",
]
