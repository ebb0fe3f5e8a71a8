"""CSV analysis engine: pure functions over a single input string."""

from csvscope.engine.markdown import render_markdown
from csvscope.engine.parser import ParsedTable, parse
from csvscope.engine.statistics import analyze_column
from csvscope.engine.tokens import TokenEstimator
from csvscope.engine.types import infer_column_type

__all__ = [
    "ParsedTable",
    "TokenEstimator",
    "analyze_column",
    "infer_column_type",
    "parse",
    "render_markdown",
]
