"""Parser entry point."""

from __future__ import annotations

from graphviz_dot_parser.ir.ast import GraphAST
from graphviz_dot_parser.parsers.dot import DotParser


def parse(src: str) -> GraphAST:
    """Parse one complete DOT document into a GraphAST.

    Raises DotSyntaxError if the text does not conform.
    """
    return DotParser().parse(src)
