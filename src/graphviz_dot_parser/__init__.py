"""graphviz-dot-parser: a simplified DOT recognizer with networkx materialization."""

from graphviz_dot_parser.errors import DanglingReferenceError, DotSyntaxError
from graphviz_dot_parser.ir.ast import Assign, AttrDefault, Edge, GraphAST, Node, Stmt, SubGraph
from graphviz_dot_parser.ir.graph import (
    DotGraph,
    to_directed_graph,
    to_directed_graph_using,
    to_graph,
    to_undirected_graph,
    to_undirected_graph_using,
)
from graphviz_dot_parser.parsers import parse
from graphviz_dot_parser.types import Attributes, AttributeType

__all__ = [
    "Assign",
    "AttrDefault",
    "AttributeType",
    "Attributes",
    "DanglingReferenceError",
    "DotGraph",
    "DotSyntaxError",
    "Edge",
    "GraphAST",
    "Node",
    "Stmt",
    "SubGraph",
    "parse",
    "to_directed_graph",
    "to_directed_graph_using",
    "to_graph",
    "to_undirected_graph",
    "to_undirected_graph_using",
]
