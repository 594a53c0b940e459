"""Intermediate representation: AST and materialized graph."""

from graphviz_dot_parser.ir.ast import Assign, AttrDefault, Edge, GraphAST, Node, Stmt, SubGraph
from graphviz_dot_parser.ir.graph import DotGraph

__all__ = [
    "Assign",
    "AttrDefault",
    "DotGraph",
    "Edge",
    "GraphAST",
    "Node",
    "Stmt",
    "SubGraph",
]
