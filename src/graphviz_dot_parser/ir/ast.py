"""AST data structures for the DOT subset.

These types represent the parsed form of a graph description: the
GraphAST header plus an ordered tuple of statements. Statements are
plain values and never reference each other; edges name their
endpoints by textual id.

AttrDefault, Assign and SubGraph are reserved variants. The recognizer
never constructs them in this version.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from graphviz_dot_parser.types import Attributes, AttributeType


@dataclass(frozen=True)
class Node:
    id: str
    attributes: Attributes = ()


@dataclass(frozen=True)
class Edge:
    from_id: str
    to_id: str
    attributes: Attributes = ()


@dataclass(frozen=True)
class AttrDefault:
    """Reserved: `graph|node|edge [k=v]` default statement."""

    scope: AttributeType
    attributes: Attributes = ()


@dataclass(frozen=True)
class Assign:
    """Reserved: `key = value` statement."""

    key: str
    value: str


@dataclass(frozen=True)
class SubGraph:
    """Reserved: `subgraph [id] { ... }` statement."""

    id: str | None
    statements: tuple[Stmt, ...] = ()


Stmt = Union[Node, Edge, AttrDefault, Assign, SubGraph]


@dataclass(frozen=True)
class GraphAST:
    is_strict: bool
    is_directed: bool
    id: str | None = None
    statements: tuple[Stmt, ...] = ()
