"""Graph materialization: converts a GraphAST into a networkx multigraph.

Nodes are keyed by an integer index assigned in declaration order and carry
their payload under the "data" attribute; edges carry theirs the same way.
The textual id -> index mapping only lives for the duration of one
materialization, so the resulting graph cannot be queried by DOT id.

Edges resolve their endpoints against the nodes declared *before* them:
forward references are not supported.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import networkx as nx

from graphviz_dot_parser.errors import DanglingReferenceError
from graphviz_dot_parser.ir import ast
from graphviz_dot_parser.types import Attributes

logger = logging.getLogger(__name__)

NodeBuilder = Callable[[str, Attributes], Any]
EdgeBuilder = Callable[[Attributes], Any]


def default_node(node_id: str, attributes: Attributes) -> str:
    """Label a node with its textual id."""
    return node_id


def default_edge(attributes: Attributes) -> None:
    return None


class DotGraph:
    """A materialized graph.

    Wraps a networkx MultiDiGraph (digraph) or MultiGraph (graph) and
    exposes index-based queries. Parallel edges and self loops are kept.
    """

    def __init__(self, graph: nx.MultiDiGraph | nx.MultiGraph) -> None:
        self.graph = graph

    @classmethod
    def from_ast(
        cls,
        ast_graph: ast.GraphAST,
        new_node: NodeBuilder = default_node,
        new_edge: EdgeBuilder = default_edge,
    ) -> DotGraph:
        """Build a DotGraph in the direction declared by `ast_graph`.

        Raises DanglingReferenceError if an edge names a node id that was
        not declared by an earlier node statement.
        """
        graph: nx.MultiDiGraph | nx.MultiGraph = nx.MultiDiGraph() if ast_graph.is_directed else nx.MultiGraph()
        indices: dict[str, int] = {}

        for stmt in ast_graph.statements:
            if isinstance(stmt, ast.Node):
                index = graph.number_of_nodes()
                graph.add_node(index, data=new_node(stmt.id, stmt.attributes))
                # A repeated id adds a second node; later edges bind to it.
                indices[stmt.id] = index
            elif isinstance(stmt, ast.Edge):
                source = _lookup(indices, stmt.from_id, stmt)
                target = _lookup(indices, stmt.to_id, stmt)
                graph.add_edge(source, target, data=new_edge(stmt.attributes))
            elif isinstance(stmt, ast.AttrDefault):
                pass  # reserved
            elif isinstance(stmt, ast.Assign):
                pass  # reserved
            elif isinstance(stmt, ast.SubGraph):
                pass  # reserved
            else:
                raise TypeError(f"unknown statement type: {type(stmt).__name__}")

        logger.debug(
            "materialized %s graph: %d nodes, %d edges",
            "directed" if ast_graph.is_directed else "undirected",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return cls(graph)

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def node_weight(self, index: int) -> Any:
        return self.graph.nodes[index]["data"]

    def nodes(self) -> list[tuple[int, Any]]:
        return [(index, data) for index, data in self.graph.nodes(data="data")]

    def edges(self) -> list[tuple[int, int, Any]]:
        """Edges as (source, target, payload), grouped by source node."""
        return [(u, v, data) for u, v, data in self.graph.edges(data="data")]

    def neighbors(self, index: int) -> list[int]:
        """Successors for a digraph, adjacent nodes for a graph."""
        return sorted(self.graph.neighbors(index))

    def __repr__(self) -> str:
        kind = "Directed" if self.is_directed() else "Undirected"
        nodes = ", ".join(f"{index}: {data!r}" for index, data in self.nodes())
        edges = ", ".join(f"({u}, {v}, {data!r})" for u, v, data in self.edges())
        return (
            f"DotGraph(kind={kind}, node_count={self.node_count()}, "
            f"edge_count={self.edge_count()}, nodes={{{nodes}}}, edges=[{edges}])"
        )


def _lookup(indices: dict[str, int], node_id: str, stmt: ast.Edge) -> int:
    try:
        return indices[node_id]
    except KeyError:
        raise DanglingReferenceError(node_id, stmt) from None


# ─── Public API ──────────────────────────────────────────────────────────────


def to_directed_graph_using(
    ast_graph: ast.GraphAST,
    new_node: NodeBuilder,
    new_edge: EdgeBuilder,
) -> DotGraph | None:
    """Materialize a digraph with custom payloads; None for an undirected AST."""
    if not ast_graph.is_directed:
        return None
    return DotGraph.from_ast(ast_graph, new_node, new_edge)


def to_undirected_graph_using(
    ast_graph: ast.GraphAST,
    new_node: NodeBuilder,
    new_edge: EdgeBuilder,
) -> DotGraph | None:
    """Materialize an undirected graph with custom payloads; None for a digraph AST."""
    if ast_graph.is_directed:
        return None
    return DotGraph.from_ast(ast_graph, new_node, new_edge)


def to_directed_graph(ast_graph: ast.GraphAST) -> DotGraph | None:
    return to_directed_graph_using(ast_graph, default_node, default_edge)


def to_undirected_graph(ast_graph: ast.GraphAST) -> DotGraph | None:
    return to_undirected_graph_using(ast_graph, default_node, default_edge)


def to_graph(ast_graph: ast.GraphAST) -> DotGraph:
    """Materialize in whichever direction the AST declares."""
    return DotGraph.from_ast(ast_graph)
