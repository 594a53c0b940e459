"""Tests for graphviz_dot_parser.ir.graph: materializing a GraphAST into a DotGraph."""

import pytest

from graphviz_dot_parser.errors import DanglingReferenceError
from graphviz_dot_parser.ir.ast import Assign, AttrDefault, Edge, GraphAST, Node, SubGraph
from graphviz_dot_parser.ir.graph import (
    DotGraph,
    to_directed_graph,
    to_directed_graph_using,
    to_graph,
    to_undirected_graph,
    to_undirected_graph_using,
)
from graphviz_dot_parser.parsers import parse
from graphviz_dot_parser.types import AttributeType


def _make_graph(*statements, is_directed: bool = True) -> GraphAST:
    return GraphAST(is_strict=False, is_directed=is_directed, statements=tuple(statements))


SIMPLE = (Node("1"), Node("2"), Edge("1", "2"))


class TestDirection:
    def test_directed_conversion(self):
        g = _make_graph(*SIMPLE, is_directed=True)
        assert to_undirected_graph(g) is None
        graph = to_directed_graph(g)
        assert graph is not None
        assert graph.is_directed()
        assert graph.node_count() == 2
        assert graph.edge_count() == 1

    def test_undirected_conversion(self):
        g = _make_graph(*SIMPLE, is_directed=False)
        assert to_directed_graph(g) is None
        graph = to_undirected_graph(g)
        assert graph is not None
        assert not graph.is_directed()
        assert graph.node_count() == 2
        assert graph.edge_count() == 1

    def test_custom_entry_points_gated_on_direction(self):
        g = _make_graph(*SIMPLE, is_directed=True)
        assert to_undirected_graph_using(g, lambda n, a: n, lambda a: None) is None
        assert to_directed_graph_using(g, lambda n, a: n, lambda a: None) is not None

    def test_to_graph_follows_ast(self):
        assert to_graph(_make_graph(*SIMPLE, is_directed=True)).is_directed()
        assert not to_graph(_make_graph(*SIMPLE, is_directed=False)).is_directed()

    def test_undirected_neighbors_are_symmetric(self):
        graph = to_graph(_make_graph(*SIMPLE, is_directed=False))
        assert graph.neighbors(0) == [1]
        assert graph.neighbors(1) == [0]

    def test_directed_neighbors_are_successors(self):
        graph = to_graph(_make_graph(*SIMPLE, is_directed=True))
        assert graph.neighbors(0) == [1]
        assert graph.neighbors(1) == []


class TestPayloads:
    def test_default_payloads(self):
        graph = to_graph(_make_graph(*SIMPLE))
        assert graph.nodes() == [(0, "1"), (1, "2")]
        assert graph.edges() == [(0, 1, None)]

    def test_custom_builders(self):
        g = _make_graph(
            Node("a", (("color", "red"),)),
            Node("b"),
            Edge("a", "b", (("weight", "3"),)),
        )
        graph = to_directed_graph_using(
            g,
            lambda node_id, attrs: (node_id, dict(attrs)),
            lambda attrs: int(dict(attrs)["weight"]),
        )
        assert graph is not None
        assert graph.node_weight(0) == ("a", {"color": "red"})
        assert graph.node_weight(1) == ("b", {})
        assert graph.edges() == [(0, 1, 3)]

    def test_builders_see_attributes_in_order(self):
        seen = []
        g = _make_graph(Node("a", (("k", "1"), ("k", "2"))))
        to_directed_graph_using(g, lambda n, attrs: seen.append(attrs), lambda attrs: None)
        assert seen == [(("k", "1"), ("k", "2"))]


class TestStatements:
    def test_empty_graph(self):
        graph = to_graph(_make_graph())
        assert graph.node_count() == 0
        assert graph.edge_count() == 0

    def test_redeclared_id_adds_second_node(self):
        graph = to_graph(_make_graph(Node("a"), Node("a"), Node("b"), Edge("a", "b")))
        assert graph.node_count() == 3
        assert graph.edges() == [(1, 2, None)]

    def test_parallel_edges_and_self_loops_kept(self):
        graph = to_graph(_make_graph(Node("a"), Node("b"), Edge("a", "b"), Edge("a", "b"), Edge("a", "a")))
        assert graph.edge_count() == 3

    def test_reserved_statements_contribute_nothing(self):
        g = _make_graph(
            AttrDefault(AttributeType.Graph, (("rankdir", "LR"),)),
            Assign("label", "x"),
            SubGraph("cluster", (Node("inner"),)),
            Node("a"),
        )
        graph = to_graph(g)
        assert graph.nodes() == [(0, "a")]
        assert graph.edge_count() == 0

    def test_unknown_statement_type(self):
        g = GraphAST(is_strict=False, is_directed=True, statements=(object(),))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            to_graph(g)


class TestDanglingReferences:
    def test_undeclared_endpoint(self):
        g = _make_graph(Node("a"), Edge("a", "b"))
        with pytest.raises(DanglingReferenceError) as excinfo:
            to_graph(g)
        assert excinfo.value.node_id == "b"
        assert excinfo.value.statement == Edge("a", "b")

    def test_forward_reference_is_dangling(self):
        g = _make_graph(Edge("a", "b"), Node("a"), Node("b"))
        with pytest.raises(DanglingReferenceError) as excinfo:
            to_graph(g)
        assert excinfo.value.node_id == "a"

    def test_message_names_endpoints_without_direction(self):
        with pytest.raises(DanglingReferenceError) as excinfo:
            to_graph(parse("graph { a -- b }"))
        assert str(excinfo.value) == "edge ('a', 'b') references undeclared node 'a'"
        assert "->" not in str(excinfo.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            to_graph(_make_graph(Edge("x", "y")))


class TestEndToEnd:
    def test_parse_and_materialize_undirected(self):
        ast_graph = parse("graph { 1; 2; 1 -- 2; }")
        graph = to_undirected_graph(ast_graph)
        assert isinstance(graph, DotGraph)
        assert graph.node_count() == 2
        assert graph.edge_count() == 1

    def test_parse_and_materialize_directed(self):
        ast_graph = parse("digraph { a [label=A]; b; a -> b [w=1] }")
        graph = to_directed_graph(ast_graph)
        assert graph is not None
        assert graph.nodes() == [(0, "a"), (1, "b")]
        assert graph.edges() == [(0, 1, None)]

    def test_repr(self):
        graph = to_graph(parse("digraph { 1; 2; 1 -> 2 }"))
        assert repr(graph) == (
            "DotGraph(kind=Directed, node_count=2, edge_count=1, "
            "nodes={0: '1', 1: '2'}, edges=[(0, 1, None)])"
        )
