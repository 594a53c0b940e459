"""Errors raised by the recognizer and the materializer.

Both derive from ValueError so callers can treat "bad input" uniformly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphviz_dot_parser.ir.ast import Edge

_CONTEXT_CHARS = 20


class DotSyntaxError(ValueError):
    """No grammar alternative matched at `position`.

    `position` is the furthest offset the recognizer reached before giving
    up, `expected` lists what could have matched there and `remaining` is
    the unconsumed input from that offset.
    """

    def __init__(self, src: str, position: int, expected: tuple[str, ...]) -> None:
        self.position = position
        self.expected = expected
        self.remaining = src[position:]
        self.line = src.count("\n", 0, position) + 1
        self.column = position - (src.rfind("\n", 0, position) + 1) + 1
        super().__init__(self._format())

    def _format(self) -> str:
        wanted = " or ".join(self.expected) if self.expected else "valid input"
        if self.remaining:
            near = self.remaining[:_CONTEXT_CHARS].split("\n", 1)[0]
            where = f"near {near!r}"
        else:
            where = "at end of input"
        return f"expected {wanted} at line {self.line}, column {self.column} {where}"


class DanglingReferenceError(ValueError):
    """An edge names a node id that no earlier node statement declared."""

    def __init__(self, node_id: str, statement: Edge) -> None:
        self.node_id = node_id
        self.statement = statement
        super().__init__(f"edge ({statement.from_id!r}, {statement.to_id!r}) references undeclared node {node_id!r}")
