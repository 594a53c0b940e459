"""DOT parser: hand-rolled recursive descent.

Parses the supported DOT subset (see grammar.py) into the AST types from
ir.ast. Each rule either advances the cursor and returns its value, or
leaves the cursor where it found it and returns None. The cursor remembers
the furthest offset at which any rule failed, together with what it was
looking for there, and that is what DotSyntaxError reports.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from graphviz_dot_parser.errors import DotSyntaxError
from graphviz_dot_parser.grammar import (
    ATTR_SEPARATORS,
    BAREWORD_RE,
    BLOCK_COMMENT_RE,
    EDGE_OPS,
    KW_DIGRAPH,
    KW_GRAPH,
    KW_STRICT,
    LINE_COMMENT_RE,
    NUMERAL_RE,
    WHITESPACE_RE,
)
from graphviz_dot_parser.ir.ast import Edge, GraphAST, Node, Stmt

logger = logging.getLogger(__name__)


@dataclass
class _Cursor:
    """Stateful parser cursor over the input string."""

    src: str
    pos: int = 0
    fail_pos: int = 0
    fail_expected: list[str] = field(default_factory=list)

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def expected(self, what: str) -> None:
        """Record a failed expectation, keeping only the furthest ones."""
        if self.pos > self.fail_pos:
            self.fail_pos = self.pos
            self.fail_expected = [what]
        elif self.pos == self.fail_pos and what not in self.fail_expected:
            self.fail_expected.append(what)

    def consume(self, s: str) -> bool:
        if self.peek(s):
            self.pos += len(s)
            return True
        self.expected(repr(s))
        return False

    def consume_keyword(self, kw: str) -> bool:
        """Case-insensitive match of a keyword."""
        end = self.pos + len(kw)
        if self.src[self.pos : end].lower() == kw:
            self.pos = end
            return True
        self.expected(repr(kw))
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def skip(self) -> None:
        """Skip whitespace (newlines included) and comments."""
        while True:
            if self.match_re(WHITESPACE_RE) is not None:
                continue
            if self.match_re(LINE_COMMENT_RE) is not None:
                continue
            if self.match_re(BLOCK_COMMENT_RE) is not None:
                continue
            break

    def error(self) -> DotSyntaxError:
        return DotSyntaxError(self.src, self.fail_pos, tuple(self.fail_expected))

    # ── Identifiers ───────────────────────────────────────────────────────────

    def parse_quoted(self) -> str | None:
        """Parse "..." where the only escape is \\"."""
        if not self.peek('"'):
            return None
        saved = self.pos
        self.pos += 1
        buf: list[str] = []
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(buf)
            if ch == "\\":
                if not self.src.startswith('"', self.pos + 1):
                    self.expected("'\\\"'")
                    self.pos = saved
                    return None
                buf.append('"')
                self.pos += 2
                continue
            buf.append(ch)
            self.pos += 1
        self.expected("closing '\"'")
        self.pos = saved
        return None

    def parse_id(self) -> str | None:
        """Bareword, then numeral, then quoted string; first match wins."""
        text = self.match_re(BAREWORD_RE)
        if text is None:
            text = self.match_re(NUMERAL_RE)
        if text is None:
            text = self.parse_quoted()
        if text is None:
            self.expected("identifier")
            return None
        self.skip()
        return text

    # ── Attribute lists ───────────────────────────────────────────────────────

    def parse_attr_group(self) -> list[tuple[str, str]] | None:
        saved = self.pos
        if not self.consume("["):
            return None
        self.skip()
        pairs: list[tuple[str, str]] = []
        while True:
            key = self.parse_id()
            if key is None:
                break
            self.skip()
            if not self.consume("="):
                self.pos = saved
                return None
            self.skip()
            value = self.parse_id()
            if value is None:
                self.pos = saved
                return None
            pairs.append((key, value))
            if self.src[self.pos : self.pos + 1] in ATTR_SEPARATORS:
                self.pos += 1
            self.skip()
        if not self.consume("]"):
            self.pos = saved
            return None
        self.skip()
        return pairs

    def parse_attr_list(self) -> tuple[tuple[str, str], ...] | None:
        """Zero or more [..] groups merged in source order."""
        attrs: list[tuple[str, str]] = []
        while True:
            if not self.peek("["):
                self.expected("'['")
                return tuple(attrs)
            group = self.parse_attr_group()
            if group is None:
                return None
            attrs.extend(group)

    # ── Statements ────────────────────────────────────────────────────────────

    def try_parse_edge_stmt(self, edge_op: str) -> Edge | None:
        saved = self.pos
        from_id = self.parse_id()
        if from_id is None:
            return None
        self.skip()
        if not self.consume(edge_op):
            self.pos = saved
            return None
        self.skip()
        to_id = self.parse_id()
        if to_id is None:
            self.pos = saved
            return None
        attrs = self.parse_attr_list()
        if attrs is None:
            self.pos = saved
            return None
        return Edge(from_id, to_id, attrs)

    def try_parse_node_stmt(self) -> Node | None:
        saved = self.pos
        node_id = self.parse_id()
        if node_id is None:
            return None
        attrs = self.parse_attr_list()
        if attrs is None:
            self.pos = saved
            return None
        return Node(node_id, attrs)

    def parse_statement(self, edge_op: str) -> Stmt | None:
        self.skip()
        stmt: Stmt | None = self.try_parse_edge_stmt(edge_op)
        if stmt is None:
            stmt = self.try_parse_node_stmt()
        if stmt is None:
            return None
        self.skip()
        self.consume(";")
        self.skip()
        return stmt

    # ── Top-level parse ───────────────────────────────────────────────────────

    def parse_graph(self) -> GraphAST:
        self.skip()
        is_strict = self.consume_keyword(KW_STRICT)
        self.skip()
        if self.consume_keyword(KW_DIGRAPH):
            is_directed = True
        elif self.consume_keyword(KW_GRAPH):
            is_directed = False
        else:
            raise self.error()
        self.skip()
        graph_id = self.parse_id()
        self.skip()
        if not self.consume("{"):
            raise self.error()
        logger.debug("graph header: strict=%s directed=%s id=%r", is_strict, is_directed, graph_id)

        edge_op = EDGE_OPS[is_directed]
        statements: list[Stmt] = []
        while True:
            stmt = self.parse_statement(edge_op)
            if stmt is None:
                break
            statements.append(stmt)

        self.skip()
        if not self.consume("}"):
            raise self.error()
        self.skip()
        if not self.eof():
            self.expected("end of input")
            raise self.error()

        logger.debug("parsed %d statements", len(statements))
        return GraphAST(
            is_strict=is_strict,
            is_directed=is_directed,
            id=graph_id,
            statements=tuple(statements),
        )


class DotParser:
    """Parser for the supported DOT subset."""

    def parse(self, src: str) -> GraphAST:
        cursor = _Cursor(src=src)
        return cursor.parse_graph()
