"""Grammar for the supported DOT subset, plus the token patterns the parser uses.

The recognizer in parsers/dot.py is hand-rolled recursive descent; GRAMMAR
below documents the rules it implements. Whitespace and comments (SKIP) are
allowed, but never required, between any two tokens. Keywords are matched
case-insensitively.
"""

from __future__ import annotations

import re

GRAMMAR = r"""
graph      = SKIP "strict"? ("digraph" / "graph") ID? "{" stmt* "}" SKIP EOI
stmt       = (edge_stmt / node_stmt) ";"?
edge_stmt  = ID edge_op ID attr_list
edge_op    = "->"    (digraph)
           / "--"    (graph)
node_stmt  = ID attr_list
attr_list  = ("[" (ID "=" ID ("," / ";")?)* "]")*

ID         = bareword / numeral / quoted
bareword   = ~"[_A-Za-z\u0080-\U0010ffff][_A-Za-z0-9\u0080-\U0010ffff]*"
numeral    = ~"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)"
quoted     = '"' (~'[^"\\]' / '\\"')* '"'

SKIP       = (~"[ \t\r\n\f\v]+" / "//" ~"[^\n]*" / "#" ~"[^\n]*" / "/*" ... "*/")*
"""

BAREWORD_RE = re.compile(r"[_A-Za-z\u0080-\U0010ffff][_A-Za-z0-9\u0080-\U0010ffff]*")
NUMERAL_RE = re.compile(r"-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)")

WHITESPACE_RE = re.compile(r"[ \t\r\n\f\v]+")
LINE_COMMENT_RE = re.compile(r"(?://|#)[^\n]*")
BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

KW_STRICT = "strict"
KW_DIGRAPH = "digraph"
KW_GRAPH = "graph"

EDGE_OPS: dict[bool, str] = {
    True: "->",
    False: "--",
}

ATTR_SEPARATORS = (",", ";")
