"""Shared type definitions for graphviz-dot-parser.

Enums and aliases used by the recognizer, the AST, and the materializer.
"""

from __future__ import annotations

from enum import Enum, auto

# Ordered (key, value) pairs; duplicate keys are kept.
Attributes = tuple[tuple[str, str], ...]


class AttributeType(Enum):
    Graph = auto()  # graph [k=v]
    Node = auto()  # node [k=v]
    Edge = auto()  # edge [k=v]
