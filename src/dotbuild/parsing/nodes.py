# nodes.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Node:
    """Base for every syntax node: source position of its first token."""
    line: int
    column: int


@dataclass(frozen=True)
class IdentifierNode(Node):
    value: str


@dataclass(frozen=True)
class StringNode(Node):
    value: str


@dataclass(frozen=True)
class ArrayNode(Node):
    elements: Tuple["Leaf", ...]


Leaf = Union[IdentifierNode, StringNode]
Value = Union[IdentifierNode, StringNode, ArrayNode]


@dataclass(frozen=True)
class PropertyNode(Node):
    """`name = value`; name keeps the spelling from the file."""
    name: str
    value: Value


@dataclass(frozen=True)
class ModuleNode(Node):
    name: str
    properties: Tuple[PropertyNode, ...]
