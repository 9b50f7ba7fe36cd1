#!/usr/bin/env python3
"""
UPPARSE CORE MODELS
-------------------
Defines the tree produced by the parser: a Document owns Nodes, a Node owns
exactly one Value, and a Value is one of String, Block or List.

Containers keep source order and never enforce key uniqueness. Lookups
scan linearly and return the first match.

Author: UpParse Team
Date: 2026-10-17
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union


@dataclass
class StringValue:
    """A decoded text payload: a plain value or the body of a fenced literal."""
    data: str
    kind: str = field(default="string", init=False, repr=False)

    @property
    def length(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.data


@dataclass
class BlockValue:
    """
    An ordered, duplicate-tolerant key/value map nested under '{ }'.

    Entries are stored as Nodes so each keeps its own type annotation.
    """
    nodes: List["Node"] = field(default_factory=list)
    kind: str = field(default="block", init=False, repr=False)

    def add(self, node: "Node") -> None:
        self.nodes.append(node)

    def set(self, key: str, value: "Value", type_annotation: Optional[str] = None) -> "Node":
        """Appends a new entry. Existing entries with the same key are kept."""
        node = Node(key=key, value=value, type_annotation=type_annotation)
        self.nodes.append(node)
        return node

    def get(self, key: str) -> Optional["Value"]:
        return block_get(self, key)

    def keys(self) -> List[str]:
        return [node.key for node in self.nodes]

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass
class ListValue:
    """An ordered sequence of leaf strings nested under '[ ]'."""
    items: List[StringValue] = field(default_factory=list)
    kind: str = field(default="list", init=False, repr=False)

    def append(self, value: StringValue) -> None:
        self.items.append(value)

    def __iter__(self) -> Iterator[StringValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


Value = Union[StringValue, BlockValue, ListValue]


@dataclass
class Node:
    """
    The atomic entry of a Document or Block.

    A Node represents one 'key[!annotation] value' entry. The annotation is
    stored verbatim and never applied to the value.
    """
    key: str                               # Text before the first '!' of the key segment
    value: Value                           # Exclusively owned payload
    type_annotation: Optional[str] = None  # Text after '!' or None when absent
    line_no: int = 0                       # 1-based source line of the entry (0 if built by hand)


@dataclass
class Document:
    """The top-level ordered sequence of Nodes produced by one parse."""
    nodes: List[Node] = field(default_factory=list)

    def add(self, node: Node) -> None:
        self.nodes.append(node)

    def get(self, key: str) -> Optional[Node]:
        return document_get(self, key)

    def keys(self) -> List[str]:
        return [node.key for node in self.nodes]

    def is_empty(self) -> bool:
        return not self.nodes

    def size(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)


def document_get(doc: Document, key: str) -> Optional[Node]:
    """Returns the first top-level Node whose key equals `key`, or None."""
    for node in doc.nodes:
        if node.key == key:
            return node
    return None


def block_get(block: BlockValue, key: str) -> Optional[Value]:
    """Returns the Value of the first entry keyed `key` inside a block, or None."""
    for node in block.nodes:
        if node.key == key:
            return node.value
    return None
