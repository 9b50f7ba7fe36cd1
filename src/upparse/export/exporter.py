#!/usr/bin/env python3
"""
UPPARSE EXPORTER - Tree Views
-----------------------------
Presents a parsed Document as plain Python containers or as YAML text.
This is a read-only view of the tree; it does not write UP notation.

Author: UpParse Team
Date: 2026-10-17
"""

import io
from typing import Any, Dict, List, Union

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from upparse.core.models import BlockValue, Document, Node, Value

Plain = Union[str, Dict[str, Any], List[str]]


class UpExporter:
    """
    Converts Documents into other representations.
    Duplicate keys collapse to their first occurrence, matching lookup.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def to_plain(self, doc: Union[Document, BlockValue]) -> Dict[str, Any]:
        """Nested dicts, lists and strings in source order."""
        result: Dict[str, Any] = {}
        for node in doc:
            if node.key not in result:
                result[node.key] = self._plain_value(node.value)
        return result

    def _plain_value(self, value: Value) -> Plain:
        if value.kind == "block":
            return self.to_plain(value)
        if value.kind == "list":
            return [item.data for item in value]
        return value.data

    def _commented_map(self, nodes: Union[Document, BlockValue]) -> CommentedMap:
        mapping = CommentedMap()
        for node in nodes:
            if node.key in mapping:
                continue
            mapping[node.key] = self._commented_value(node)
            # Annotations have no YAML equivalent; keep them visible as comments.
            if node.type_annotation is not None and node.value.kind == "string":
                mapping.yaml_add_eol_comment(f"!{node.type_annotation}", node.key)
        return mapping

    def _commented_value(self, node: Node) -> Any:
        value = node.value
        if value.kind == "block":
            return self._commented_map(value)
        if value.kind == "list":
            return CommentedSeq(item.data for item in value)
        return value.data

    def to_yaml(self, doc: Document) -> str:
        if doc.is_empty():
            return "{}\n"
        stream = io.StringIO()
        self.yaml.dump(self._commented_map(doc), stream)
        return stream.getvalue()
