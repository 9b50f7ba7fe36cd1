"""Parser and tree model for UP (Unified Properties) configuration text."""

from .core.config import ParserOptions
from .core.engine import ParseResult, UpEngine, load_file, parse_file
from .core.errors import UnterminatedConstructError, UpError, UpIOError
from .core.models import (
    BlockValue,
    Document,
    ListValue,
    Node,
    StringValue,
    Value,
    block_get,
    document_get,
)
from .parsing.parser import UpParser, parse

__all__ = [
    "BlockValue",
    "Document",
    "ListValue",
    "Node",
    "ParseResult",
    "ParserOptions",
    "StringValue",
    "UnterminatedConstructError",
    "UpEngine",
    "UpError",
    "UpIOError",
    "UpParser",
    "Value",
    "block_get",
    "document_get",
    "load_file",
    "parse",
    "parse_file",
]
