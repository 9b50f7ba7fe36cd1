#!/usr/bin/env python3
"""
UPPARSE PARSER - Recursive Descent (Phase 2)
--------------------------------------------
Walks the tokenized lines with a single cursor and builds the Document tree.

Grammar (line oriented, indentation insensitive):
    entry      := key ['!' annotation] ws+ value_text
    value_text := '```' raw lines ... '```'
                | '{' entries ... '}'
                | '[' opaque items ... ']'
                | plain text

Blank lines and lines starting with '#' are skipped at every level.
Blocks recurse into full entries; list items are always leaf strings.
Unterminated constructs are closed at end of input unless strict mode
is enabled.

Author: UpParse Team
Date: 2026-10-17
"""

import logging
from typing import Optional, Tuple

from upparse.core.config import DEFAULT_OPTIONS, ParserOptions
from upparse.core.errors import UnterminatedConstructError
from upparse.core.models import BlockValue, Document, ListValue, Node, StringValue, Value
from upparse.parsing.context import ParseContext
from upparse.parsing.lexer import LineLexer, trim

logger = logging.getLogger("upparse.parser")

FENCE = "```"
BLOCK_OPEN, BLOCK_CLOSE = "{", "}"
LIST_OPEN, LIST_CLOSE = "[", "]"
COMMENT = "#"


def is_skippable(trimmed: str) -> bool:
    """Blank lines and full-line comments carry no entry."""
    return not trimmed or trimmed.startswith(COMMENT)


def split_entry(trimmed: str) -> Tuple[str, Optional[str], str]:
    """
    Splits a trimmed entry line into (key, annotation, value_text).

    The key segment ends at the first space or tab; the annotation is
    whatever follows the first '!' inside the key segment.
    Example: "age!int 30" -> ("age", "int", "30")
    """
    space = trimmed.find(" ")
    tab = trimmed.find("\t")
    candidates = [idx for idx in (space, tab) if idx != -1]

    if candidates:
        sep = min(candidates)
        key_part = trimmed[:sep]
        value_text = trim(trimmed[sep + 1:])
    else:
        key_part = trimmed
        value_text = ""

    key, bang, annotation = key_part.partition("!")
    return key, (annotation if bang else None), value_text


class UpParser:
    """
    Builds a Document from UP text.

    The parser itself holds only configuration; all cursor state lives in
    the ParseContext created for each call, so one instance can be reused.
    """

    def __init__(self, options: ParserOptions = DEFAULT_OPTIONS):
        self.options = options
        self.lexer = LineLexer()

    def parse(self, text: str, source: Optional[str] = None) -> Document:
        """
        Tokenizes `text` up front, then consumes it entry by entry.
        Top-level Nodes are appended in source order.
        """
        context = ParseContext(lines=self.lexer.split_lines(text), source=source)
        document = Document()

        while not context.exhausted():
            node = self.parse_line(context)
            if node is not None:
                document.add(node)

        logger.debug("Parsed %d top-level nodes from %d lines", len(document), len(context.lines))
        return document

    def parse_line(self, context: ParseContext) -> Optional[Node]:
        """
        Consumes one logical entry starting at the cursor.
        Returns None for blank and comment lines, which are skipped.
        """
        trimmed = context.current()
        if is_skippable(trimmed):
            context.advance()
            return None

        line_no = context.line_no
        key, annotation, value_text = split_entry(trimmed)
        context.advance()

        value = self.parse_value(context, value_text, line_no)
        return Node(key=key, value=value, type_annotation=annotation, line_no=line_no)

    def parse_value(self, context: ParseContext, value_text: str, line_no: int) -> Value:
        # Only the fence marker matters; the rest of the opening line is dropped.
        if value_text.startswith(FENCE):
            return self._parse_multiline(context, line_no)
        if value_text == BLOCK_OPEN:
            return self._parse_block(context, line_no)
        if value_text == LIST_OPEN:
            return self._parse_list(context, line_no)
        return StringValue(value_text)

    def _parse_multiline(self, context: ParseContext, line_no: int) -> StringValue:
        """Collects raw lines verbatim until a line trimming to the fence."""
        body = []
        while not context.exhausted():
            if context.current() == FENCE:
                context.advance()
                return StringValue("\n".join(body))
            body.append(context.raw())
            context.advance()

        self._close_at_eof("multiline string", line_no, context)
        return StringValue("\n".join(body))

    def _parse_block(self, context: ParseContext, line_no: int) -> BlockValue:
        block = BlockValue()
        while not context.exhausted():
            trimmed = context.current()
            if trimmed == BLOCK_CLOSE:
                context.advance()
                return block
            if is_skippable(trimmed):
                context.advance()
                continue

            node = self.parse_line(context)
            if node is not None:
                block.add(node)

        self._close_at_eof("block", line_no, context)
        return block

    def _parse_list(self, context: ParseContext, line_no: int) -> ListValue:
        """List items are opaque text, even when they look like entries or openers."""
        items = ListValue()
        while not context.exhausted():
            trimmed = context.current()
            context.advance()
            if trimmed == LIST_CLOSE:
                return items
            if is_skippable(trimmed):
                continue
            items.append(StringValue(trimmed))

        self._close_at_eof("list", line_no, context)
        return items

    def _close_at_eof(self, construct: str, line_no: int, context: ParseContext) -> None:
        if self.options.strict:
            raise UnterminatedConstructError(construct, line_no, context.source)
        logger.debug("Implicitly closing %s opened at line %d at end of input", construct, line_no)


def parse(text: str, options: ParserOptions = DEFAULT_OPTIONS) -> Document:
    """Parses UP text into a Document."""
    return UpParser(options).parse(text)
