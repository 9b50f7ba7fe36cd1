#!/usr/bin/env python3
"""
UPPARSE PARSE CONTEXT
---------------------
The state of a single parse: the tokenized lines and one forward-only
cursor shared by every recursive call. Each parse gets its own context,
so independent documents never share state.

Author: UpParse Team
Date: 2026-10-17
"""

from dataclasses import dataclass, field
from typing import List, Optional

from upparse.parsing.lexer import trim


@dataclass
class ParseContext:
    """
    Tracks the cursor over the tokenized input.

    Initialized by the parser and advanced monotonically; a line is never
    re-read once the cursor has moved past it.
    """
    lines: List[str] = field(default_factory=list)  # Raw lines from the lexer
    cursor: int = 0                                  # Index of the next unread line
    source: Optional[str] = None                     # File path, when parsing a file

    def exhausted(self) -> bool:
        return self.cursor >= len(self.lines)

    def raw(self) -> str:
        """The current line exactly as tokenized."""
        return self.lines[self.cursor]

    def current(self) -> str:
        """The current line with surrounding whitespace removed."""
        return trim(self.lines[self.cursor])

    def advance(self) -> None:
        self.cursor += 1

    @property
    def line_no(self) -> int:
        """1-based number of the current line."""
        return self.cursor + 1
