#!/usr/bin/env python3
"""
UPPARSE LEXER - Line Tokenizer (Phase 1)
----------------------------------------
Splits raw UP text into physical lines. Line endings are normalized
(LF, CRLF and lone CR all terminate a line) but nothing else is touched:
trimming, comment skipping and blank-line handling belong to the parser.

Author: UpParse Team
Date: 2026-10-17
"""

import re
from typing import List

# C-locale whitespace, the set the UP grammar trims.
WHITESPACE = " \t\n\r\v\f"

LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LineLexer:
    """
    Turns an input buffer into an ordered list of untrimmed lines.
    Stateless: the same instance can tokenize any number of inputs.
    """

    def split_lines(self, text: str) -> List[str]:
        """
        Returns every line of `text` with its surrounding whitespace intact.

        A CRLF pair counts as one terminator. A trailing segment without a
        terminator is kept only when it is non-empty, so empty input yields
        no lines at all.
        """
        if not text:
            return []
        lines = LINE_BREAK.split(text)
        # split() leaves an empty tail when the text ends with a terminator
        if lines[-1] == "":
            lines.pop()
        return lines


def trim(line: str) -> str:
    return line.strip(WHITESPACE)
