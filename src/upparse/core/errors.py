#!/usr/bin/env python3
"""
UPPARSE ERRORS
--------------
Failures surfaced by the loaders and, in strict mode, by the parser.

Author: UpParse Team
Date: 2026-10-17
"""

from pathlib import Path
from typing import Optional, Union


class UpError(RuntimeError):
    """Base class for every failure raised by upparse."""


class UpIOError(UpError):
    """Raised when a source file cannot be opened or read."""

    def __init__(self, path: Union[str, Path], reason: str, status: str = "READ_ERROR"):
        self.path = str(path)
        self.reason = reason
        self.status = status           # FILE_NOT_FOUND or READ_ERROR
        super().__init__(f"Failed to open file '{self.path}': {reason}")


class UnterminatedConstructError(UpError):
    """
    Raised in strict mode when end of input is reached inside a block,
    list or fenced literal.
    """

    def __init__(self, construct: str, line_no: int, source: Optional[str] = None):
        self.construct = construct
        self.line_no = line_no
        self.source = source
        where = f"{source}:{line_no}" if source else f"line {line_no}"
        super().__init__(f"Unterminated {construct} opened at {where}")
