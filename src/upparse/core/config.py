#!/usr/bin/env python3
"""
UPPARSE CONFIG
--------------
Options shared by the parser, the engine and the CLI.

Author: UpParse Team
Date: 2026-10-17
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    strict: bool = False           # Fail on unterminated constructs instead of closing them at EOF
    encoding: str = "utf-8-sig"    # BOM-aware decoding for files
    extension: str = ".up"         # Suffix matched by directory loading


DEFAULT_OPTIONS = ParserOptions()
