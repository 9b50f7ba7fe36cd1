#!/usr/bin/env python3
"""
UPPARSE ENGINE - File Loading
-----------------------------
Reads UP sources from disk and hands them to the parser. Every load
produces its own ParseResult, so failures travel with the call that caused
them instead of living in shared state.

Author: UpParse Team
Date: 2026-10-17
"""

import time
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from upparse.core.config import DEFAULT_OPTIONS, ParserOptions
from upparse.core.errors import UnterminatedConstructError, UpError, UpIOError
from upparse.core.models import Document
from upparse.parsing.parser import UpParser

logger = logging.getLogger("upparse.engine")

PathLike = Union[str, Path]


@dataclass
class ParseResult:
    """
    Outcome of loading one source: either a Document or the failure that
    prevented it. Never both.
    """
    source: str                          # File path, or "<string>" for in-memory text
    status: str                          # PARSED, FILE_NOT_FOUND, READ_ERROR, STRUCTURE_ERROR
    document: Optional[Document] = None
    error: Optional[UpError] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


class UpEngine:
    """
    Front door for parsing text and files.
    Keeps the most recent diagnostic of this instance for `last_error()`.
    """

    def __init__(self, options: ParserOptions = DEFAULT_OPTIONS):
        self.options = options
        self.parser = UpParser(options)
        self._last_error: Optional[str] = None

    def last_error(self) -> Optional[str]:
        """The most recent diagnostic recorded by this engine, if any."""
        return self._last_error

    def parse_text(self, text: str, source: Optional[str] = None) -> Document:
        try:
            return self.parser.parse(text, source=source)
        except UpError as e:
            self._last_error = str(e)
            raise

    def parse_file(self, path: PathLike) -> Document:
        """
        Reads the whole file into memory, then parses it.
        Raises UpIOError when the file cannot be opened or decoded.
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self.options.encoding)
        except FileNotFoundError:
            self._record(file_path, "file not found")
            raise UpIOError(file_path, "file not found", status="FILE_NOT_FOUND") from None
        except (OSError, UnicodeDecodeError) as e:
            self._record(file_path, str(e))
            raise UpIOError(file_path, str(e)) from e

        return self.parse_text(text, source=str(file_path))

    def load_text(self, text: str) -> ParseResult:
        try:
            return ParseResult(source="<string>", status="PARSED", document=self.parse_text(text))
        except UnterminatedConstructError as e:
            return ParseResult(source="<string>", status="STRUCTURE_ERROR", error=e)

    def load_file(self, path: PathLike) -> ParseResult:
        """Like parse_file, but reports failures in the result instead of raising."""
        source = str(path)
        try:
            document = self.parse_file(path)
        except UpIOError as e:
            return ParseResult(source=source, status=e.status, error=e)
        except UnterminatedConstructError as e:
            logger.error(f"Structure error in {source}: {str(e)}")
            return ParseResult(source=source, status="STRUCTURE_ERROR", error=e)
        return ParseResult(source=source, status="PARSED", document=document)

    def load_directory(self, path: PathLike, extension: Optional[str] = None) -> List[ParseResult]:
        """
        Recursively loads every file with the configured extension.
        Symlinks are skipped to avoid loops; results are sorted by path.
        """
        root = Path(path)
        if not root.is_dir():
            raise UpIOError(root, "not a directory")

        ext = normalize_extension(extension or self.options.extension)
        targets = sorted(
            f for f in root.rglob("*")
            if f.is_file() and not f.is_symlink() and f.suffix.lower() == ext
        )
        return [self.load_file(f) for f in targets]

    def generate_summary(self, results: List[ParseResult]) -> Dict[str, Any]:
        """Counts outcomes over a batch of loads."""
        total = len(results)
        parsed = sum(1 for r in results if r.ok)
        return {
            "total_files": total,
            "parsed": parsed,
            "failed": total - parsed,
            "success_rate": (parsed / total) if total > 0 else 0,
            "top_level_nodes": sum(len(r.document) for r in results if r.ok),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _record(self, path: Path, reason: str) -> None:
        self._last_error = f"Failed to open file '{path}': {reason}"
        logger.error(self._last_error)


def parse_file(path: PathLike, options: ParserOptions = DEFAULT_OPTIONS) -> Document:
    """Reads and parses a UP file. Raises UpIOError on I/O failure."""
    return UpEngine(options).parse_file(path)


def load_file(path: PathLike, options: ParserOptions = DEFAULT_OPTIONS) -> ParseResult:
    """Reads and parses a UP file, reporting failure in the returned ParseResult."""
    return UpEngine(options).load_file(path)


def normalize_extension(extension: str) -> str:
    """Lowercases a suffix filter and adds the leading dot: "UP" -> ".up"."""
    ext = extension.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"
