#!/usr/bin/env python3
"""
UPPARSE CLI - Document Inspector
--------------------------------
Parses UP files and prints what the parser built: the whole tree, a single
entry, a YAML view, or a report over a directory of sources.

Author: UpParse Team
Date: 2026-10-17
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from upparse.cli.formatter import UpFormatter
from upparse.core.config import ParserOptions
from upparse.core.engine import UpEngine, normalize_extension
from upparse.core.errors import UpError
from upparse.export.exporter import UpExporter

VERSION = "upparse v1.0.0"

# Global console for consistent styling across the application
console = Console()


class UpParseCLI:
    """
    CLI wrapper that translates user commands into engine calls.
    Each command returns a process exit code.
    """

    def __init__(self, out: Optional[Console] = None):
        """Initializes the CLI and sets up the argument parser."""
        self.console = out or console
        self.formatter = UpFormatter(self.console)
        self.parser = argparse.ArgumentParser(
            prog="upparse",
            description="UpParse - Parser and inspector for UP (Unified Properties) files",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=VERSION)
        self.parser.add_argument("--strict", action="store_true", help="Fail on unterminated blocks, lists and fences")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        show_parser = subparsers.add_parser("show", help="Print the parsed tree of a UP file")
        show_parser.add_argument("path", help="Path to a UP file")

        get_parser = subparsers.add_parser("get", help="Print the value of a top-level key")
        get_parser.add_argument("path", help="Path to a UP file")
        get_parser.add_argument("key", help="Top-level key to look up")

        export_parser = subparsers.add_parser("export", help="Print a YAML view of a UP file")
        export_parser.add_argument("path", help="Path to a UP file")

        scan_parser = subparsers.add_parser("scan", help="Parse every UP file under a directory")
        scan_parser.add_argument("path", help="Directory to scan")
        scan_parser.add_argument("--ext", default=".up", help="File extension filter (default: .up)")

    def _cmd_show(self, engine: UpEngine, args: argparse.Namespace) -> int:
        doc = engine.parse_file(args.path)
        self.formatter.show_document(doc, args.path)
        return 0

    def _cmd_get(self, engine: UpEngine, args: argparse.Namespace) -> int:
        doc = engine.parse_file(args.path)
        node = doc.get(args.key)
        if node is None:
            self.console.print(f"[bold yellow]Key '{escape(args.key)}' not found in {escape(args.path)}[/bold yellow]")
            return 1
        self.formatter.show_value(node.value)
        return 0

    def _cmd_export(self, engine: UpEngine, args: argparse.Namespace) -> int:
        doc = engine.parse_file(args.path)
        text = UpExporter().to_yaml(doc)
        self.console.print(Panel(Syntax(text.rstrip(), "yaml", theme="monokai"), title=args.path, border_style="green"))
        return 0

    def _cmd_scan(self, engine: UpEngine, args: argparse.Namespace) -> int:
        root = Path(args.path)
        if not root.is_dir():
            self.console.print(f"[bold red]Error:[/bold red] Path '{escape(args.path)}' is not a directory.")
            return 1
        results = engine.load_directory(root, extension=args.ext)
        if not results:
            self.console.print(f"\n[bold yellow]⚠️  No {normalize_extension(args.ext)} files found.[/bold yellow]")
            return 0
        summary = engine.generate_summary(results)
        self.formatter.print_report(results, summary)
        return 0 if summary["failed"] == 0 else 1

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)
        if args.command is None:
            self.parser.print_help()
            return 0

        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
        engine = UpEngine(ParserOptions(strict=args.strict))
        handler = getattr(self, f"_cmd_{args.command}")
        try:
            return handler(engine, args)
        except UpError as e:
            self.console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point with interrupt handling."""
    try:
        return UpParseCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
