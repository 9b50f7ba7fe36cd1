# src/upparse/cli/formatter.py
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from upparse.core.engine import ParseResult
from upparse.core.models import Document, Node, Value

# Initialize the Rich console for high-quality terminal output
console = Console()


class UpFormatter:
    """
    UpFormatter: renders parsed documents and batch reports for the CLI.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def _label(self, node: Node) -> str:
        label = f"[bold cyan]{escape(node.key)}[/bold cyan]"
        if node.type_annotation is not None:
            label += f"[magenta]!{escape(node.type_annotation)}[/magenta]"
        return label

    def _attach(self, branch: Tree, node: Node):
        value = node.value
        if value.kind == "block":
            sub = branch.add(f"{self._label(node)} [dim]{{ {len(value)} }}[/dim]")
            for child in value:
                self._attach(sub, child)
        elif value.kind == "list":
            sub = branch.add(f"{self._label(node)} [dim][ {len(value)} ][/dim]")
            for item in value:
                sub.add(f"[green]{escape(item.data)}[/green]")
        elif "\n" in value.data:
            sub = branch.add(f"{self._label(node)} [dim]```[/dim]")
            for line in value.data.split("\n"):
                sub.add(f"[green]{escape(line)}[/green]")
        else:
            branch.add(f"{self._label(node)}: [green]{escape(value.data)}[/green]")

    def build_tree(self, doc: Document, title: str) -> Tree:
        tree = Tree(f"[bold white]{escape(title)}[/bold white] [dim]({doc.size()} top-level nodes)[/dim]")
        for node in doc:
            self._attach(tree, node)
        return tree

    def show_document(self, doc: Document, title: str):
        self.console.print(self.build_tree(doc, title))

    def show_value(self, value: Value):
        """Prints a single value without tree decoration."""
        if value.kind == "block":
            tree = Tree("[dim]{ }[/dim]")
            for child in value:
                self._attach(tree, child)
            self.console.print(tree)
        elif value.kind == "list":
            for item in value:
                self.console.print(item.data, markup=False, highlight=False)
        else:
            self.console.print(value.data, markup=False, highlight=False)

    def print_report(self, results: List[ParseResult], summary: dict):
        """
        Builds the summary table shown at the end of a directory scan.
        """
        table = Table(title="UpParse Scan Report", show_header=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Nodes", justify="right")
        table.add_column("Result", justify="center")

        for r in results:
            color = "green" if r.ok else "red"
            table.add_row(
                escape(r.source),
                f"[{color}]{r.status}[/{color}]",
                str(len(r.document)) if r.ok else "-",
                "✅" if r.ok else "❌"
            )
            if r.error is not None:
                self.console.print(f"[bold red]Error in {escape(r.source)}:[/bold red] {escape(str(r.error))}")

        self.console.print(table)
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:     {summary['total_files']}\n"
            f"Parsed:          [green]{summary['parsed']}[/green]\n"
            f"Failed:          [red]{summary['failed']}[/red]\n"
            f"Top-level Nodes: {summary['top_level_nodes']}",
            border_style="dim"
        ))
