"""Inspect command for the mobiledoc CLI."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mobiledoc.exceptions import MobiledocError
from mobiledoc.rendering.debug_tools import section_summary, trace_document
from mobiledoc.rendering.exporter import load_document

console = Console()
err_console = Console(stderr=True)


def inspect_command(
    path: str = typer.Argument(..., help="JSON dump of the document to inspect"),
):
    """Show sections and the markup depth around every marker."""
    try:
        doc = load_document(path)
    except MobiledocError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print("[bold]Sections:[/bold]")
    for line in section_summary(doc):
        console.print(escape(line))

    rows = trace_document(doc)
    if not rows:
        console.print("No markers found")
        return

    table = Table("Section", "Item", "Marker", "Type", "Depth", "Open", "Close", "Text")
    over_closed = 0
    for row in rows:
        item = "" if row["item"] is None else str(row["item"])
        style = None
        if row["over_closed"]:
            over_closed += 1
            style = "red"
        table.add_row(
            str(row["section"]),
            item,
            str(row["index"]),
            str(row["type"]),
            f"{row['depth_before']} → {row['depth_after']}",
            ", ".join(row["opened"]),  # type: ignore[arg-type]
            str(row["closing"]),
            escape(str(row["text"])),
            style=style,
        )
    console.print(table)
    if over_closed:
        console.print(
            f"[yellow]Warning:[/yellow] {over_closed} marker(s) close more markups than are open"
        )
