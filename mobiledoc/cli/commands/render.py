"""Render command for the mobiledoc CLI."""

import sys
from typing import Any, Mapping, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mobiledoc.exceptions import MobiledocError
from mobiledoc.rendering.exporter import load_document, render_to_file
from mobiledoc.rendering.options import RenderConfig
from mobiledoc.rendering.renderer import TextRenderer
from mobiledoc.rendering.renderer_iface import CardRenderer, TextWriter

console = Console()
err_console = Console(stderr=True)


def _placeholder_card(name: str) -> CardRenderer:
    def render_card(writer: TextWriter, payload: Mapping[str, Any]) -> None:
        writer.write(f"[card:{name}]")

    return render_card


def render_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="JSON dump of the document to render"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write text to this file instead of stdout"
    ),
    atom_fallback: bool = typer.Option(
        False, "--atom-fallback", help="Write raw atom text for unregistered atoms"
    ),
    strict_markups: bool = typer.Option(
        False, "--strict-markups", help="Fail when a marker closes unopened markups"
    ),
    card_placeholder: bool = typer.Option(
        False, "--card-placeholder", help="Render every card as [card:<name>]"
    ),
):
    """Render a document to plain text."""
    config = RenderConfig(
        debug=bool((ctx.obj or {}).get("verbose")),
        atom_text_fallback=atom_fallback,
        strict_markups=strict_markups,
    )
    try:
        doc = load_document(path)
        renderer = TextRenderer(config=config)
        if card_placeholder:
            for name in doc.card_names():
                renderer.register_card(name, _placeholder_card(name))

        if output:
            render_to_file(doc, output, renderer)
            console.print(f"Wrote [bold]{escape(output)}[/bold]")
        else:
            renderer.render(sys.stdout, doc)
    except (MobiledocError, OSError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
