#!/usr/bin/env python
"""Command line interface for mobiledoc."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from mobiledoc.cli.commands import inspect, render

app = typer.Typer(help="Render mobiledoc documents to plain text")

app.command("render")(render.render_command)
app.command("inspect")(inspect.inspect_command)


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr"
    ),
):
    """Render and inspect mobiledoc documents."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    # Library debug logs toggled via --verbose
    logging.getLogger("mobiledoc").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
    ctx.obj = {"verbose": verbose}


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
