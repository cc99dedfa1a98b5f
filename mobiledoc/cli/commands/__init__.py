"""Command modules for the mobiledoc CLI."""

from mobiledoc.cli.commands import inspect, render

__all__ = ["inspect", "render"]
