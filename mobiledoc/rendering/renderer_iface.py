"""
Callback seams for the text renderer.

Defines the writer handed to extension callbacks and the call signatures the
host application implements for atoms and cards:

  - atom renderer: ``fn(writer, atom_text, atom_payload)``
  - card renderer: ``fn(writer, card_payload)``

A callback signals failure by raising. The renderer never inspects what a
callback writes; it only hands over the writer.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class TextWriter(Protocol):
    """Minimal text sink an extension callback writes to."""

    def write(self, text: str) -> int: ...


class AtomRenderer(Protocol):
    def __call__(
        self, writer: TextWriter, text: str, payload: Mapping[str, Any]
    ) -> None: ...


class CardRenderer(Protocol):
    def __call__(self, writer: TextWriter, payload: Mapping[str, Any]) -> None: ...
