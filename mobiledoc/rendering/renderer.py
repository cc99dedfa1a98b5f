"""
Plain-text renderer for mobiledoc documents.

Walks sections in order and writes a flat text stream. Markups are tracked but
produce no output; atoms and cards are delegated to host-supplied renderers.
Rendering is fail-fast: the first error aborts the render and propagates.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Any, Callable, Dict, Optional, Sequence

from ..exceptions import ExtensionFailure, MissingRenderer, MobiledocError
from ..models import (
    Atom,
    AtomMarker,
    CardSection,
    Document,
    ImageSection,
    ListSection,
    Marker,
    MarkupSection,
    Section,
    TextMarker,
)
from .buffer import BufferedTextWriter
from .markup_stack import MarkupStack
from .options import RenderConfig
from .registry import ExtensionRegistry
from .renderer_iface import AtomRenderer, CardRenderer, TextWriter
from .uri import parse_uri

LOGGER = logging.getLogger(__name__)


def _invoke_extension(kind: str, name: str, call: Callable[[], Any]) -> None:
    try:
        call()
    except (MobiledocError, OSError):
        # Library errors and sink I/O errors from a spilling writer pass through.
        raise
    except Exception as e:
        LOGGER.error("mobiledoc.render.%s_failed name=%s error=%s", kind, name, e)
        raise ExtensionFailure(name, kind, f"{kind} renderer {name!r} failed: {e}") from e


class TextRenderer:
    """Renders a Document to a plain-text sink.

    ``atoms`` and ``cards`` are the registry's mutable name → renderer maps and
    may be filled directly or through ``register_atom``/``register_card``.
    """

    def __init__(
        self,
        registry: Optional[ExtensionRegistry] = None,
        config: Optional[RenderConfig] = None,
    ):
        self.registry = registry or ExtensionRegistry()
        self.config = config or RenderConfig()

    @property
    def atoms(self) -> Dict[str, AtomRenderer]:
        return self.registry.atoms

    @property
    def cards(self) -> Dict[str, CardRenderer]:
        return self.registry.cards

    def register_atom(self, name: str, fn: AtomRenderer) -> None:
        self.registry.register_atom(name, fn)

    def register_card(self, name: str, fn: CardRenderer) -> None:
        self.registry.register_card(name, fn)

    def render(self, sink: IO[Any], doc: Document) -> None:
        """Render ``doc`` into ``sink``; buffered output is flushed on success."""
        writer = BufferedTextWriter(
            sink,
            encoding=self.config.encoding,
            buffer_size=self.config.buffer_size,
        )
        LOGGER.info("Rendering document with %d sections.", len(doc.sections))
        for index, section in enumerate(doc.sections):
            self._render_section(writer, section, index)
        writer.flush()
        LOGGER.info("Document rendered.")

    def render_to_string(self, doc: Document) -> str:
        buf = io.StringIO()
        self.render(buf, doc)
        return buf.getvalue()

    # -- sections -----------------------------------------------------------

    def _render_section(self, w: TextWriter, section: Section, index: int) -> None:
        LOGGER.debug(
            "mobiledoc.render.section index=%d type=%s", index, section.type
        )
        if isinstance(section, MarkupSection):
            self._render_markers(w, section.markers)
        elif isinstance(section, ImageSection):
            self._render_image_section(w, section)
        elif isinstance(section, ListSection):
            self._render_list_section(w, section)
        elif isinstance(section, CardSection):
            self._render_card_section(w, section)
        else:
            LOGGER.debug(
                "mobiledoc.render.section_skipped index=%d type=%s",
                index,
                section.type,
            )

    def _render_image_section(self, w: TextWriter, section: ImageSection) -> None:
        try:
            src = parse_uri(section.source)
        except MobiledocError:
            LOGGER.error("mobiledoc.render.bad_image_source %r", section.source)
            raise
        pad = self.config.image_padding
        w.write(f"{pad}{src}{pad}")

    def _render_list_section(self, w: TextWriter, section: ListSection) -> None:
        for item in section.items:
            self._render_markers(w, item)

    def _render_card_section(self, w: TextWriter, section: CardSection) -> None:
        card = section.card
        fn = self.registry.get_card(card.name)
        if fn is None:
            LOGGER.error("mobiledoc.render.missing_card name=%s", card.name)
            raise MissingRenderer(card.name, "card")
        _invoke_extension("card", card.name, lambda: fn(w, card.payload))

    # -- markers ------------------------------------------------------------

    def _render_markers(self, w: TextWriter, markers: Sequence[Marker]) -> None:
        stack = MarkupStack(strict=self.config.strict_markups)
        for marker in markers:
            for markup in marker.open_markups:
                stack.push(markup)

            if isinstance(marker, TextMarker):
                w.write(marker.text)
            elif isinstance(marker, AtomMarker):
                self._render_atom(w, marker.atom)

            stack.pop(marker.closed_markups)
            if self.config.debug:
                LOGGER.debug(
                    "mobiledoc.render.marker type=%s depth=%d",
                    marker.type,
                    stack.depth,
                )

    def _render_atom(self, w: TextWriter, atom: Atom) -> None:
        fn = self.registry.get_atom(atom.name)
        if fn is None:
            if self.config.atom_text_fallback:
                w.write(atom.text)
            else:
                LOGGER.debug("mobiledoc.render.atom_unregistered name=%s", atom.name)
            return
        _invoke_extension("atom", atom.name, lambda: fn(w, atom.text, atom.payload))
