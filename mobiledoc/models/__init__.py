"""Public exports for the document model."""

from __future__ import annotations

from .document import (
    Atom,
    AtomMarker,
    Card,
    CardSection,
    Document,
    ImageSection,
    ListSection,
    Marker,
    MarkerType,
    Markup,
    MarkupSection,
    Section,
    SectionType,
    TextMarker,
    UnknownSection,
)

__all__ = [
    "Atom",
    "AtomMarker",
    "Card",
    "CardSection",
    "Document",
    "ImageSection",
    "ListSection",
    "Marker",
    "MarkerType",
    "Markup",
    "MarkupSection",
    "Section",
    "SectionType",
    "TextMarker",
    "UnknownSection",
]
