"""Plain-text rendering of mobiledoc rich-text documents."""

from .exceptions import (
    DocumentLoadError,
    ExtensionFailure,
    MalformedDocument,
    MalformedURI,
    MissingRenderer,
    MobiledocError,
    RenderError,
)
from .models import (
    Atom,
    AtomMarker,
    Card,
    CardSection,
    Document,
    ImageSection,
    ListSection,
    Markup,
    MarkupSection,
    TextMarker,
    UnknownSection,
)
from .rendering.options import RenderConfig
from .rendering.registry import ExtensionRegistry
from .rendering.renderer import TextRenderer

__all__ = [
    "Atom",
    "AtomMarker",
    "Card",
    "CardSection",
    "Document",
    "DocumentLoadError",
    "ExtensionFailure",
    "ExtensionRegistry",
    "ImageSection",
    "ListSection",
    "MalformedDocument",
    "MalformedURI",
    "Markup",
    "MarkupSection",
    "MissingRenderer",
    "MobiledocError",
    "RenderConfig",
    "RenderError",
    "TextMarker",
    "TextRenderer",
    "UnknownSection",
]
