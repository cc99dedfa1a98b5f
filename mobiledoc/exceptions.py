"""Library exceptions."""

from __future__ import annotations

from typing import Optional


class MobiledocError(Exception):
    """Base error for the mobiledoc package."""


class DocumentLoadError(MobiledocError):
    """A serialized document could not be read into the document model."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RenderError(MobiledocError):
    """Base error for failures that abort a render."""


class MalformedURI(RenderError):
    """An image section's source does not parse as a URI."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"malformed image source {source!r}: {reason}")
        self.source = source
        self.reason = reason


class MissingRenderer(RenderError):
    """A card section names a card with no registered renderer."""

    def __init__(self, name: str, kind: str = "card"):
        super().__init__(f"missing {kind} renderer: {name!r}")
        self.name = name
        self.kind = kind


class ExtensionFailure(RenderError):
    """A registered atom or card renderer reported failure."""

    def __init__(self, name: str, kind: str, message: Optional[str] = None):
        super().__init__(message or f"{kind} renderer {name!r} failed")
        self.name = name
        self.kind = kind


class MalformedDocument(RenderError):
    """The document's markup bracketing is inconsistent (strict mode only)."""
