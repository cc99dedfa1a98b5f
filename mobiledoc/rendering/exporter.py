"""
Exporter helpers for documents → plain text.

Thin, testable wrappers around document loading, rendering, and file I/O used
by the CLI and higher-level callers. They hold no global state.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import ValidationError

from ..exceptions import DocumentLoadError
from ..models import Document
from .renderer import TextRenderer

LOGGER = logging.getLogger(__name__)


def load_document(path: str) -> Document:
    """Read a JSON dump of a Document from ``path``.

    Raises DocumentLoadError if the file cannot be read or does not match the
    document model.
    """
    LOGGER.info("Loading document from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        LOGGER.error("Failed to read document %s: %s", path, e)
        raise DocumentLoadError(f"cannot read {path}: {e}", path=path) from e
    try:
        doc = Document.model_validate_json(raw)
    except ValidationError as e:
        LOGGER.error("Document %s failed model validation.", path)
        raise DocumentLoadError(
            f"{path} is not a valid document: {e.error_count()} error(s)\n{e}",
            path=path,
        ) from e
    LOGGER.debug("mobiledoc.export.loaded sections=%d", len(doc.sections))
    return doc


def render_to_string(doc: Document, renderer: Optional[TextRenderer] = None) -> str:
    return (renderer or TextRenderer()).render_to_string(doc)


def render_to_file(
    doc: Document,
    path: str,
    renderer: Optional[TextRenderer] = None,
) -> str:
    """Render ``doc`` into ``path`` (created along with missing parent dirs).

    The file is opened in binary mode so the renderer's configured encoding
    applies. On failure, whatever was already flushed remains in the file.
    """
    r = renderer or TextRenderer()
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    LOGGER.info("Rendering document to %s", path)
    with open(path, "wb") as f:
        r.render(f, doc)
    return path
