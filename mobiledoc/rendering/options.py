"""
Render configuration for plain-text output.

Centralizes behavior flags so callers can tune defaults without touching
core logic. Passing None at call sites means "use the defaults below".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Atoms without a registered renderer emit nothing unless this is set,
    # in which case the atom's own text is written instead.
    atom_text_fallback: bool = False

    # Closing more markups than are open clamps to zero by default; strict
    # mode raises MalformedDocument instead.
    strict_markups: bool = False

    # Byte sinks receive text encoded with this codec.
    encoding: str = "utf-8"

    # Characters held before the buffered writer spills to the sink.
    buffer_size: int = 4096

    # Written before and after the normalized URI of an image section.
    image_padding: str = " "
