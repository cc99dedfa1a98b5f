"""
Document model: sections, markers and the markup/atom/card tables they refer to.

Sections and markers are tagged variants keyed on their integer ``type``.
Known tags dispatch to a concrete model; section tags the renderer does not
understand fall back to ``UnknownSection`` so forward-compatible documents still
load.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import ConfigDict, Discriminator, Field, JsonValue, Tag

from ._md_base import MDModel

DEFAULT_VERSION = "0.3.1"


class SectionType(IntEnum):
    MARKUP = 1
    IMAGE = 2
    LIST = 3
    CARD = 10


class MarkerType(IntEnum):
    TEXT = 0
    ATOM = 1


# ---------------------------------------------------------------------------
# Referenced entities
# ---------------------------------------------------------------------------


class Markup(MDModel):
    """Inline style annotation, e.g. ``b`` or ``a`` with an ``href`` attribute."""

    tag: str
    attributes: Dict[str, JsonValue] = Field(default_factory=dict)


class Atom(MDModel):
    name: str
    text: str = ""
    payload: Dict[str, Any] = Field(default_factory=dict)


class Card(MDModel):
    name: str
    payload: Dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------


class _MarkerBase(MDModel):
    type: int
    open_markups: List[Markup] = Field(default_factory=list)
    closed_markups: int = Field(default=0, ge=0)


class TextMarker(_MarkerBase):
    type: Literal[0] = 0
    text: str = ""


class AtomMarker(_MarkerBase):
    type: Literal[1] = 1
    atom: Atom


Marker = Annotated[
    Union[TextMarker, AtomMarker],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


class MarkupSection(MDModel):
    type: Literal[1] = 1
    tag: str = "p"
    markers: List[Marker] = Field(default_factory=list)


class ImageSection(MDModel):
    type: Literal[2] = 2
    source: str


class ListSection(MDModel):
    type: Literal[3] = 3
    tag: str = "ul"
    items: List[List[Marker]] = Field(default_factory=list)


class CardSection(MDModel):
    type: Literal[10] = 10
    card: Card


class UnknownSection(MDModel):
    """Section of a kind this package does not understand; rendered as nothing."""

    model_config = ConfigDict(extra="allow")

    type: int


_KNOWN_SECTION_TAGS = {int(t) for t in SectionType}


def _section_tag(value: Any) -> str:
    if isinstance(value, dict):
        raw = value.get("type")
    else:
        raw = getattr(value, "type", None)
    try:
        t = int(raw)
    except (TypeError, ValueError):
        return "unknown"
    return str(t) if t in _KNOWN_SECTION_TAGS else "unknown"


Section = Annotated[
    Union[
        Annotated[MarkupSection, Tag("1")],
        Annotated[ImageSection, Tag("2")],
        Annotated[ListSection, Tag("3")],
        Annotated[CardSection, Tag("10")],
        Annotated[UnknownSection, Tag("unknown")],
    ],
    Discriminator(_section_tag),
]


class Document(MDModel):
    """A complete document.

    The ``markups``, ``atoms`` and ``cards`` tables own the referenced
    entities; sections and markers point at the same instances.
    """

    version: str = DEFAULT_VERSION
    markups: List[Markup] = Field(default_factory=list)
    atoms: List[Atom] = Field(default_factory=list)
    cards: List[Card] = Field(default_factory=list)
    sections: List[Section] = Field(default_factory=list)

    def card_names(self) -> List[str]:
        """Names of all cards in the card table and in card sections, in order."""
        seen: set[str] = set()
        names: List[str] = []
        candidates = list(self.cards) + [
            s.card for s in self.sections if isinstance(s, CardSection)
        ]
        for card in candidates:
            if card.name not in seen:
                seen.add(card.name)
                names.append(card.name)
        return names
