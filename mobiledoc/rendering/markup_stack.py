"""Tracking of the inline markups open while walking one marker sequence."""

from __future__ import annotations

import logging
from typing import Iterator, List

from ..exceptions import MalformedDocument
from ..models import Markup

LOGGER = logging.getLogger(__name__)


class MarkupStack:
    """LIFO of open markups for one section or list item.

    Pushing and popping never writes output; plain text carries no inline
    style notation. Depth equals markups opened minus markups closed and never
    goes below zero.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._items: List[Markup] = []

    def push(self, markup: Markup) -> None:
        self._items.append(markup)

    def pop(self, count: int) -> List[Markup]:
        """Close the ``count`` most recently opened markups.

        Returns the closed markups, most recent first. Closing more than are
        open empties the stack, or raises MalformedDocument when strict.
        """
        if count <= 0:
            return []
        depth = len(self._items)
        if count > depth:
            if self.strict:
                LOGGER.error(
                    "mobiledoc.markups.over_close closing=%d depth=%d", count, depth
                )
                raise MalformedDocument(
                    f"cannot close {count} markups, only {depth} open"
                )
            LOGGER.debug(
                "mobiledoc.markups.over_close_clamped closing=%d depth=%d",
                count,
                depth,
            )
            count = depth
        closed = self._items[depth - count :]
        del self._items[depth - count :]
        closed.reverse()
        return closed

    @property
    def depth(self) -> int:
        return len(self._items)

    @property
    def open_markups(self) -> List[Markup]:
        """Snapshot of the open markups, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Markup]:
        return iter(list(self._items))
