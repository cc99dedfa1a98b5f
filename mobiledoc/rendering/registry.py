"""
Name → renderer tables for atoms and cards.

The host application fills the registry before rendering. Registering the
same name twice replaces the earlier renderer.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .renderer_iface import AtomRenderer, CardRenderer

LOGGER = logging.getLogger(__name__)


class ExtensionRegistry:
    """Mutable mapping of atom and card names to host-supplied renderers."""

    def __init__(
        self,
        atoms: Optional[Dict[str, AtomRenderer]] = None,
        cards: Optional[Dict[str, CardRenderer]] = None,
    ):
        self.atoms: Dict[str, AtomRenderer] = dict(atoms or {})
        self.cards: Dict[str, CardRenderer] = dict(cards or {})

    def register_atom(self, name: str, fn: AtomRenderer) -> None:
        if name in self.atoms:
            LOGGER.debug("mobiledoc.registry.atom_replaced name=%s", name)
        self.atoms[name] = fn

    def register_card(self, name: str, fn: CardRenderer) -> None:
        if name in self.cards:
            LOGGER.debug("mobiledoc.registry.card_replaced name=%s", name)
        self.cards[name] = fn

    def unregister_atom(self, name: str) -> Optional[AtomRenderer]:
        return self.atoms.pop(name, None)

    def unregister_card(self, name: str) -> Optional[CardRenderer]:
        return self.cards.pop(name, None)

    def get_atom(self, name: str) -> Optional[AtomRenderer]:
        return self.atoms.get(name)

    def get_card(self, name: str) -> Optional[CardRenderer]:
        return self.cards.get(name)

    def atom(self, name: str) -> Callable[[AtomRenderer], AtomRenderer]:
        """Decorator form of :meth:`register_atom`."""

        def decorator(fn: AtomRenderer) -> AtomRenderer:
            self.register_atom(name, fn)
            return fn

        return decorator

    def card(self, name: str) -> Callable[[CardRenderer], CardRenderer]:
        """Decorator form of :meth:`register_card`."""

        def decorator(fn: CardRenderer) -> CardRenderer:
            self.register_card(name, fn)
            return fn

        return decorator
