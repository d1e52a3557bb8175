"""
InteractionList: ordered collection of owned Interaction values.

Every interaction that goes in is deep-copied, so a list never aliases the
interactions of another list (or of the caller).
"""
from __future__ import annotations
import copy
from typing import Iterable, Iterator, List, Optional

from .interaction import Interaction

NULL_INTERACTION_LINE = "******** NULL INTERACTION ********"


class InteractionList:

    def __init__(self, other: Optional[Iterable[Interaction]] = None):
        self._items: List[Optional[Interaction]] = []
        if other is not None:
            self.copy_from(other)

    def reset(self) -> None:
        """Drop every owned interaction."""
        self._items.clear()

    def add(self, interaction: Interaction) -> None:
        self._items.append(copy.deepcopy(interaction))

    def append(self, other: Iterable[Interaction]) -> None:
        """Deep-copy all interactions of `other` onto the end (no de-duplication)."""
        if other is self:
            other = list(other)
        for interaction in other:
            self._items.append(copy.deepcopy(interaction))

    def copy_from(self, other: Iterable[Interaction]) -> None:
        if other is self:
            return
        self.reset()
        self.append(other)

    def __copy__(self) -> "InteractionList":
        return InteractionList(self)

    def __iter__(self) -> Iterator[Interaction]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, interaction) -> bool:
        return interaction in self._items

    def __eq__(self, other) -> bool:
        if not isinstance(other, InteractionList):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        lines = []
        for interaction in self._items:
            if interaction is None:
                lines.append(NULL_INTERACTION_LINE)
            else:
                lines.append(str(interaction))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"InteractionList(n={len(self._items)})"
