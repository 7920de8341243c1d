"""The player's spell inventory: a ring of slots with a selected index."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

log = logging.getLogger(__name__)

EMPTY = "Empty"
ALL_ITEMS: tuple[str, ...] = (
    "BasicAttackSpell",
    "DispellMagic",
    "StoneCannon",
    "FireBall",
    "Barrier",
)
DEFAULT_SLOTS: tuple[str, ...] = ("FireBall",) * 5


class Inventory:
    """Spell slots that the player cycles through and swaps items into."""

    def __init__(
        self,
        slots: Optional[Iterable[str]] = None,
        max_index: Optional[int] = None,
    ) -> None:
        self.slots: list[str] = list(DEFAULT_SLOTS if slots is None else slots)
        if not self.slots:
            raise ValueError("an inventory needs at least one slot")
        if max_index is None:
            max_index = len(self.slots) - 1
        if not 0 <= max_index < len(self.slots):
            raise ValueError(
                f"max_index must be between 0 and {len(self.slots) - 1}, got {max_index}"
            )
        self.max_index = max_index
        self._index = 0

    @property
    def index(self) -> int:
        """The currently selected slot."""
        return self._index

    @property
    def all_items(self) -> tuple[str, ...]:
        """Every item the game knows, in spell-number order."""
        return ALL_ITEMS

    def cycle_forward(self) -> int:
        """Select the next slot, wrapping to the first after ``max_index``."""
        self._index = self._index + 1 if self._index < self.max_index else 0
        log.debug("Inventory Index: %d", self._index)
        return self._index

    def cycle_backward(self) -> int:
        """Select the previous slot, wrapping to ``max_index`` from the first."""
        self._index = self._index - 1 if self._index >= 1 else self.max_index
        log.debug("Inventory Index: %d", self._index)
        return self._index

    def item_at(self, index: int) -> str:
        """The item in slot ``index``."""
        if not 0 <= index < len(self.slots):
            raise IndexError(f"slot {index} out of range 0..{len(self.slots) - 1}")
        return self.slots[index]

    def spell_number(self, name: str) -> int:
        """One-based position of ``name`` among all items, or 0 if unknown."""
        try:
            return ALL_ITEMS.index(name) + 1
        except ValueError:
            return 0

    def place_item(self, item_name: str) -> str:
        """Put ``item_name`` in the selected slot and return what it held."""
        previous = self.slots[self._index]
        self.slots[self._index] = item_name
        return previous