"""The game's list of active enemies."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class EnemyRoster(Generic[T]):
    """An ordered collection of the enemies in play."""

    def __init__(self) -> None:
        self._enemies: list[T] = []

    def add(self, enemy: T) -> None:
        """Append ``enemy`` to the roster."""
        self._enemies.append(enemy)

    def enemy_at(self, index: int) -> T:
        """The enemy at position ``index``."""
        if not 0 <= index < len(self._enemies):
            raise IndexError(f"enemy {index} out of range for roster of {len(self._enemies)}")
        return self._enemies[index]

    def enemies(self) -> list[T]:
        """A copy of all enemies, in the order they were added."""
        return list(self._enemies)

    def __len__(self) -> int:
        return len(self._enemies)

    def __iter__(self) -> Iterator[T]:
        return iter(self._enemies)