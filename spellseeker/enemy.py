"""Enemies that take damage and die when their health runs out."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_HEALTH = 30.0
DAMAGEABLE_TAG = "Damagable"


@dataclass
class Enemy:
    """An enemy with health that can be damaged.

    ``dead`` becomes true once damage brings health to zero or below. Setting
    ``health`` directly does not change ``dead``.
    """

    health: float = DEFAULT_HEALTH
    dead: bool = field(default=False, init=False)
    tags: set[str] = field(default_factory=lambda: {DAMAGEABLE_TAG}, init=False)

    def take_damage(self, amount: float) -> None:
        """Subtract ``amount`` from health and mark the enemy dead at zero or below."""
        self.health -= amount
        if self.health <= 0:
            self.dead = True