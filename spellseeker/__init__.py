"""Game logic for a spellcasting dungeon crawler: dungeon layout, enemies, inventory and roster."""

__version__ = "0.1.0"
__all__ = ["dungeon", "enemy", "inventory", "roster"]