# spellseeker

Game logic for a spellcasting dungeon crawler. It has no engine and no dependencies outside the standard library.

- `spellseeker.dungeon`: lays out a floor as a random walk of rooms on a square grid. It then gives each room a door layout (`RoomType`) taken from its occupied neighbours.
- `spellseeker.enemy`: `Enemy`, which has health and is marked dead once damage brings it to zero or below.
- `spellseeker.inventory`: `Inventory`, a ring of spell slots with a selected index that wraps around. It also gives each known spell a number.
- `spellseeker.roster`: `EnemyRoster`, an ordered collection of the enemies in play.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Dungeon generation

```python
import random
from spellseeker.dungeon import DungeonGenerator, Vec3

gen = DungeonGenerator(room_size=Vec3(100.0, 100.0, 0.0), rng=random.Random(7))
placements = gen.generate(max_rooms=5, start_location=Vec3(0.0, 0.0, 0.0))

for room_type, location in placements:
    print(room_type.name, location)

print(gen.boss_room_location)
print("\n".join(gen.layout_lines(5)))
```

The grid is `2 * max_rooms + 1` cells on each side. The start location goes in the centre cell, which is marked `RoomType.SPAWN`. From there the walk takes `max_rooms` steps. Each step goes in a random `Direction` (north is +X, east is +Y, south is -X, west is -Y) and moves by one room size plus one unit. A step onto an empty cell marks it as a room. A step onto a cell that is already occupied passes through it. A negative `max_rooms` raises `ValueError`.

The `rng` argument can be any object with a `randint(a, b)` method. It defaults to a fresh `random.Random()`.

`generate` runs these steps in order:

- `generate_room_locations(max_rooms, gen_point)` fills `room_types` and `room_locations`, which hold one entry per grid cell.
- `generate_room_types(max_rooms, gen_location)` replaces each occupied cell with the door layout for its occupied neighbours. It returns the single-door room farthest from `gen_location` in the horizontal plane and also stores it as `boss_room_location`.
- `room_placements()` returns `(RoomType, Vec3)` pairs for every cell that has a door layout, in grid order. The spawn cell is not included.

`generate` also logs the layout through the `logging` module.

`layout_lines(radius)` renders the grid as text rows, with each cell's number right-aligned in three columns.

Two helpers can be used on their own:

- `room_type_for(north, east, south, west)` returns the `RoomType` for a set of doors, or `None` when there are no doors.
- `planar_distance(a, b)` returns the distance between two `Vec3` points, ignoring z.

## Enemies

```python
from spellseeker.enemy import Enemy

goblin = Enemy(health=30)
goblin.take_damage(12)
print(goblin.health, goblin.dead)   # 18 False
```

Health defaults to 30. Every enemy carries the tag `"Damagable"` in `tags`. Assigning `health` directly does not change `dead`.

## Inventory

```python
from spellseeker.inventory import Inventory

inv = Inventory()                   # five "FireBall" slots
inv.cycle_forward()                 # selects slot 1
previous = inv.place_item("Barrier")  # returns "FireBall"
inv.spell_number("StoneCannon")     # 3; 0 for an unknown name
```

`Inventory(slots, max_index)` accepts any sequence of slot names. `max_index` defaults to the last slot. `cycle_forward` and `cycle_backward` wrap between 0 and `max_index`. `item_at(index)` raises `IndexError` for an index outside the slots. `all_items` lists the known spells in number order: `BasicAttackSpell`, `DispellMagic`, `StoneCannon`, `FireBall`, `Barrier`.

## Enemy roster

```python
from spellseeker.roster import EnemyRoster

roster = EnemyRoster()
roster.add(goblin)
first = roster.enemy_at(0)          # IndexError if out of range
everyone = roster.enemies()         # a copy, in insertion order
```

## What this package does not do

It only computes state. It does not render rooms, spawn anything in a world, move a player, handle input, fire projectiles or run a game loop. It has no command-line interface. Each call to `generate` produces a single floor.