"""Random-walk dungeon layout generation on a square grid of rooms."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Protocol

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vec3:
    """A point or offset in world space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __str__(self) -> str:
        return f"X={self.x:.3f} Y={self.y:.3f} Z={self.z:.3f}"


class Direction(IntEnum):
    """Step directions of the random walk, numbered as the walk draws them."""

    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4


class RoomType(IntEnum):
    """Grid cell markers: empty, untyped, door layouts and the spawn room."""

    NONE = 0
    UNTYPED = 1
    N = 2
    E = 3
    S = 4
    W = 5
    NE = 6
    NS = 7
    NW = 8
    ES = 9
    EW = 10
    SW = 11
    NES = 12
    NEW = 13
    NSW = 14
    ESW = 15
    NESW = 16
    SPAWN = 30


_DOOR_TYPES: dict[tuple[bool, bool, bool, bool], RoomType] = {
    (True, False, False, False): RoomType.N,
    (False, True, False, False): RoomType.E,
    (False, False, True, False): RoomType.S,
    (False, False, False, True): RoomType.W,
    (True, True, False, False): RoomType.NE,
    (True, False, True, False): RoomType.NS,
    (True, False, False, True): RoomType.NW,
    (False, True, True, False): RoomType.ES,
    (False, True, False, True): RoomType.EW,
    (False, False, True, True): RoomType.SW,
    (True, True, True, False): RoomType.NES,
    (True, True, False, True): RoomType.NEW,
    (True, False, True, True): RoomType.NSW,
    (False, True, True, True): RoomType.ESW,
    (True, True, True, True): RoomType.NESW,
}

_PLACEABLE = frozenset(_DOOR_TYPES.values())


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def planar_distance(a: Vec3, b: Vec3) -> float:
    """Distance between two points in the horizontal plane, ignoring z."""
    return math.hypot(a.x - b.x, a.y - b.y)


def room_type_for(north: bool, east: bool, south: bool, west: bool) -> Optional[RoomType]:
    """Room type for the given set of doors, or None when there are no doors."""
    return _DOOR_TYPES.get((bool(north), bool(east), bool(south), bool(west)))


class DungeonGenerator:
    """Lays out rooms by a random walk from a spawn room, then assigns door types.

    The layout is a flat square grid of side ``2 * max_rooms + 1`` with the
    spawn room in the centre cell. North is one row up (+X in world space),
    east one column right (+Y).
    """

    def __init__(self, room_size: Vec3, rng: Optional[_RandomSource] = None) -> None:
        self.room_size = room_size
        self.rng = rng if rng is not None else random.Random()
        self.room_types: list[int] = []
        self.room_locations: list[Vec3] = []
        self.boss_room_location = Vec3()

    @staticmethod
    def _side(max_rooms: int) -> int:
        if max_rooms < 0:
            raise ValueError(f"max_rooms must not be negative, got {max_rooms}")
        return 2 * max_rooms + 1

    def generate(self, max_rooms: int, start_location: Vec3) -> list[tuple[RoomType, Vec3]]:
        """Generate a whole floor and return the rooms to place."""
        self.generate_room_locations(max_rooms, start_location)
        self.generate_room_types(max_rooms, start_location)
        placements = self.room_placements()
        log.info(" --------------- Floor %d --------------- ", 1)
        for line in self.layout_lines(max_rooms):
            log.info("%s", line)
        log.info("Starting Location: %s", start_location)
        return placements

    def generate_room_locations(self, max_rooms: int, gen_point: Vec3) -> None:
        """Walk ``max_rooms`` random steps from ``gen_point``, marking new cells."""
        side = self._side(max_rooms)
        cells = side * side
        centre = cells // 2
        self.room_types = [RoomType.NONE] * cells
        self.room_locations = [Vec3()] * cells
        self.room_locations[centre] = gen_point
        self.room_types[centre] = RoomType.SPAWN
        log.debug("Startpoint index num: %d", centre)

        steps = {
            Direction.NORTH: (Vec3(self.room_size.x + 1, 0.0, 0.0), -side),
            Direction.EAST: (Vec3(0.0, self.room_size.y + 1, 0.0), 1),
            Direction.SOUTH: (Vec3(-self.room_size.x - 1, 0.0, 0.0), side),
            Direction.WEST: (Vec3(0.0, -self.room_size.y - 1, 0.0), -1),
        }

        location = gen_point
        index = centre
        for iteration in range(max_rooms):
            direction = Direction(self.rng.randint(1, 4))
            log.debug("Iteration: %d, direction: %s", iteration, direction.name)
            offset, index_step = steps[direction]
            location = location + offset
            index += index_step
            # An occupied cell already holds a room; the walk passes through it.
            if self.room_types[index] == RoomType.NONE:
                log.debug("Creating room location at: %s", location)
                self.room_locations[index] = location
                self.room_types[index] = RoomType.UNTYPED

    def generate_room_types(self, max_rooms: int, gen_location: Vec3) -> Vec3:
        """Give every occupied cell a door type from its occupied neighbours.

        Returns the dead-end room farthest from ``gen_location``, which is also
        kept as ``boss_room_location``.
        """
        side = self._side(max_rooms)
        cells = len(self.room_types)
        if cells != side * side:
            raise ValueError(
                f"grid holds {cells} cells, expected {side * side} for max_rooms={max_rooms}"
            )

        types = self.room_types
        boss = Vec3()
        for index, value in enumerate(types):
            if value == RoomType.NONE:
                continue
            north = index - side > 0 and types[index - side] != RoomType.NONE
            east = index + 1 < cells and types[index + 1] != RoomType.NONE
            south = index + side < cells and types[index + side] != RoomType.NONE
            west = index - 1 > 0 and types[index - 1] != RoomType.NONE
            room_type = room_type_for(north, east, south, west)
            if room_type is None:
                continue
            if room_type in (RoomType.N, RoomType.E, RoomType.S, RoomType.W):
                candidate = self.room_locations[index]
                if planar_distance(boss, gen_location) < planar_distance(candidate, gen_location):
                    boss = candidate
                    log.debug("Boss room new loc %s", boss)
            types[index] = room_type

        self.boss_room_location = boss
        return boss

    def room_placements(self) -> list[tuple[RoomType, Vec3]]:
        """Rooms with a door type and their locations, in grid order."""
        placements = []
        for value, location in zip(self.room_types, self.room_locations):
            if value in _PLACEABLE:
                placements.append((RoomType(value), location))
            elif value == RoomType.UNTYPED:
                log.error("Room type 1 | Room has been uninitialized")
            elif value == RoomType.SPAWN:
                log.error("Spawn room, should never be called.")
        return placements

    def layout_lines(self, radius: int) -> list[str]:
        """The grid as text rows, each cell right-aligned in three columns."""
        side = self._side(radius)
        if side * side > len(self.room_types):
            raise ValueError(f"radius {radius} exceeds the generated grid")
        return [
            "".join(f"{int(value):>3}" for value in self.room_types[row * side:(row + 1) * side])
            for row in range(side)
        ]