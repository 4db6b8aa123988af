"""
Wumpus World domain types.

Grid coordinates: (x, y), x in [1..width], y in [1..height], origin bottom-left.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Orientation(Enum):
    FACING_NORTH = "FacingNorth"
    FACING_SOUTH = "FacingSouth"
    FACING_EAST = "FacingEast"
    FACING_WEST = "FacingWest"

    def turn_left(self) -> "Orientation":
        order = [
            Orientation.FACING_NORTH,
            Orientation.FACING_WEST,
            Orientation.FACING_SOUTH,
            Orientation.FACING_EAST,
        ]
        return order[(order.index(self) + 1) % 4]

    def turn_right(self) -> "Orientation":
        order = [
            Orientation.FACING_NORTH,
            Orientation.FACING_EAST,
            Orientation.FACING_SOUTH,
            Orientation.FACING_WEST,
        ]
        return order[(order.index(self) + 1) % 4]

    def delta(self) -> tuple[int, int]:
        return {
            Orientation.FACING_NORTH: (0, 1),
            Orientation.FACING_EAST: (1, 0),
            Orientation.FACING_SOUTH: (0, -1),
            Orientation.FACING_WEST: (-1, 0),
        }[self]


class Action(Enum):
    FORWARD = "Forward"
    TURN_LEFT = "TurnLeft"
    TURN_RIGHT = "TurnRight"
    GRAB = "Grab"
    SHOOT = "Shoot"
    CLIMB = "Climb"


class Percept(NamedTuple):
    stench: bool
    breeze: bool
    glitter: bool
    bump: bool
    scream: bool


class Room(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class AgentPosition:
    x: int
    y: int
    orientation: Orientation


def in_cave(x: int, y: int, width: int, height: int) -> bool:
    return 1 <= x <= width and 1 <= y <= height


def all_rooms(width: int, height: int) -> list[Room]:
    """Every room of the cave, x-major then y."""
    return [Room(x, y) for x in range(1, width + 1) for y in range(1, height + 1)]


def entering_moves(room: Room, width: int, height: int) -> list[tuple[Room, Orientation]]:
    """
    In-bounds neighbours of ``room`` paired with the orientation an agent in
    that neighbour must face for a forward move to land in ``room``.
    """
    result: list[tuple[Room, Orientation]] = []
    for orientation in (
        Orientation.FACING_EAST,
        Orientation.FACING_SOUTH,
        Orientation.FACING_WEST,
        Orientation.FACING_NORTH,
    ):
        dx, dy = orientation.delta()
        nx, ny = room.x - dx, room.y - dy
        if in_cave(nx, ny, width, height):
            result.append((Room(nx, ny), orientation))
    return result


def get_adjacent(room: Room, width: int, height: int) -> list[Room]:
    return [neighbour for neighbour, _ in entering_moves(room, width, height)]
