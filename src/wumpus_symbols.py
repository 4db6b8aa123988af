"""
Propositional symbols for the Wumpus World knowledge base.

Every atom is built from an ``AtomKey``: a feature prefix plus an optional time
step and an optional room. The z3 name is rendered from the key as
``<prefix>[_<t>][_<x>_<y>]``; prefixes never contain ``_`` so distinct keys
always give distinct names.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from z3 import Bool, BoolRef

from wumpus_world import Action, Orientation


class Feature(Enum):
    LOCATION = "L"
    LOCATION_VISITED = "LV"
    BREEZE = "B"
    STENCH = "S"
    PIT = "P"
    WUMPUS = "W"
    WUMPUS_ALIVE = "WumpusAlive"
    HAVE_ARROW = "HaveArrow"
    FACING_NORTH = Orientation.FACING_NORTH.value
    FACING_SOUTH = Orientation.FACING_SOUTH.value
    FACING_EAST = Orientation.FACING_EAST.value
    FACING_WEST = Orientation.FACING_WEST.value
    PERCEPT_STENCH = "Stench"
    PERCEPT_BREEZE = "Breeze"
    PERCEPT_GLITTER = "Glitter"
    PERCEPT_BUMP = "Bump"
    PERCEPT_SCREAM = "Scream"
    ACTION_FORWARD = Action.FORWARD.value
    ACTION_TURN_LEFT = Action.TURN_LEFT.value
    ACTION_TURN_RIGHT = Action.TURN_RIGHT.value
    ACTION_GRAB = Action.GRAB.value
    ACTION_SHOOT = Action.SHOOT.value
    ACTION_CLIMB = Action.CLIMB.value
    OK_TO_MOVE_INTO = "OK"


class AtomKey(NamedTuple):
    feature: Feature
    time: int | None = None
    x: int | None = None
    y: int | None = None

    @property
    def name(self) -> str:
        parts = [self.feature.value]
        if self.time is not None:
            parts.append(str(self.time))
        if self.x is not None:
            parts.append(f"{self.x}_{self.y}")
        return "_".join(parts)


def facing(orientation: Orientation) -> Feature:
    return Feature(orientation.value)


def action_feature(action: Action) -> Feature:
    return Feature(action.value)


def atom_key(
    feature: Feature,
    time: int | None = None,
    x: int | None = None,
    y: int | None = None,
) -> AtomKey:
    if (x is None) != (y is None):
        raise ValueError(f"room index needs both x and y, got x={x!r}, y={y!r}")
    for label, value in (("time", time), ("x", x), ("y", y)):
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
            raise ValueError(f"{label} must be a non-negative int, got {value!r}")
    return AtomKey(Feature(feature), time, x, y)


def atom(
    feature: Feature,
    time: int | None = None,
    x: int | None = None,
    y: int | None = None,
) -> BoolRef:
    """Return the z3 atom for ``feature`` at the given time and room."""
    return Bool(atom_key(feature, time, x, y).name)
