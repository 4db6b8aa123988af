"""
Wumpus World physics as propositional sentences.

``atemporal_sentences`` holds for every time step and is told once.
``temporal_sentences`` is told once per step t and links percepts, safety and
the arrow/wumpus fluents, plus (optionally) the successor-state axioms that
let the agent infer its own location and orientation at t + 1.
"""

from __future__ import annotations

from z3 import BoolRef

from kb_config import KBConfig
from sentences import (
    biconditional,
    conjunction,
    disjunction,
    exactly_one,
    implication,
    negation,
)
from wumpus_symbols import Feature, atom, facing
from wumpus_world import Orientation, all_rooms, entering_moves, get_adjacent


def atemporal_sentences(config: KBConfig) -> list[BoolRef]:
    width, height = config.width, config.height
    start = config.start
    result: list[BoolRef] = [
        negation(atom(Feature.PIT, x=start.x, y=start.y)),
        negation(atom(Feature.WUMPUS, x=start.x, y=start.y)),
    ]

    rooms = all_rooms(width, height)
    for room in rooms:
        adj = get_adjacent(room, width, height)
        result.append(
            biconditional(
                atom(Feature.BREEZE, x=room.x, y=room.y),
                disjunction(atom(Feature.PIT, x=a.x, y=a.y) for a in adj),
            )
        )
        result.append(
            biconditional(
                atom(Feature.STENCH, x=room.x, y=room.y),
                disjunction(atom(Feature.WUMPUS, x=a.x, y=a.y) for a in adj),
            )
        )

    for room in rooms:
        result.append(
            implication(
                atom(Feature.WUMPUS, x=room.x, y=room.y),
                negation(atom(Feature.PIT, x=room.x, y=room.y)),
            )
        )

    result.extend(exactly_one([atom(Feature.WUMPUS, x=r.x, y=r.y) for r in rooms]))
    return result


def initial_state_sentences(config: KBConfig) -> list[BoolRef]:
    start = config.start
    return [
        atom(Feature.LOCATION, 0, start.x, start.y),
        atom(facing(start.orientation), 0),
        atom(Feature.HAVE_ARROW, 0),
        atom(Feature.WUMPUS_ALIVE, 0),
        atom(Feature.LOCATION_VISITED, x=start.x, y=start.y),
    ]


def percept_link_sentences(config: KBConfig, t: int) -> list[BoolRef]:
    result: list[BoolRef] = []
    for room in all_rooms(config.width, config.height):
        here = atom(Feature.LOCATION, t, room.x, room.y)
        result.append(
            implication(
                here,
                biconditional(atom(Feature.PERCEPT_BREEZE, t), atom(Feature.BREEZE, x=room.x, y=room.y)),
            )
        )
        result.append(
            implication(
                here,
                biconditional(atom(Feature.PERCEPT_STENCH, t), atom(Feature.STENCH, x=room.x, y=room.y)),
            )
        )
    return result


def ok_to_move_sentences(config: KBConfig, t: int) -> list[BoolRef]:
    wumpus_alive = atom(Feature.WUMPUS_ALIVE, t)
    return [
        biconditional(
            atom(Feature.OK_TO_MOVE_INTO, t, room.x, room.y),
            conjunction(
                negation(atom(Feature.PIT, x=room.x, y=room.y)),
                negation(conjunction(atom(Feature.WUMPUS, x=room.x, y=room.y), wumpus_alive)),
            ),
        )
        for room in all_rooms(config.width, config.height)
    ]


def frame_sentences(t: int) -> list[BoolRef]:
    return [
        biconditional(
            atom(Feature.HAVE_ARROW, t + 1),
            conjunction(atom(Feature.HAVE_ARROW, t), negation(atom(Feature.ACTION_SHOOT, t))),
        ),
        biconditional(
            atom(Feature.WUMPUS_ALIVE, t + 1),
            conjunction(atom(Feature.WUMPUS_ALIVE, t), negation(atom(Feature.PERCEPT_SCREAM, t + 1))),
        ),
    ]


def location_successor_sentences(config: KBConfig, t: int) -> list[BoolRef]:
    forward = atom(Feature.ACTION_FORWARD, t)
    bump = atom(Feature.PERCEPT_BUMP, t + 1)
    result: list[BoolRef] = []
    for room in all_rooms(config.width, config.height):
        stayed = conjunction(
            atom(Feature.LOCATION, t, room.x, room.y),
            disjunction([negation(forward), bump]),
        )
        arrived = [
            conjunction(
                atom(Feature.LOCATION, t, neighbour.x, neighbour.y),
                atom(facing(orientation), t),
                forward,
            )
            for neighbour, orientation in entering_moves(room, config.width, config.height)
        ]
        next_location = atom(Feature.LOCATION, t + 1, room.x, room.y)
        result.append(biconditional(next_location, disjunction([stayed] + arrived)))
        result.append(implication(next_location, atom(Feature.LOCATION_VISITED, x=room.x, y=room.y)))
    return result


def orientation_successor_sentences(t: int) -> list[BoolRef]:
    turn_left = atom(Feature.ACTION_TURN_LEFT, t)
    turn_right = atom(Feature.ACTION_TURN_RIGHT, t)
    no_turn = conjunction(negation(turn_left), negation(turn_right))
    result: list[BoolRef] = []
    for orientation in Orientation:
        from_left = next(o for o in Orientation if o.turn_left() == orientation)
        from_right = next(o for o in Orientation if o.turn_right() == orientation)
        result.append(
            biconditional(
                atom(facing(orientation), t + 1),
                disjunction(
                    [
                        conjunction(atom(facing(from_left), t), turn_left),
                        conjunction(atom(facing(from_right), t), turn_right),
                        conjunction(atom(facing(orientation), t), no_turn),
                    ]
                ),
            )
        )
    return result


def successor_state_sentences(config: KBConfig, t: int) -> list[BoolRef]:
    return location_successor_sentences(config, t) + orientation_successor_sentences(t)


def temporal_sentences(config: KBConfig, t: int, nav: bool = True) -> list[BoolRef]:
    result: list[BoolRef] = []
    if t == 0:
        result.extend(initial_state_sentences(config))
    result.extend(percept_link_sentences(config, t))
    result.extend(ok_to_move_sentences(config, t))
    result.extend(frame_sentences(t))
    if nav:
        result.extend(successor_state_sentences(config, t))
    return result
