"""
Knowledge base for the Wumpus World (propositional, Z3).

The knowledge base owns an append-only ``Theory``. Construction tells the
atemporal physics; the caller then drives it one time step at a time:

    kb.tell_temporal_physics_sentences(t)
    kb.make_percept_sentence(percept, t)
    ... ask questions about step t ...
    kb.make_action_sentence(action, t)

Queries never add to the theory.
"""

from __future__ import annotations

import logging
from typing import Callable

from z3 import BoolRef

from entailment import EntailmentProcedure, make_entailment_procedure
from kb_config import KBConfig
from kb_errors import KBInconsistencyError
from sentences import literal, negation
from theory import Theory
from wumpus_physics import atemporal_sentences, temporal_sentences
from wumpus_symbols import Feature, action_feature, atom, facing
from wumpus_world import Action, AgentPosition, Orientation, Percept, Room, all_rooms

logger = logging.getLogger(__name__)


class WumpusKnowledgeBase:
    def __init__(
        self,
        config: KBConfig | None = None,
        procedure: EntailmentProcedure | None = None,
    ) -> None:
        self.config = config if config is not None else KBConfig()
        self.procedure = procedure if procedure is not None else make_entailment_procedure(self.config.procedure)
        self.disable_nav = self.config.disable_nav_sentences
        self.theory = Theory()
        added = self.theory.tell_all(atemporal_sentences(self.config))
        logger.debug(
            "Atemporal physics for %dx%d cave: %d sentences",
            self.config.width,
            self.config.height,
            added,
        )

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def disable_nav_sentences(self) -> None:
        """Stop telling successor-state axioms from the next time step on."""
        self.disable_nav = True

    # -- TELL ---------------------------------------------------------------

    def tell(self, sentence: BoolRef) -> None:
        self.theory.tell(sentence)

    def tell_temporal_physics_sentences(self, t: int) -> None:
        added = self.theory.tell_all(temporal_sentences(self.config, t, nav=not self.disable_nav))
        logger.debug("Temporal physics for t=%d: %d sentences (theory size %d)", t, added, len(self.theory))

    def make_percept_sentence(self, percept: Percept, t: int) -> None:
        self.theory.tell_all(
            [
                literal(atom(Feature.PERCEPT_STENCH, t), percept.stench),
                literal(atom(Feature.PERCEPT_BREEZE, t), percept.breeze),
                literal(atom(Feature.PERCEPT_GLITTER, t), percept.glitter),
                literal(atom(Feature.PERCEPT_BUMP, t), percept.bump),
                literal(atom(Feature.PERCEPT_SCREAM, t), percept.scream),
            ]
        )

    def make_action_sentence(self, action: Action, t: int) -> None:
        self.theory.tell_all(literal(atom(action_feature(a), t), a == action) for a in Action)

    def make_position_sentence(self, position: AgentPosition, t: int) -> None:
        """
        Tell the agent's position at t. Needed when navigation sentences are
        disabled, since the theory can then no longer infer it.
        """
        self.theory.tell_all(
            [
                atom(Feature.LOCATION, t, position.x, position.y),
                atom(Feature.LOCATION_VISITED, x=position.x, y=position.y),
                atom(facing(position.orientation), t),
            ]
        )

    # -- ASK ----------------------------------------------------------------

    def ask(self, query: BoolRef) -> bool:
        return self.procedure.is_entailed(self.theory, query)

    def _rooms_where(self, predicate: Callable[[Room], bool]) -> list[Room]:
        return [room for room in all_rooms(self.width, self.height) if predicate(room)]

    def ask_current_position(self, t: int) -> AgentPosition:
        rooms = self._rooms_where(lambda r: self.ask(atom(Feature.LOCATION, t, r.x, r.y)))
        if len(rooms) != 1:
            logger.warning("Location query at t=%d entailed %d rooms: %s", t, len(rooms), rooms)
            raise KBInconsistencyError(
                f"Inconsistent KB, unable to determine current room position ({len(rooms)} rooms entailed)",
                t,
            )

        orientations = [o for o in Orientation if self.ask(atom(facing(o), t))]
        if len(orientations) != 1:
            logger.warning("Orientation query at t=%d entailed %d orientations", t, len(orientations))
            raise KBInconsistencyError(
                f"Inconsistent KB, unable to determine current room orientation "
                f"({len(orientations)} orientations entailed)",
                t,
            )

        room = rooms[0]
        return AgentPosition(room.x, room.y, orientations[0])

    def ask_safe_rooms(self, t: int) -> list[Room]:
        return self._rooms_where(lambda r: self.ask_ok(t, r.x, r.y))

    def ask_unvisited_rooms(self) -> list[Room]:
        return self._rooms_where(lambda r: not self.ask(atom(Feature.LOCATION_VISITED, x=r.x, y=r.y)))

    def ask_possible_wumpus_rooms(self) -> list[Room]:
        return self._rooms_where(lambda r: not self.ask(negation(atom(Feature.WUMPUS, x=r.x, y=r.y))))

    def ask_not_unsafe_rooms(self, t: int) -> list[Room]:
        return self._rooms_where(
            lambda r: not self.ask(negation(atom(Feature.OK_TO_MOVE_INTO, t, r.x, r.y)))
        )

    def ask_ok(self, t: int, x: int, y: int) -> bool:
        return self.ask(atom(Feature.OK_TO_MOVE_INTO, t, x, y))

    def ask_have_arrow(self, t: int) -> bool:
        return self.ask(atom(Feature.HAVE_ARROW, t))

    def ask_glitter(self, t: int) -> bool:
        return self.ask(atom(Feature.PERCEPT_GLITTER, t))

    def __str__(self) -> str:
        return str(self.theory)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    kb = WumpusKnowledgeBase(KBConfig.square(3))
    kb.tell_temporal_physics_sentences(0)
    kb.make_percept_sentence(Percept(False, False, False, False, False), 0)
    print("Position t=0:", kb.ask_current_position(0))
    print("Safe t=0:", kb.ask_safe_rooms(0))

    kb.make_action_sentence(Action.FORWARD, 0)
    kb.tell_temporal_physics_sentences(1)
    kb.make_percept_sentence(Percept(False, True, False, False, False), 1)
    print("Position t=1:", kb.ask_current_position(1))
    print("Safe t=1:", kb.ask_safe_rooms(1))
    print("Unvisited:", kb.ask_unvisited_rooms())
    print("Possible wumpus:", kb.ask_possible_wumpus_rooms())
