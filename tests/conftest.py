"""
Shared fixtures for the Wumpus knowledge base tests.
"""

from __future__ import annotations

import pytest
from z3 import Solver, sat

from entailment import PROCEDURES
from kb_config import KBConfig
from sentences import disjunction
from wumpus_kb import WumpusKnowledgeBase
from wumpus_world import Action, Percept

QUIET = Percept(stench=False, breeze=False, glitter=False, bump=False, scream=False)


@pytest.fixture(params=sorted(PROCEDURES))
def procedure_name(request) -> str:
    return request.param


@pytest.fixture
def make_kb(procedure_name):
    def factory(width: int = 3, height: int | None = None, **kwargs) -> WumpusKnowledgeBase:
        config = KBConfig(
            width=width,
            height=width if height is None else height,
            procedure=procedure_name,
            **kwargs,
        )
        return WumpusKnowledgeBase(config)

    return factory


def start(kb: WumpusKnowledgeBase, percept: Percept = QUIET) -> None:
    kb.tell_temporal_physics_sentences(0)
    kb.make_percept_sentence(percept, 0)


def advance(kb: WumpusKnowledgeBase, t: int, action: Action, percept: Percept = QUIET) -> int:
    """Record ``action`` at t and the percept that followed; return t + 1."""
    kb.make_action_sentence(action, t)
    kb.tell_temporal_physics_sentences(t + 1)
    kb.make_percept_sentence(percept, t + 1)
    return t + 1


def count_models(sentences, atoms) -> int:
    """Number of distinct assignments to ``atoms`` consistent with ``sentences``."""
    solver = Solver()
    solver.add(*sentences)
    count = 0
    while solver.check() == sat:
        model = solver.model()
        count += 1
        solver.add(disjunction([a != model.eval(a, model_completion=True) for a in atoms]))
    return count
