"""
Entailment procedures backed by Z3.

A procedure answers one question: does a theory entail a query sentence?
Both implementations decide it by refutation (theory AND NOT query is unsat).
"""

from __future__ import annotations

import logging
import weakref
from typing import Callable, Protocol

from z3 import BoolRef, Not, Solver, unknown, unsat

from kb_errors import CaveConfigError, EntailmentError
from theory import Theory

logger = logging.getLogger(__name__)


class EntailmentProcedure(Protocol):
    """
    Any object with an ``is_entailed`` method of this signature can answer
    queries for a knowledge base.
    """

    def is_entailed(self, theory: Theory, query: BoolRef) -> bool:
        ...


def z3_entails(solver: Solver, query: BoolRef) -> bool:
    """Return True if solver's KB entails query (refutation with push/pop)."""
    solver.push()
    try:
        solver.add(Not(query))
        result = solver.check()
        if result == unknown:
            raise EntailmentError(f"solver returned unknown for {query}: {solver.reason_unknown()}")
        return result == unsat
    finally:
        solver.pop()


class Z3Entailment:
    """Baseline: a fresh solver loaded with the whole theory for every query."""

    name = "z3"

    def __init__(self) -> None:
        self.queries = 0

    def is_entailed(self, theory: Theory, query: BoolRef) -> bool:
        solver = Solver()
        solver.add(*theory.sentences)
        self.queries += 1
        result = z3_entails(solver, query)
        logger.debug("%s query #%d: %s -> %s", self.name, self.queries, query, result)
        return result


class IncrementalZ3Entailment:
    """
    Keeps one solver per theory and only adds the sentences told since the
    previous query. Valid because theories are append-only.
    """

    name = "z3-incremental"

    def __init__(self) -> None:
        self.queries = 0
        self._solvers: weakref.WeakKeyDictionary[Theory, tuple[Solver, int]] = weakref.WeakKeyDictionary()

    def _synced_solver(self, theory: Theory) -> Solver:
        solver, fed = self._solvers.get(theory, (None, 0))
        if solver is None:
            solver = Solver()
        pending = theory.sentences_since(fed)
        if pending:
            solver.add(*pending)
            logger.debug("Fed %d new sentences to incremental solver", len(pending))
        self._solvers[theory] = (solver, fed + len(pending))
        return solver

    def is_entailed(self, theory: Theory, query: BoolRef) -> bool:
        solver = self._synced_solver(theory)
        self.queries += 1
        result = z3_entails(solver, query)
        logger.debug("%s query #%d: %s -> %s", self.name, self.queries, query, result)
        return result


PROCEDURES: dict[str, Callable[[], EntailmentProcedure]] = {
    Z3Entailment.name: Z3Entailment,
    IncrementalZ3Entailment.name: IncrementalZ3Entailment,
}

DEFAULT_PROCEDURE = IncrementalZ3Entailment.name


def make_entailment_procedure(name: str = DEFAULT_PROCEDURE) -> EntailmentProcedure:
    try:
        factory = PROCEDURES[name]
    except KeyError:
        raise CaveConfigError(
            f"unknown entailment procedure {name!r}, expected one of {sorted(PROCEDURES)}"
        ) from None
    return factory()
