"""
Sentence builders for the axiom shapes used by the knowledge base.

All connectives go through these helpers so n-ary edge cases (empty or
single-element conjunctions and disjunctions) are handled in one place.
"""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Sequence

from z3 import And, BoolRef, BoolVal, Implies, Not, Or


def negation(sentence: BoolRef) -> BoolRef:
    return Not(sentence)


def conjunction(*sentences: BoolRef) -> BoolRef:
    if not sentences:
        return BoolVal(True)
    if len(sentences) == 1:
        return sentences[0]
    return And(*sentences)


def disjunction(sentences: Iterable[BoolRef]) -> BoolRef:
    """n-ary OR; an empty disjunction is False."""
    items = list(sentences)
    if not items:
        return BoolVal(False)
    if len(items) == 1:
        return items[0]
    return Or(*items)


def implication(premise: BoolRef, conclusion: BoolRef) -> BoolRef:
    return Implies(premise, conclusion)


def biconditional(left: BoolRef, right: BoolRef) -> BoolRef:
    return left == right


def literal(sentence: BoolRef, value: bool) -> BoolRef:
    return sentence if value else Not(sentence)


def at_most_one(atoms: Sequence[BoolRef]) -> list[BoolRef]:
    """Pairwise encoding: one clause per unordered pair of distinct atoms."""
    return [Or(Not(a), Not(b)) for a, b in combinations(atoms, 2)]


def exactly_one(atoms: Sequence[BoolRef]) -> list[BoolRef]:
    return [disjunction(atoms)] + at_most_one(atoms)
