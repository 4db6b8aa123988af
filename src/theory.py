"""
Append-only propositional theory.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from z3 import BoolRef

logger = logging.getLogger(__name__)


class Theory:
    """
    Ordered collection of sentences. Sentences are only ever appended; nothing
    is retracted or rewritten, so every entailment stays true as it grows.
    """

    def __init__(self, sentences: Iterable[BoolRef] = ()) -> None:
        self._sentences: list[BoolRef] = []
        self.tell_all(sentences)

    def tell(self, sentence: BoolRef) -> None:
        self._sentences.append(sentence)

    def tell_all(self, sentences: Iterable[BoolRef]) -> int:
        before = len(self._sentences)
        self._sentences.extend(sentences)
        added = len(self._sentences) - before
        if added:
            logger.debug("Told %d sentences (theory size %d)", added, len(self._sentences))
        return added

    @property
    def sentences(self) -> tuple[BoolRef, ...]:
        return tuple(self._sentences)

    def sentences_since(self, index: int) -> list[BoolRef]:
        return self._sentences[index:]

    def __len__(self) -> int:
        return len(self._sentences)

    def __iter__(self) -> Iterator[BoolRef]:
        return iter(tuple(self._sentences))

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self._sentences)
