"""
Errors raised by the Wumpus knowledge base.
"""

from __future__ import annotations


class WumpusKBError(Exception):
    pass


class CaveConfigError(WumpusKBError, ValueError):
    pass


class KBInconsistencyError(WumpusKBError, RuntimeError):
    """A query that must have exactly one answer had zero or several."""

    def __init__(self, message: str, time_step: int) -> None:
        super().__init__(f"{message} (t={time_step})")
        self.time_step = time_step


class EntailmentError(WumpusKBError, RuntimeError):
    """The solver could not decide a query."""
