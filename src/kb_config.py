"""
Configuration for the Wumpus knowledge base.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from entailment import DEFAULT_PROCEDURE
from kb_errors import CaveConfigError
from wumpus_world import AgentPosition, Orientation, in_cave


def _default_start() -> AgentPosition:
    return AgentPosition(1, 1, Orientation.FACING_NORTH)


@dataclass(frozen=True)
class KBConfig:
    """
    Cave dimensions, start position and encoding options.

    ``disable_nav_sentences`` skips the successor-state axioms for location and
    orientation. The theory then stays much smaller per step, but the agent's
    position must be told with ``make_position_sentence`` instead of inferred.
    ``procedure`` names the entailment procedure; it is resolved, and rejected
    if unknown, when the knowledge base is built.
    """

    width: int = 4
    height: int = 4
    start: AgentPosition = field(default_factory=_default_start)
    disable_nav_sentences: bool = False
    procedure: str = DEFAULT_PROCEDURE

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise CaveConfigError(f"cave {label} must be a positive integer, got {value!r}")
        if not in_cave(self.start.x, self.start.y, self.width, self.height):
            raise CaveConfigError(
                f"start room ({self.start.x},{self.start.y}) is outside a "
                f"{self.width}x{self.height} cave"
            )

    @classmethod
    def square(cls, dimension: int, **kwargs) -> "KBConfig":
        return cls(width=dimension, height=dimension, **kwargs)
