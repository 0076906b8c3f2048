"""
Move selection strategies used by the search to break ties.
"""
import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


@dataclass(frozen=True)
class ScoredMove:
    """A candidate cell paired with the score the search gave it."""
    score: float
    position: Optional[int]


class MoveChooser(Protocol):
    """Picks one candidate out of a non-empty sequence."""

    def choose(self, candidates: Sequence[ScoredMove]) -> ScoredMove:
        ...


class RandomChooser:
    """Uniform random choice, the behaviour used in real games."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def choose(self, candidates: Sequence[ScoredMove]) -> ScoredMove:
        return self.rng.choice(list(candidates))


class FirstChooser:
    """Always takes the first candidate (lowest cell index)."""

    def choose(self, candidates: Sequence[ScoredMove]) -> ScoredMove:
        return candidates[0]
