"""
Dice roll that decides which player opens every round of a match.
"""
import random
from dataclasses import dataclass
from typing import Any, Optional

from ..config import DICE_FACES


@dataclass
class DiceRoll:
    """
    Outcome of the starting-order roll.

    Attributes:
        score_a: Final roll of the first player
        score_b: Final roll of the second player
        starting_player: Player with the higher roll
        attempts: Number of throws needed to break ties
    """
    score_a: int
    score_b: int
    starting_player: Any
    attempts: int = 1

    def __str__(self) -> str:
        return f"{self.score_a} - {self.score_b}, {self.starting_player.name} start!"


def roll_for_start(player_a, player_b, rng: Optional[random.Random] = None,
                   faces: int = DICE_FACES) -> DiceRoll:
    """Both players roll until the scores differ; the higher roll starts."""
    if faces < 2:
        raise ValueError(f"Dice need at least 2 faces, got {faces}")
    rng = rng or random.Random()

    attempts = 0
    while True:
        attempts += 1
        score_a = rng.randint(1, faces)
        score_b = rng.randint(1, faces)
        if score_a != score_b:
            break

    starter = player_a if score_a > score_b else player_b
    return DiceRoll(score_a, score_b, starter, attempts)
