"""
Round and match outcome models.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class RoundResult:
    """
    Outcome of one round played to completion.

    Attributes:
        round_number: 1-based index of the round within the match
        winner: Player who completed a line, or None for a draw
        moves_played: Number of marks placed during the round
        final_board: Board string ('X', 'O', '_') at the end of the round
    """
    round_number: int
    winner: Optional[Any]
    moves_played: int
    final_board: str

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.is_draw:
            return f"Round {self.round_number}: draw"
        return f"Round {self.round_number}: {self.winner.name} wins"


@dataclass
class MatchResult:
    """Final outcome of a match."""
    winner: Any
    rounds: List[RoundResult] = field(default_factory=list)
    scores: Dict[str, int] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.winner.name} wins the game!"
