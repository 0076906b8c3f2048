"""
A single mark placed by one side.
"""
from dataclasses import dataclass, field
from typing import Optional
import time
from .enums import Side


@dataclass
class Move:
    """
    One cell claimed by one side.

    Attributes:
        position: Cell index (0-8)
        side: Side placing the mark
        evaluation_score: Search score behind the choice, if the AI made it
        timestamp: Wall-clock time the move was decided
    """
    position: int
    side: Side
    evaluation_score: Optional[float] = None
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self):
        if not (0 <= self.position <= 8):
            raise ValueError(f"Position must be between 0 and 8, got {self.position}")
        if not isinstance(self.side, Side):
            raise ValueError(f"Side must be a Side enum, got {type(self.side)}")

    def __str__(self) -> str:
        score = "" if self.evaluation_score is None else f" (score: {self.evaluation_score:.2f})"
        return f"{self.side.symbol} -> cell {self.position}{score}"
