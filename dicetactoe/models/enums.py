"""
Core enums for the dice tic-tac-toe game.
"""
from enum import Enum


# Board storage code for an unoccupied cell
EMPTY = 0


class Side(Enum):
    """Represents the two marks that can occupy a cell."""
    X = 1
    O = -1

    @property
    def symbol(self) -> str:
        """Single character used in board strings."""
        return self.name

    @property
    def opponent(self) -> "Side":
        """Get the opposite side."""
        return Side.O if self is Side.X else Side.X

    @classmethod
    def from_symbol(cls, symbol: str) -> "Side":
        """Parse 'X' or 'O' into a side."""
        try:
            return cls[symbol.upper()]
        except KeyError:
            raise ValueError(f"Unknown side symbol: {symbol!r}") from None


class LineType(Enum):
    """Types of winning lines on the 3x3 board."""
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"


class MatchPhase(Enum):
    """States of the turn/match state machine."""
    AWAITING_MOVE = "awaiting_move"
    APPLYING = "applying"
    ROUND_OVER = "round_over"
    MATCH_OVER = "match_over"
