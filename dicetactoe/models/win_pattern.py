"""
Win pattern models for the 3x3 board.
"""
from dataclasses import dataclass
from typing import List, Tuple
from .enums import Side, LineType


@dataclass(frozen=True)
class WinPattern:
    """
    Represents one of the eight winning lines.

    Attributes:
        type: Row, column or diagonal
        cells: The three cell indices forming the line, in scan order
        description: Human-readable description of the line
    """
    type: LineType
    cells: Tuple[int, int, int]
    description: str = ""

    def __post_init__(self):
        """Validate pattern parameters."""
        if len(self.cells) != 3:
            raise ValueError(f"Win pattern must have exactly 3 cells, got {len(self.cells)}")

        for cell in self.cells:
            if not (0 <= cell <= 8):
                raise ValueError(f"Cell index must be between 0 and 8, got {cell}")

    @property
    def mask(self) -> int:
        """9-bit mask with bit i set for every cell i of the line."""
        mask = 0
        for cell in self.cells:
            mask |= 1 << cell
        return mask

    def __str__(self) -> str:
        return f"{self.description or self.type.value.title()}: {list(self.cells)}"


WIN_PATTERNS: Tuple[WinPattern, ...] = (
    WinPattern(LineType.ROW, (0, 1, 2), "Top row"),
    WinPattern(LineType.ROW, (3, 4, 5), "Middle row"),
    WinPattern(LineType.ROW, (6, 7, 8), "Bottom row"),
    WinPattern(LineType.COLUMN, (0, 3, 6), "Left column"),
    WinPattern(LineType.COLUMN, (1, 4, 7), "Middle column"),
    WinPattern(LineType.COLUMN, (2, 5, 8), "Right column"),
    WinPattern(LineType.DIAGONAL, (0, 4, 8), "Main diagonal"),
    WinPattern(LineType.DIAGONAL, (2, 4, 6), "Anti diagonal"),
)


@dataclass
class WinResult:
    """
    Represents the result of a winning condition check.

    Attributes:
        winner: Side that completed a line
        winning_pattern: The line that was completed
    """
    winner: Side
    winning_pattern: WinPattern

    @property
    def winning_positions(self) -> List[int]:
        return list(self.winning_pattern.cells)

    def __str__(self) -> str:
        return f"{self.winner.symbol} wins with {self.winning_pattern}"
