"""
3x3 board representation for the tic-tac-toe game.
"""
from typing import List, Optional
import numpy as np
from ..config import BOARD_SIZE, BOARD_WIDTH
from ..models.enums import EMPTY, Side


class InvalidMoveError(ValueError):
    """Raised when a mark is placed on an occupied or non-existent cell."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class Board:
    """
    Represents the tic-tac-toe board with 9 cells in row-major order.

    Layout:
    - Row 0: cells 0, 1, 2
    - Row 1: cells 3, 4, 5
    - Row 2: cells 6, 7, 8

    Cells are stored as int8 codes: EMPTY (0), Side.X (1) or Side.O (-1).
    """

    TOTAL_CELLS = BOARD_SIZE
    EMPTY_SYMBOL = '_'

    def __init__(self):
        """Initialize an empty board."""
        self.cells = np.zeros(self.TOTAL_CELLS, dtype=np.int8)

    @classmethod
    def empty(cls) -> 'Board':
        """Create a board with all 9 cells empty."""
        return cls()

    @classmethod
    def from_string(cls, board_string: str) -> 'Board':
        """
        Parse a board string into a Board.

        Args:
            board_string: 9-character string of 'X', 'O' or '_' per cell

        Returns:
            Board with the specified cells

        Raises:
            ValueError: If the string is malformed
        """
        if len(board_string) != cls.TOTAL_CELLS:
            raise ValueError(f"Board string must be exactly {cls.TOTAL_CELLS} characters, got {len(board_string)}")

        board = cls()
        for index, char in enumerate(board_string.upper()):
            if char == cls.EMPTY_SYMBOL:
                continue
            if char not in ('X', 'O'):
                raise ValueError(f"Invalid character '{char}' at position {index}. Use 'X', 'O', or '_'")
            board.place(index, Side.from_symbol(char))
        return board

    def _check_index(self, index: int):
        if not (0 <= index < self.TOTAL_CELLS):
            raise InvalidMoveError(f"Invalid position: {index}", index)

    def get(self, index: int) -> Optional[Side]:
        """Get the side occupying a cell, or None if it is empty."""
        self._check_index(index)
        code = int(self.cells[index])
        return None if code == EMPTY else Side(code)

    def is_empty(self, index: int) -> bool:
        return self.get(index) is None

    def available_moves(self) -> List[int]:
        """Indices of all empty cells in ascending order."""
        return [int(i) for i in np.flatnonzero(self.cells == EMPTY)]

    def has_available_move(self) -> bool:
        """Check whether at least one cell is still empty."""
        return bool(np.any(self.cells == EMPTY))

    def occupied_positions(self, side: Optional[Side] = None) -> List[int]:
        """Get occupied cell indices, optionally filtered by side."""
        if side is None:
            return [int(i) for i in np.flatnonzero(self.cells != EMPTY)]
        return [int(i) for i in np.flatnonzero(self.cells == side.value)]

    def is_full(self) -> bool:
        return not self.has_available_move()

    def place(self, index: int, side: Side):
        """
        Put a mark on an empty cell.

        Raises:
            InvalidMoveError: If the cell does not exist or is already occupied
        """
        self._check_index(index)
        if self.cells[index] != EMPTY:
            raise InvalidMoveError(f"Position {index} is already occupied", index)
        self.cells[index] = side.value

    def remove(self, index: int):
        """Clear a single occupied cell. Only the search uses this to backtrack."""
        self._check_index(index)
        if self.cells[index] == EMPTY:
            raise InvalidMoveError(f"Position {index} is already empty", index)
        self.cells[index] = EMPTY

    def clear(self):
        """Reset every cell to empty."""
        self.cells[:] = EMPTY

    def copy(self) -> 'Board':
        new_board = Board()
        new_board.cells = self.cells.copy()
        return new_board

    def state_string(self) -> str:
        """Get a string representing the current board state."""
        chars = []
        for code in self.cells:
            chars.append(self.EMPTY_SYMBOL if code == EMPTY else Side(int(code)).symbol)
        return ''.join(chars)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Board({self.state_string()!r})"

    def __str__(self) -> str:
        """3x3 grid, empty cells shown by their index."""
        rows = []
        for row in range(BOARD_WIDTH):
            cells = []
            for col in range(BOARD_WIDTH):
                index = row * BOARD_WIDTH + col
                side = self.get(index)
                cells.append(side.symbol if side else str(index))
            rows.append(" | ".join(cells))
        return "\n---------\n".join(rows)
