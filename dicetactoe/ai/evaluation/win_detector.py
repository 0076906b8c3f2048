"""
Win detection system for tic-tac-toe.
"""
from typing import List, Optional
import numpy as np
from ...models.enums import Side
from ...models.win_pattern import WinPattern, WinResult, WIN_PATTERNS
from ...game.board import Board


# Weight of cell i in an occupancy mask
_BIT_WEIGHTS = 1 << np.arange(Board.TOTAL_CELLS, dtype=np.int64)


class WinDetector:
    """
    Detects completed lines on the 3x3 board.

    A side's cells are folded into a 9-bit occupancy mask and compared
    against the fixed row, column and diagonal masks.
    """

    def __init__(self):
        """Initialize the win detector with the fixed winning patterns."""
        self._winning_patterns: List[WinPattern] = list(WIN_PATTERNS)

    def occupancy_mask(self, board: Board, side: Side) -> int:
        """Build a mask with bit i set iff cell i holds ``side``."""
        return int(np.dot((board.cells == side.value).astype(np.int64), _BIT_WEIGHTS))

    def winning_pattern(self, board: Board, side: Side) -> Optional[WinPattern]:
        """Return the first line fully occupied by ``side``, if any."""
        mask = self.occupancy_mask(board, side)
        for pattern in self._winning_patterns:
            if mask & pattern.mask == pattern.mask:
                return pattern
        return None

    def has_won(self, board: Board, side: Side) -> bool:
        return self.winning_pattern(board, side) is not None

    def check_win(self, board: Board) -> Optional[WinResult]:
        """
        Check if either side has completed a line.

        Returns:
            WinResult if a side has won, None otherwise
        """
        for side in (Side.X, Side.O):
            pattern = self.winning_pattern(board, side)
            if pattern is not None:
                return WinResult(winner=side, winning_pattern=pattern)
        return None

    def winner(self, board: Board, player_a, player_b):
        """
        Return whichever player's side has won, checking ``player_a`` first.

        Both sides holding a line cannot happen with alternating moves, so
        the order only matters on boards that were never legally reachable.
        """
        if self.has_won(board, player_a.side):
            return player_a
        if self.has_won(board, player_b.side):
            return player_b
        return None

    def is_round_over(self, board: Board) -> bool:
        """A round ends on a completed line or a full board."""
        return (self.has_won(board, Side.X) or self.has_won(board, Side.O)
                or not board.has_available_move())

    def find_immediate_wins(self, board: Board, side: Side) -> List[int]:
        """
        Find cells that would immediately complete a line for ``side``.

        Returns:
            Sorted list of empty cell indices
        """
        winning_moves = set()
        mask = self.occupancy_mask(board, side)
        for pattern in self._winning_patterns:
            missing = pattern.mask & ~mask
            # exactly one cell of the line is not ours
            if missing and missing & (missing - 1) == 0:
                cell = missing.bit_length() - 1
                if board.is_empty(cell):
                    winning_moves.add(cell)
        return sorted(winning_moves)

    def find_blocking_moves(self, board: Board, side: Side) -> List[int]:
        """Find cells ``side`` must take to stop the opponent's immediate wins."""
        return self.find_immediate_wins(board, side.opponent)
