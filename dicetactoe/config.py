"""
Configuration for the dice tic-tac-toe core.

The board size and the number of round wins are fixed by the game rules;
the search depth and the simulated thinking time can be tuned per match.
"""
from dataclasses import dataclass
from typing import Tuple


# ==================== BOARD SETTINGS ====================
BOARD_SIZE = 9   # 3x3 grid, row-major cell indices 0-8
BOARD_WIDTH = 3

# ==================== MATCH SETTINGS ====================
WINS_TO_MATCH = 3   # first player to 3 round wins takes the match

# ==================== AI SETTINGS ====================
DEFAULT_SEARCH_DEPTH = 1
DEFAULT_THINK_TIME = (0.5, 1.5)   # seconds, min/max simulated thinking delay

# ==================== STARTING ORDER ====================
DICE_FACES = 5


@dataclass
class MatchConfig:
    """
    Tunable settings recognised by the match core.

    Attributes:
        search_depth: Lookahead used by automated players
        wins_to_match: Round wins needed to end the match
        think_time: (min, max) seconds an automated player waits before answering
    """
    search_depth: int = DEFAULT_SEARCH_DEPTH
    wins_to_match: int = WINS_TO_MATCH
    think_time: Tuple[float, float] = DEFAULT_THINK_TIME
    board_size: int = BOARD_SIZE

    def __post_init__(self):
        if self.search_depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {self.search_depth}")
        if self.wins_to_match < 1:
            raise ValueError(f"Wins to match must be positive, got {self.wins_to_match}")
        low, high = self.think_time
        if low < 0 or high < low:
            raise ValueError(f"Invalid think time range: {self.think_time}")
        if self.board_size != BOARD_SIZE:
            raise ValueError(f"Only a {BOARD_SIZE}-cell board is supported, got {self.board_size}")
