import itertools
import random
from typing import Iterable, List, Optional

import numpy as np
from hypothesis import strategies as st

from dicetactoe.game.board import Board
from dicetactoe.game.players import Player
from dicetactoe.models.enums import Side


cells_strategy = st.lists(st.sampled_from([0, 1, -1]), min_size=9, max_size=9)


def board_from_cells(cells: List[int]) -> Board:
    board = Board()
    board.cells = np.array(cells, dtype=np.int8)
    return board


class ScriptedPlayer(Player):
    """Plays a fixed cycle of cells, regardless of the board."""

    def __init__(self, name: str, side: Side, moves: Iterable[int]):
        super().__init__(name, side)
        self._moves = itertools.cycle(list(moves))

    async def propose_move(self, board: Board) -> int:
        return next(self._moves)


class RandomLegalPlayer(Player):
    def __init__(self, name: str, side: Side, seed: Optional[int] = None):
        super().__init__(name, side)
        self.rng = random.Random(seed)

    async def propose_move(self, board: Board) -> int:
        return self.rng.choice(board.available_moves())
