"""
Player abstractions for the match state machine.

Every player answers one question: given the current board, which cell do
you take? Humans answer through a pending MoveRequest that an input
collaborator resolves; automated players answer through the AI engine after
a short simulated thinking delay.
"""
import asyncio
import random
from typing import List, Optional, Tuple

from ..config import DEFAULT_SEARCH_DEPTH, DEFAULT_THINK_TIME, MatchConfig
from ..models.enums import Side
from ..ai.engine import AIEngine
from .board import Board


class MoveRequest:
    """
    A pending request for one move that resolves exactly once.

    Attributes:
        allowed_moves: Cells the answer must come from
    """

    def __init__(self, allowed_moves: List[int]):
        self.allowed_moves = list(allowed_moves)
        self._future: asyncio.Future = asyncio.get_running_loop().create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    def accepts(self, index: int) -> bool:
        return index in self.allowed_moves

    def resolve(self, index: int):
        """
        Deliver the chosen cell.

        Raises:
            RuntimeError: If the request was already resolved
            ValueError: If the cell is not one of the allowed moves
        """
        if self.done:
            raise RuntimeError("Move request already resolved")
        if not self.accepts(index):
            raise ValueError(f"Position {index} is not an available move")
        self._future.set_result(index)

    def __await__(self):
        return self._future.__await__()


class Player:
    """
    Base class for anything that can propose a move.

    Attributes:
        name: Display name
        side: Mark this player places
        round_wins: Rounds won in the current match
    """

    def __init__(self, name: str, side: Optional[Side] = None):
        self.name = name
        self.side = side
        self.round_wins = 0

    @property
    def is_human(self) -> bool:
        return False

    def reset_score(self):
        """Forget round wins; called once when a match starts."""
        self.round_wins = 0

    async def propose_move(self, board: Board) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        side = self.side.symbol if self.side else '?'
        return f"{type(self).__name__}({self.name!r}, {side})"


class HumanPlayer(Player):
    """A player whose moves come from an external input collaborator."""

    def __init__(self, name: str, side: Optional[Side] = None):
        super().__init__(name, side)
        self.pending_request: Optional[MoveRequest] = None

    @property
    def is_human(self) -> bool:
        return True

    @property
    def awaiting_input(self) -> bool:
        return self.pending_request is not None and not self.pending_request.done

    async def propose_move(self, board: Board) -> int:
        if self.awaiting_input:
            raise RuntimeError(f"{self.name} already has a move request outstanding")

        self.pending_request = MoveRequest(board.available_moves())
        try:
            return await self.pending_request
        finally:
            self.pending_request = None

    def submit_move(self, index: int) -> bool:
        """
        Answer the outstanding move request.

        Returns:
            True if the move was accepted, False if there is no request or the
            cell is not available (the request then stays pending)
        """
        if not self.awaiting_input or not self.pending_request.accepts(index):
            return False
        self.pending_request.resolve(index)
        return True


class AIPlayer(Player):
    """A player whose moves come from the minimax engine."""

    def __init__(self, name: str, side: Optional[Side] = None,
                 engine: Optional[AIEngine] = None,
                 depth: int = DEFAULT_SEARCH_DEPTH,
                 think_time: Tuple[float, float] = DEFAULT_THINK_TIME,
                 rng: Optional[random.Random] = None):
        super().__init__(name, side)
        self.engine = engine or AIEngine(depth=depth, enable_logging=False)
        self.think_time = think_time
        self.rng = rng or random.Random()

    @classmethod
    def from_config(cls, name: str, side: Side, config: MatchConfig,
                    rng: Optional[random.Random] = None) -> "AIPlayer":
        """Build an automated player with the match's depth and thinking time."""
        player = cls(name, side, rng=rng)
        player.configure(config)
        return player

    def configure(self, config: MatchConfig):
        """Adopt the search depth and thinking time of ``config``."""
        self.engine.set_depth(config.search_depth)
        self.think_time = config.think_time

    async def propose_move(self, board: Board) -> int:
        # the search must finish before control is yielded
        decision = self.engine.select_move(board, self.side)

        low, high = self.think_time
        delay = self.rng.uniform(low, high) if high > 0 else 0.0
        await asyncio.sleep(delay)
        return decision.move.position
