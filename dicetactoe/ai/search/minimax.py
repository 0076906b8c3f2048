"""
Depth-bounded minimax search for the tic-tac-toe AI.

The search is plain minimax with one deliberate twist: at every node the
move handed back to the parent is drawn by a MoveChooser from all moves that
share the best score (from all moves at all on an untouched board). The
parent uses the score of that realised choice, so the AI plays perfectly with
respect to its evaluation but never the same way twice on equal options.
"""
import time
from typing import List, Optional
from dataclasses import dataclass, field
from ...models.enums import Side
from ...game.board import Board
from ..evaluation.position_evaluator import PositionEvaluator
from .tie_break import MoveChooser, RandomChooser, ScoredMove


@dataclass
class SearchResult:
    """
    Result of a minimax search.

    Attributes:
        best_move: Cell chosen at the root, None when the root is a leaf
        score: Score of the chosen move from the maximizing side's view
        depth: Depth the search was asked for
        nodes_evaluated: Number of nodes visited
        time_elapsed: Time taken for the search in seconds
        candidates: Every (score, position) pair scored at the root
    """
    best_move: Optional[int]
    score: float
    depth: int
    nodes_evaluated: int
    time_elapsed: float
    candidates: List[ScoredMove] = field(default_factory=list)


class SearchAlgorithm:
    """
    Minimax over the 3x3 board with a static evaluator at the cutoff.

    Each call to find_best_move works on its own copy of the board, and every
    hypothetical mark is removed again before the next sibling is tried.
    """

    def __init__(self, evaluator: Optional[PositionEvaluator] = None,
                 chooser: Optional[MoveChooser] = None):
        self.evaluator = evaluator or PositionEvaluator()
        self.chooser = chooser or RandomChooser()

        # Search statistics
        self.nodes_evaluated = 0
        self._root_candidates: List[ScoredMove] = []

    def find_best_move(self, board: Board, depth: int, maximizing_side: Side,
                       mover: Optional[Side] = None) -> SearchResult:
        """
        Search for the best move.

        Args:
            board: Current board state, never modified
            depth: Remaining plies to explore (0 evaluates the board as is)
            maximizing_side: Side whose evaluation is maximized
            mover: Side to move at the root (default: maximizing_side)

        Returns:
            SearchResult with the chosen move and search statistics
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        if mover is None:
            mover = maximizing_side

        start_time = time.time()
        self.nodes_evaluated = 0
        self._root_candidates = []

        result = self._minimax(board.copy(), depth, mover, maximizing_side, root=True)

        return SearchResult(
            best_move=result.position,
            score=result.score,
            depth=depth,
            nodes_evaluated=self.nodes_evaluated,
            time_elapsed=time.time() - start_time,
            candidates=self._root_candidates,
        )

    def _minimax(self, board: Board, depth: int, mover: Side, maximizing_side: Side,
                 root: bool = False) -> ScoredMove:
        """
        Score the position for ``mover`` to play.

        Args:
            board: Search-private board, restored before returning
            depth: Remaining search depth
            mover: Side whose hypothetical turn this is
            maximizing_side: Side the evaluation favours

        Returns:
            The chosen move and its score; position is None at a leaf
        """
        self.nodes_evaluated += 1
        moves = board.available_moves()

        if not moves or depth == 0:
            return ScoredMove(self.evaluator.evaluate_position(board, maximizing_side), None)

        maximizing = mover == maximizing_side
        best_score = float('-inf') if maximizing else float('inf')
        candidates: List[ScoredMove] = []

        for position in moves:
            board.place(position, mover)
            try:
                score = self._minimax(board, depth - 1, mover.opponent, maximizing_side).score
            finally:
                board.remove(position)

            candidates.append(ScoredMove(score, position))
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score

        if root:
            self._root_candidates = candidates

        # untouched board: any opening is acceptable
        if len(candidates) == Board.TOTAL_CELLS:
            return self.chooser.choose(candidates)
        return self.chooser.choose([c for c in candidates if c.score == best_score])
