"""
AI Engine controller for dice tic-tac-toe.

This module wraps the minimax search with input checks, decision reasoning,
performance monitoring and logging.
"""
import time
import logging
from typing import Any, Dict, List, Optional
from dataclasses import dataclass

from ..config import DEFAULT_SEARCH_DEPTH
from ..models.enums import Side
from ..models.move import Move
from ..models.win_pattern import WinPattern
from ..game.board import Board
from .search.minimax import SearchAlgorithm, SearchResult
from .search.tie_break import MoveChooser
from .evaluation.position_evaluator import PositionEvaluator
from .evaluation.win_detector import WinDetector


class AIDecisionError(Exception):
    """Exception raised when the AI is asked for a move it cannot make."""

    def __init__(self, message: str, board: Board, search_depth: int):
        super().__init__(message)
        self.board = board
        self.search_depth = search_depth


@dataclass
class AIPerformanceMetrics:
    """
    Performance metrics for AI decision making.

    Attributes:
        move_time: Time taken to select the move (seconds)
        search_depth: Depth of the search
        nodes_evaluated: Number of nodes evaluated
        evaluation_score: Score of the selected move
    """
    move_time: float
    search_depth: int
    nodes_evaluated: int
    evaluation_score: float


@dataclass
class AIDecision:
    """
    Complete AI decision with move and performance data.

    Attributes:
        move: The selected move
        metrics: Performance metrics for this decision
        reasoning: Human-readable explanation of the decision
    """
    move: Move
    metrics: AIPerformanceMetrics
    reasoning: str


class AIEngine:
    """
    Main AI controller that orchestrates the decision-making process.

    The configured game uses a one-ply lookahead; any non-negative depth works.
    """

    def __init__(self, depth: int = DEFAULT_SEARCH_DEPTH,
                 chooser: Optional[MoveChooser] = None,
                 enable_logging: bool = True):
        """
        Initialize the AI engine.

        Args:
            depth: Search depth in plies
            chooser: Tie-break strategy handed to the search (default: random)
            enable_logging: Whether to enable decision logging
        """
        if depth < 0:
            raise ValueError("Depth must be non-negative")

        self.depth = depth
        self.enable_logging = enable_logging

        # Initialize components
        self.position_evaluator = PositionEvaluator()
        self.search_algorithm = SearchAlgorithm(self.position_evaluator, chooser)
        self.win_detector = WinDetector()

        # Performance tracking
        self.decision_history: List[AIDecision] = []
        self.total_decisions = 0
        self.total_time = 0.0

        self.logger = logging.getLogger('dicetactoe.ai')
        if self.enable_logging:
            self._setup_logging()

    def _setup_logging(self):
        """Set up logging for AI decisions."""
        self.logger.setLevel(logging.INFO)

        # Create console handler if none exists
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def select_move(self, board: Board, side: Side) -> AIDecision:
        """
        Select the best move for ``side`` on the given board.

        Args:
            board: Current board state (left unchanged)
            side: Side to select a move for; its evaluation is maximized

        Returns:
            AIDecision with the selected move and performance metrics

        Raises:
            AIDecisionError: If the round is already decided or the board is full
        """
        start_time = time.time()

        if board is None:
            raise AIDecisionError("Board cannot be None", board, 0)

        if not isinstance(side, Side):
            raise AIDecisionError(f"Invalid side type: {type(side)}", board, 0)

        win_result = self.win_detector.check_win(board)
        if win_result:
            raise AIDecisionError(f"Round is already over, winner: {win_result.winner.symbol}", board, 0)

        if not board.has_available_move():
            raise AIDecisionError("No legal moves available", board, 0)

        # A depth-0 search only scores the board, so look at least one ply ahead
        search_depth = max(self.depth, 1)
        search_result = self.search_algorithm.find_best_move(board, search_depth, side)

        if search_result.best_move is None:
            raise AIDecisionError("Search returned no move", board, search_result.depth)

        move = Move(position=search_result.best_move, side=side,
                    evaluation_score=search_result.score)
        move_time = time.time() - start_time
        metrics = AIPerformanceMetrics(
            move_time=move_time,
            search_depth=search_result.depth,
            nodes_evaluated=search_result.nodes_evaluated,
            evaluation_score=search_result.score,
        )

        decision = AIDecision(
            move=move,
            metrics=metrics,
            reasoning=self._generate_reasoning(search_result, board, side),
        )

        self.total_decisions += 1
        self.total_time += move_time
        self.decision_history.append(decision)
        self._log_decision(decision)
        return decision

    def _generate_reasoning(self, search_result: SearchResult, board: Board, side: Side) -> str:
        """
        Generate human-readable reasoning for the AI decision.

        Returns:
            Comma separated explanation of the decision
        """
        reasoning_parts = []
        position = search_result.best_move

        if not board.occupied_positions():
            reasoning_parts.append("Opening move")
        elif position in self.win_detector.find_immediate_wins(board, side):
            line = self._completed_line(board, position, side)
            reasoning_parts.append(f"Winning move ({line.description.lower()})")
        elif position in self.win_detector.find_blocking_moves(board, side):
            reasoning_parts.append("Blocking opponent's win")

        reasoning_parts.append(f"Search depth {search_result.depth}")

        if search_result.score >= 100:
            reasoning_parts.append("Completed line")
        elif search_result.score > 0:
            reasoning_parts.append("Advantage")
        elif search_result.score < 0:
            reasoning_parts.append("Defensive move")
        else:
            reasoning_parts.append("Balanced position")

        row, col = divmod(position, 3)
        reasoning_parts.append(f"row {row}, column {col}")

        return ", ".join(reasoning_parts)

    def _completed_line(self, board: Board, position: int, side: Side) -> WinPattern:
        scratch = board.copy()
        scratch.place(position, side)
        return self.win_detector.winning_pattern(scratch, side)

    def _log_decision(self, decision: AIDecision):
        """Log AI decision for performance monitoring."""
        if not self.enable_logging:
            return

        decided_at = time.strftime('%H:%M:%S', time.localtime(decision.move.timestamp))
        self.logger.info(
            f"[{decided_at}] {decision.move.side.symbol} - Move: {decision.move.position}, "
            f"Time: {decision.metrics.move_time:.3f}s, "
            f"Depth: {decision.metrics.search_depth}, "
            f"Nodes: {decision.metrics.nodes_evaluated}, "
            f"Score: {decision.metrics.evaluation_score:.2f}"
        )

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of AI performance statistics.

        Returns:
            Dictionary with performance metrics
        """
        if self.total_decisions == 0:
            return {
                'total_decisions': 0,
                'average_time': 0.0,
                'average_depth': 0.0,
                'total_nodes': 0
            }

        depths = [d.metrics.search_depth for d in self.decision_history]
        return {
            'total_decisions': self.total_decisions,
            'average_time': self.total_time / self.total_decisions,
            'average_depth': sum(depths) / len(depths) if depths else 0.0,
            'total_nodes': sum(d.metrics.nodes_evaluated for d in self.decision_history)
        }

    def reset_performance_tracking(self):
        """Reset all performance tracking data."""
        self.decision_history.clear()
        self.total_decisions = 0
        self.total_time = 0.0

    def set_depth(self, depth: int):
        """
        Set the search depth.

        Args:
            depth: Search depth in plies
        """
        if depth < 0:
            raise ValueError("Depth must be non-negative")

        self.depth = depth
