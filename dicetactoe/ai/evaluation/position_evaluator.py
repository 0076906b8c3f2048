"""
Position evaluation system for the tic-tac-toe AI.

Every line is scored on its own from the evaluating side's perspective and
the line scores are summed. Within a line each further mark of the side that
already owns it multiplies the magnitude by ten (0 -> 1 -> 10 -> 100), so two
in a line is worth far more than one without any deeper search. A line holding
both marks can never be completed and scores 0.
"""
from typing import Dict, List, Tuple
from dataclasses import dataclass, field
from ...models.enums import EMPTY, Side
from ...models.win_pattern import WinPattern, WIN_PATTERNS
from ...game.board import Board


@dataclass
class EvaluationMetrics:
    """
    Detailed metrics for position evaluation.

    Attributes:
        line_scores: Score of every line, keyed by its cell triple
        open_lines: Lines still winnable by exactly one side
        blocked_lines: Lines holding both marks
        total_score: Sum of all line scores
    """
    line_scores: Dict[Tuple[int, int, int], int] = field(default_factory=dict)
    open_lines: int = 0
    blocked_lines: int = 0
    total_score: int = 0


class PositionEvaluator:
    """
    Evaluates board positions with the line amplification heuristic.
    """

    AMPLIFICATION = 10

    def __init__(self, patterns: Tuple[WinPattern, ...] = WIN_PATTERNS):
        self.patterns = patterns

    def evaluate_line(self, board: Board, pattern: WinPattern, side: Side) -> int:
        """
        Score a single line for ``side``.

        Cells are processed in the line's fixed order with a running score:
        a cell of ``side`` multiplies a positive score by 10, blocks the line
        if the score is negative, and starts it at 1 otherwise. An opposing
        cell mirrors this with negative values.
        """
        score = 0
        for cell in pattern.cells:
            code = int(board.cells[cell])
            if code == EMPTY:
                continue
            if code == side.value:
                if score > 0:
                    score *= self.AMPLIFICATION
                elif score < 0:
                    return 0
                else:
                    score = 1
            else:
                if score < 0:
                    score *= self.AMPLIFICATION
                elif score > 0:
                    return 0
                else:
                    score = -1
        return score

    def evaluate_position(self, board: Board, side: Side) -> int:
        """
        Evaluate the board for ``side``.

        Returns:
            Evaluation score (positive = good for side, negative = bad)
        """
        return sum(self.evaluate_line(board, pattern, side) for pattern in self.patterns)

    def get_detailed_evaluation(self, board: Board, side: Side) -> EvaluationMetrics:
        metrics = EvaluationMetrics()
        for pattern in self.patterns:
            score = self.evaluate_line(board, pattern, side)
            metrics.line_scores[pattern.cells] = score
            metrics.total_score += score
            if score != 0:
                metrics.open_lines += 1
            elif any(int(board.cells[c]) == side.value for c in pattern.cells):
                # zero with one of our marks present means the opponent is there too
                metrics.blocked_lines += 1
        return metrics

    def get_best_moves(self, board: Board, side: Side, count: int = 3) -> List[Tuple[int, int]]:
        """
        Rank empty cells by the static score after ``side`` plays there.

        Args:
            board: Current board state (left unchanged)
            side: Side to move
            count: Number of moves to return

        Returns:
            List of (position, score) pairs, best first
        """
        scored = []
        for position in board.available_moves():
            board.place(position, side)
            try:
                scored.append((position, self.evaluate_position(board, side)))
            finally:
                board.remove(position)

        scored.sort(key=lambda item: item[1], reverse=True)
        return scored[:count]
