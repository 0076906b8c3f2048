from typing import List

import pytest
from hypothesis import given

from dicetactoe.ai.evaluation.position_evaluator import PositionEvaluator
from dicetactoe.game.board import Board
from dicetactoe.models.enums import Side
from dicetactoe.models.win_pattern import WIN_PATTERNS
from tests.helpers import board_from_cells, cells_strategy


evaluator = PositionEvaluator()
TOP_ROW = WIN_PATTERNS[0]


@pytest.mark.parametrize('row, expected', [
    ('___', 0),
    ('X__', 1),
    ('__X', 1),
    ('XX_', 10),
    ('X_X', 10),
    ('_XX', 10),
    ('XXX', 100),
    ('O__', -1),
    ('OO_', -10),
    ('OOO', -100),
    ('XO_', 0),
    ('X_O', 0),
    ('O_X', 0),
    ('XXO', 0),
    ('OXX', 0),
])
def test_line_amplification_ladder(row: str, expected: int):
    b = Board.from_string(row + '______')
    assert evaluator.evaluate_line(b, TOP_ROW, Side.X) == expected


def test_empty_board_scores_zero():
    assert evaluator.evaluate_position(Board.empty(), Side.X) == 0


def test_position_sums_lines():
    # X centre touches 4 lines, O corner touches 3, 2 of them shared with X
    b = Board.from_string('O___X____')
    assert evaluator.evaluate_position(b, Side.X) == (4 - 2) - (3 - 2)


def test_detailed_evaluation_counts_blocked_lines():
    b = Board.from_string('XO__X____')
    metrics = evaluator.get_detailed_evaluation(b, Side.X)
    assert metrics.total_score == evaluator.evaluate_position(b, Side.X)
    assert metrics.line_scores[(0, 1, 2)] == 0
    assert metrics.line_scores[(0, 4, 8)] == 10
    assert metrics.blocked_lines == 2  # top row and middle column


def test_get_best_moves_leaves_board_untouched():
    b = Board.from_string('XX__O___O')
    before = b.state_string()
    best = evaluator.get_best_moves(b, Side.X, count=1)
    assert best[0][0] == 2
    assert b.state_string() == before


@given(cells_strategy)
def test_mixed_lines_score_zero(cells: List[int]):
    b = board_from_cells(cells)
    for pattern in WIN_PATTERNS:
        values = {cells[i] for i in pattern.cells}
        if 1 in values and -1 in values:
            assert evaluator.evaluate_line(b, pattern, Side.X) == 0
            assert evaluator.evaluate_line(b, pattern, Side.O) == 0


@given(cells_strategy)
def test_swapping_sides_negates_every_line(cells: List[int]):
    b = board_from_cells(cells)
    for pattern in WIN_PATTERNS:
        assert evaluator.evaluate_line(b, pattern, Side.X) == -evaluator.evaluate_line(b, pattern, Side.O)
    assert evaluator.evaluate_position(b, Side.X) == -evaluator.evaluate_position(b, Side.O)
