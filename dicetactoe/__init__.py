"""
Tic-tac-toe matches decided over several rounds, with a minimax AI opponent.
"""
from .config import MatchConfig
from .models import Side, MatchPhase, Move, RoundResult, MatchResult
from .game.board import Board, InvalidMoveError
from .game.players import Player, HumanPlayer, AIPlayer, MoveRequest
from .game.dice import DiceRoll, roll_for_start
from .game.match import Match, MatchObserver, MatchStateError, MatchOverError
from .ai.engine import AIEngine, AIDecision, AIDecisionError

__version__ = "0.1.0"

__all__ = [
    'MatchConfig', 'Side', 'MatchPhase', 'Move', 'RoundResult', 'MatchResult',
    'Board', 'InvalidMoveError', 'Player', 'HumanPlayer', 'AIPlayer', 'MoveRequest',
    'DiceRoll', 'roll_for_start', 'Match', 'MatchObserver', 'MatchStateError',
    'MatchOverError', 'AIEngine', 'AIDecision', 'AIDecisionError',
]
