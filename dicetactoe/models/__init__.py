# Data models and enums
from .enums import EMPTY, Side, LineType, MatchPhase
from .win_pattern import WinPattern, WinResult, WIN_PATTERNS
from .move import Move
from .results import RoundResult, MatchResult

__all__ = ['EMPTY', 'Side', 'LineType', 'MatchPhase', 'WinPattern', 'WinResult',
           'WIN_PATTERNS', 'Move', 'RoundResult', 'MatchResult']
