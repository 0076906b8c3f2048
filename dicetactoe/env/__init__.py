# Gymnasium environment against the minimax AI
from .environment import TicTacToeEnv

__all__ = ['TicTacToeEnv']
