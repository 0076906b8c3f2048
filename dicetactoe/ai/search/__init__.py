# Minimax search and tie-break strategies
from .tie_break import ScoredMove, MoveChooser, RandomChooser, FirstChooser
from .minimax import SearchAlgorithm, SearchResult

__all__ = ['ScoredMove', 'MoveChooser', 'RandomChooser', 'FirstChooser',
           'SearchAlgorithm', 'SearchResult']
