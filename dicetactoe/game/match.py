"""
Turn and match state machine.

A match is played between two players holding opposite sides. Every round
is opened by the starting player chosen once for the match; the first player
to reach the configured number of round wins takes the match.

    AWAITING_MOVE -> APPLYING -> AWAITING_MOVE       (round continues)
                              -> ROUND_OVER -> AWAITING_MOVE  (start_next_round)
                                            -> MATCH_OVER
"""
import logging
from typing import Dict, Iterable, List, Optional

from ..config import MatchConfig
from ..models.enums import MatchPhase
from ..models.results import MatchResult, RoundResult
from ..ai.evaluation.win_detector import WinDetector
from .board import Board, InvalidMoveError
from .players import AIPlayer, Player

logger = logging.getLogger(__name__)


class MatchStateError(RuntimeError):
    """Raised when an operation is not allowed in the current phase."""


class MatchOverError(MatchStateError):
    """Raised when a finished match is asked to continue."""


class MatchObserver:
    """
    Receives state updates for rendering. Every hook is optional.
    """

    def on_turn(self, match: 'Match', player: Player):
        pass

    def on_move(self, match: 'Match', player: Player, position: int):
        pass

    def on_round_over(self, match: 'Match', result: RoundResult):
        pass

    def on_match_over(self, match: 'Match', result: MatchResult):
        pass


class Match:
    """
    Drives rounds to completion and keeps the round-win score.

    Passing a ``config`` applies its search depth and thinking time to every
    AIPlayer in the match; without one, players keep their own settings.

    Attributes:
        board: Board of the round in progress
        players: The two players, first player first
        starting_player: Player who opens every round
        current_player: Player whose turn it is
        phase: Current state machine phase
        rounds: Results of every finished round
    """

    def __init__(self, player_a: Player, player_b: Player, starting_player: Player,
                 config: Optional[MatchConfig] = None,
                 observers: Iterable[MatchObserver] = ()):
        if player_a.side is None or player_b.side is None:
            raise ValueError("Both players need a side before the match starts")
        if player_a.side == player_b.side:
            raise ValueError(f"Players must hold opposite sides, both have {player_a.side.symbol}")
        if starting_player is not player_a and starting_player is not player_b:
            raise ValueError(f"Starting player {starting_player.name} is not in this match")

        self.config = config or MatchConfig()
        self.players = (player_a, player_b)
        # an explicit config overrides how automated players were built
        if config is not None:
            for player in self.players:
                if isinstance(player, AIPlayer):
                    player.configure(config)
        self.starting_player = starting_player
        self.current_player = starting_player
        self.observers: List[MatchObserver] = list(observers)

        self.board = Board.empty()
        self.win_detector = WinDetector()
        self.phase = MatchPhase.AWAITING_MOVE
        self.round_number = 1
        self.rounds: List[RoundResult] = []
        self.result: Optional[MatchResult] = None
        self._moves_this_round = 0
        self._request_outstanding = False

        for player in self.players:
            player.reset_score()

        logger.info(f"Match started: {player_a.name} ({player_a.side.symbol}) vs "
                    f"{player_b.name} ({player_b.side.symbol}), {starting_player.name} starts")

    @property
    def is_over(self) -> bool:
        return self.phase is MatchPhase.MATCH_OVER

    @property
    def match_winner(self) -> Optional[Player]:
        return self.result.winner if self.result else None

    @property
    def scores(self) -> Dict[str, int]:
        return {player.name: player.round_wins for player in self.players}

    def opponent_of(self, player: Player) -> Player:
        return self.players[1] if player is self.players[0] else self.players[0]

    async def take_turn(self) -> Optional[RoundResult]:
        """
        Ask the active player for one move and apply it.

        Returns:
            The RoundResult if this move ended the round, None otherwise

        Raises:
            MatchOverError: If the match has already finished
            MatchStateError: If a move is already being awaited or the round is over
            InvalidMoveError: If the player proposed an unavailable cell
        """
        if self.phase is MatchPhase.MATCH_OVER:
            raise MatchOverError("The match is over")
        if self.phase is not MatchPhase.AWAITING_MOVE:
            raise MatchStateError(f"Cannot request a move while {self.phase.value}")
        if self._request_outstanding:
            raise MatchStateError("A move request is already outstanding")

        player = self.current_player
        self._notify('on_turn', player)

        self._request_outstanding = True
        try:
            position = await player.propose_move(self.board.copy())
        finally:
            self._request_outstanding = False

        self.phase = MatchPhase.APPLYING
        if position not in self.board.available_moves():
            self.phase = MatchPhase.AWAITING_MOVE
            raise InvalidMoveError(f"{player.name} proposed unavailable position {position}", position)

        self.board.place(position, player.side)
        self._moves_this_round += 1
        logger.debug(f"{player.name} played {position}")
        self._notify('on_move', player, position)

        if self.win_detector.is_round_over(self.board):
            return self._finish_round()

        self.current_player = self.opponent_of(player)
        self.phase = MatchPhase.AWAITING_MOVE
        return None

    def _finish_round(self) -> RoundResult:
        winner = self.win_detector.winner(self.board, *self.players)
        if winner is not None:
            winner.round_wins += 1

        result = RoundResult(
            round_number=self.round_number,
            winner=winner,
            moves_played=self._moves_this_round,
            final_board=self.board.state_string(),
        )
        self.rounds.append(result)
        logger.info(f"{result} (scores: {self.scores})")

        self.phase = MatchPhase.ROUND_OVER
        self._notify('on_round_over', result)

        if winner is not None and winner.round_wins >= self.config.wins_to_match:
            self.phase = MatchPhase.MATCH_OVER
            self.result = MatchResult(winner=winner, rounds=list(self.rounds), scores=self.scores)
            logger.info(str(self.result))
            self._notify('on_match_over', self.result)

        return result

    def start_next_round(self):
        """
        Clear the board and hand the first move back to the starting player.

        Raises:
            MatchOverError: If the match has already finished
            MatchStateError: If the current round is still being played
        """
        if self.phase is MatchPhase.MATCH_OVER:
            raise MatchOverError("The match is over")
        if self.phase is not MatchPhase.ROUND_OVER:
            raise MatchStateError("The current round is not finished")

        self.board.clear()
        self._moves_this_round = 0
        self.round_number += 1
        self.current_player = self.starting_player
        self.phase = MatchPhase.AWAITING_MOVE
        logger.info(f"Round {self.round_number}, {self.starting_player.name} starts")

    async def play_round(self) -> RoundResult:
        """Take turns until the current round ends."""
        while True:
            result = await self.take_turn()
            if result is not None:
                return result

    async def play(self) -> MatchResult:
        """Play rounds until one player reaches the required round wins."""
        while True:
            await self.play_round()
            if self.is_over:
                return self.result
            self.start_next_round()

    def _notify(self, hook: str, *args):
        for observer in self.observers:
            getattr(observer, hook)(self, *args)
