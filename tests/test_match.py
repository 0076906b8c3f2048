import asyncio

import pytest

from dicetactoe.ai.engine import AIEngine
from dicetactoe.ai.search.tie_break import FirstChooser
from dicetactoe.config import MatchConfig
from dicetactoe.game.board import InvalidMoveError
from dicetactoe.game.match import Match, MatchObserver, MatchOverError, MatchStateError
from dicetactoe.game.players import AIPlayer, HumanPlayer
from dicetactoe.models.enums import MatchPhase, Side
from tests.helpers import RandomLegalPlayer, ScriptedPlayer


class RecordingObserver(MatchObserver):
    def __init__(self):
        self.turns = []
        self.moves = []
        self.rounds = []
        self.finished = []

    def on_turn(self, match, player):
        self.turns.append(player.name)

    def on_move(self, match, player, position):
        self.moves.append((player.name, position))

    def on_round_over(self, match, result):
        self.rounds.append(result)

    def on_match_over(self, match, result):
        self.finished.append(result)


def test_full_board_without_line_is_a_draw():
    a = ScriptedPlayer('A', Side.X, [0, 2, 3, 7, 8])
    b = ScriptedPlayer('B', Side.O, [1, 4, 5, 6])
    match = Match(a, b, starting_player=a)
    result = asyncio.run(match.play_round())
    assert result.is_draw
    assert result.moves_played == 9
    assert result.final_board == 'XOXXOOOXX'
    assert match.phase is MatchPhase.ROUND_OVER
    assert (a.round_wins, b.round_wins) == (0, 0)


def test_three_round_wins_end_the_match():
    a = ScriptedPlayer('A', Side.X, [0, 1, 2])
    b = ScriptedPlayer('B', Side.O, [3, 4])
    observer = RecordingObserver()
    match = Match(a, b, starting_player=a, observers=[observer])

    result = asyncio.run(match.play())

    assert result.winner is a
    assert match.match_winner is a
    assert match.is_over
    assert a.round_wins == 3 and b.round_wins == 0
    assert [r.round_number for r in match.rounds] == [1, 2, 3]
    assert result.scores == {'A': 3, 'B': 0}
    assert len(observer.rounds) == 3
    assert observer.finished == [result]
    assert str(result) == 'A wins the game!'


def test_no_moves_after_match_over():
    a = ScriptedPlayer('A', Side.X, [0, 1, 2])
    b = ScriptedPlayer('B', Side.O, [3, 4])
    match = Match(a, b, starting_player=a)
    asyncio.run(match.play())
    with pytest.raises(MatchOverError):
        asyncio.run(match.take_turn())
    with pytest.raises(MatchOverError):
        match.start_next_round()


def test_every_round_opens_with_the_starting_player():
    a = ScriptedPlayer('A', Side.X, [3, 4])
    b = ScriptedPlayer('B', Side.O, [0, 1, 2])
    observer = RecordingObserver()
    match = Match(a, b, starting_player=b, observers=[observer],
                  config=MatchConfig(wins_to_match=2))

    asyncio.run(match.play_round())
    assert match.rounds[0].winner is b
    with pytest.raises(MatchStateError):
        asyncio.run(match.take_turn())

    match.start_next_round()
    assert match.current_player is b
    assert match.board.available_moves() == list(range(9))
    asyncio.run(match.play_round())

    assert match.is_over and match.match_winner is b
    assert observer.turns[0] == 'B' and observer.turns[5] == 'B'


def test_start_next_round_requires_round_over():
    a = ScriptedPlayer('A', Side.X, [0])
    b = ScriptedPlayer('B', Side.O, [1])
    match = Match(a, b, starting_player=a)
    with pytest.raises(MatchStateError):
        match.start_next_round()


def test_unavailable_move_fails_loudly():
    a = ScriptedPlayer('A', Side.X, [4])
    b = ScriptedPlayer('B', Side.O, [4])
    match = Match(a, b, starting_player=a)
    asyncio.run(match.take_turn())
    with pytest.raises(InvalidMoveError):
        asyncio.run(match.take_turn())
    assert match.phase is MatchPhase.AWAITING_MOVE
    assert match.current_player is b
    assert match.board.state_string() == '____X____'


def test_single_outstanding_request():
    async def scenario():
        human = HumanPlayer('Player1', Side.X)
        other = HumanPlayer('Player2', Side.O)
        match = Match(human, other, starting_player=human)
        turn = asyncio.ensure_future(match.take_turn())
        await asyncio.sleep(0)
        with pytest.raises(MatchStateError):
            await match.take_turn()
        assert human.submit_move(4)
        await turn
        return match

    match = asyncio.run(scenario())
    assert match.board.state_string() == '____X____'
    assert match.current_player.name == 'Player2'


def test_match_setup_is_validated():
    a = HumanPlayer('A', Side.X)
    with pytest.raises(ValueError):
        Match(a, HumanPlayer('B', Side.X), starting_player=a)
    with pytest.raises(ValueError):
        Match(a, HumanPlayer('B'), starting_player=a)
    with pytest.raises(ValueError):
        Match(a, HumanPlayer('B', Side.O), starting_player=HumanPlayer('C', Side.O))


def test_round_wins_reset_when_match_starts():
    a = HumanPlayer('A', Side.X)
    b = HumanPlayer('B', Side.O)
    a.round_wins = 3
    Match(a, b, starting_player=b)
    assert a.round_wins == 0


def test_match_against_ai_runs_to_the_end():
    engine = AIEngine(chooser=FirstChooser(), enable_logging=False)
    ai = AIPlayer('Bernard(AI)', Side.O, engine=engine, think_time=(0.0, 0.0))
    opponent = RandomLegalPlayer('You', Side.X, seed=2)
    match = Match(opponent, ai, starting_player=opponent)

    result = asyncio.run(match.play())

    assert result.winner.round_wins == 3
    assert match.phase is MatchPhase.MATCH_OVER
    decided = [r for r in match.rounds if not r.is_draw]
    assert len(decided) == opponent.round_wins + ai.round_wins


@pytest.mark.parametrize('kwargs', [
    {'search_depth': -1},
    {'wins_to_match': 0},
    {'think_time': (1.0, 0.5)},
    {'board_size': 16},
])
def test_match_config_validation(kwargs):
    with pytest.raises(ValueError):
        MatchConfig(**kwargs)


def test_explicit_config_reaches_ai_players():
    ai = AIPlayer('Marie(AI)', Side.O, think_time=(0.5, 1.5))
    human = HumanPlayer('You', Side.X)
    Match(human, ai, starting_player=human,
          config=MatchConfig(search_depth=3, think_time=(0.0, 0.0)))
    assert ai.engine.depth == 3
    assert ai.think_time == (0.0, 0.0)


def test_ai_players_keep_their_settings_without_config():
    ai = AIPlayer('Marie(AI)', Side.O, depth=2, think_time=(0.0, 0.1))
    human = HumanPlayer('You', Side.X)
    Match(human, ai, starting_player=human)
    assert ai.engine.depth == 2
    assert ai.think_time == (0.0, 0.1)
