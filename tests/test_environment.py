import numpy as np
import pytest

from dicetactoe.env.environment import TicTacToeEnv
from dicetactoe.game.board import Board
from dicetactoe.models.enums import Side


def test_reset_returns_empty_board():
    env = TicTacToeEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (9,)
    assert obs.dtype == np.int8
    assert not obs.any()
    assert info['action_mask'] == [1] * 9
    assert env.observation_space.contains(obs)


def test_ai_moves_first_when_agent_does_not_start():
    env = TicTacToeEnv(agent_side=Side.O, agent_starts=False)
    obs, info = env.reset(seed=1)
    assert list(obs).count(Side.X.value) == 1
    assert sum(info['action_mask']) == 8


def test_step_answers_with_ai_move():
    env = TicTacToeEnv()
    env.reset(seed=3)
    obs, reward, done, truncated, info = env.step(4)
    assert obs[4] == Side.X.value
    assert list(obs).count(Side.O.value) == 1
    assert (reward, done, truncated) == (0, False, False)
    assert sum(info['action_mask']) == 7


def test_step_on_occupied_cell_raises():
    env = TicTacToeEnv()
    env.reset()
    env.step(0)
    with pytest.raises(ValueError):
        env.step(0)


def test_winning_step_rewards_agent():
    env = TicTacToeEnv()
    env.reset()
    env.board = Board.from_string('XX__O___O')
    _, reward, done, _, _ = env.step(2)
    assert reward == env.reward_win
    assert done


def test_filling_the_board_is_a_draw():
    env = TicTacToeEnv()
    env.reset()
    env.board = Board.from_string('XOXXOOOX_')
    obs, reward, done, _, _ = env.step(8)
    assert reward == env.reward_draw
    assert done
    assert not (obs == 0).any()
