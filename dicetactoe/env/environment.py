from typing import Optional
import numpy as np
import gymnasium as gym

from ..config import BOARD_SIZE, DEFAULT_SEARCH_DEPTH
from ..models.enums import Side
from ..game.board import Board
from ..ai.engine import AIEngine
from ..ai.search.tie_break import RandomChooser
from ..ai.evaluation.win_detector import WinDetector


class TicTacToeEnv(gym.Env):
    """
    Single-agent environment: the agent plays ``agent_side`` against the
    minimax AI. Observations are the raw int8 cells (1 = X, -1 = O, 0 = empty).
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, agent_side: Side = Side.X, agent_starts: bool = True,
                 depth: int = DEFAULT_SEARCH_DEPTH, render_mode: Optional[str] = None):
        super().__init__()
        self.agent_side = agent_side
        self.ai_side = agent_side.opponent
        self.agent_starts = agent_starts
        self.render_mode = render_mode

        self.action_space = gym.spaces.Discrete(BOARD_SIZE)
        self.observation_space = gym.spaces.Box(low=-1, high=1, shape=(BOARD_SIZE,), dtype=np.int8)
        self.board = Board()
        self.chooser = RandomChooser()
        self.engine = AIEngine(depth=depth, chooser=self.chooser, enable_logging=False)
        self.win_detector = WinDetector()
        self.reward_win = 100
        self.reward_draw = 0
        self.reward_lose = -100

    def action_mask(self) -> list[np.int8]:
        mask = [np.int8(entry == 0) for entry in self.board.cells]
        return mask

    def reset(self, seed=None, options=None):
        super().reset(seed=seed, options=options)
        self.board.clear()
        if seed is not None:
            self.chooser.rng.seed(seed)
        if not self.agent_starts:
            self._ai_move()
        info = {}
        info["action_mask"] = self.action_mask()
        return self._get_obs(), info

    def _get_obs(self):
        return self.board.cells.copy()

    def _is_valid_action(self, action):
        return 0 <= action < BOARD_SIZE and self.board.is_empty(int(action))

    def _ai_move(self):
        decision = self.engine.select_move(self.board, self.ai_side)
        self.board.place(decision.move.position, self.ai_side)

    def _outcome(self):
        if self.win_detector.has_won(self.board, self.agent_side):
            return self.reward_win, True
        if self.win_detector.has_won(self.board, self.ai_side):
            return self.reward_lose, True
        if not self.board.has_available_move():
            return self.reward_draw, True
        return 0, False

    def step(self, action):
        if not self._is_valid_action(action):
            raise ValueError(f"Invalid action: {action}")

        self.board.place(int(action), self.agent_side)
        reward, done = self._outcome()
        if not done:
            self._ai_move()
            reward, done = self._outcome()

        info = {}
        info["action_mask"] = self.action_mask()
        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, done, False, info

    def render(self):
        print(self.board)
        print()
