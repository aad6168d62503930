import gymnasium as gym
from gymnasium import spaces
import numpy as np

from .board import BOARD_SIZE, TOTAL_GOATS, Piece
from .display import format_board, status_message
from .game import GameController, GameState
from .moves import generate_moves

N_CELLS = BOARD_SIZE * BOARD_SIZE


def encode_placement(pos):
    return pos[0] * BOARD_SIZE + pos[1]


def encode_move(origin, destination):
    return N_CELLS + encode_placement(origin) * N_CELLS + encode_placement(destination)


def decode_action(action):
    """Returns ("place", pos) or ("move", (origin, destination))."""
    if action < N_CELLS:
        return "place", divmod(action, BOARD_SIZE)
    origin, destination = divmod(action - N_CELLS, N_CELLS)
    return "move", (divmod(origin, BOARD_SIZE), divmod(destination, BOARD_SIZE))


class BaghChalEnv(gym.Env):
    """
    One side is played by the agent, the other by the built-in AI.

    The opponent answers inside `step`, so every observation the agent sees
    is either its own turn or a finished game.
    """
    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(self, render_mode=None, agent_role="goat", max_steps=200):
        super().__init__()
        self.agent_role = Piece(agent_role)
        self.max_steps = max_steps
        self.controller = None
        self.steps = 0
        # first 25 actions place a goat, the rest are (origin, destination) pairs
        self.action_space = spaces.Discrete(N_CELLS + N_CELLS * N_CELLS)
        # 5x5x5 board representation
        # 0,1: piece positions (goats, tigers)
        # 2: goats placed
        # 3: goats captured
        # 4: turn (1 if Goat)
        self.observation_space = spaces.Box(low=0, high=TOTAL_GOATS, shape=(5, BOARD_SIZE, BOARD_SIZE), dtype=np.float64)
        self.render_mode = render_mode

    def _choose(self, candidates):
        # route the AI's random choices through the env's seeded generator
        return candidates[int(self.np_random.integers(len(candidates)))]

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)
        self.steps = 0
        self.controller = GameController(human_role=self.agent_role, chooser=self._choose)
        state = self.controller.snapshot()

        if self.render_mode == "human":
            self.render()

        return self._observation(state), self._get_info(state)

    def action_mask(self, state: GameState):
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if not state.is_human_turn:
            return mask
        board = self.controller.board
        if state.phase == "placement":
            for pos in board.positions(Piece.EMPTY):
                mask[encode_placement(pos)] = 1
        else:
            for pos in board.positions(state.turn):
                for move in generate_moves(board, pos, state.turn):
                    mask[encode_move(move.origin, move.destination)] = 1
        return mask

    def step(self, action):
        action = int(action)
        state = self.controller.snapshot()
        mask = self.action_mask(state)

        terminated = False
        truncated = False
        reward = 0

        if mask[action] == 0:
            # Illegal actions end the episode with a heavy penalty
            terminated = True
            reward = -100
        else:
            self.steps += 1
            kind, target = decode_action(action)
            if kind == "place":
                state = self.controller.submit_placement(target)
            else:
                origin, destination = target
                self.controller.submit_selection(origin)
                state = self.controller.submit_destination(destination)

            if state.game_over:
                terminated = True
                reward = 100 if state.winner is self.agent_role else -100
            elif self.steps >= self.max_steps or not self.action_mask(state).any():
                truncated = True

        observation = self._observation(state)
        info = self._get_info(state)

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, info

    def render(self):
        state = self.controller.snapshot()
        text = format_board(state) + "\n" + status_message(state)
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)

    def _observation(self, state: GameState):
        obs = np.zeros(self.observation_space.shape, dtype=np.float64)
        for r, row in enumerate(state.board):
            for c, piece in enumerate(row):
                if piece is Piece.GOAT:
                    obs[0, r, c] = 1
                elif piece is Piece.TIGER:
                    obs[1, r, c] = 1
        obs[2] = state.goats_placed
        obs[3] = state.goats_captured
        obs[4] = 1 if state.turn is Piece.GOAT else 0
        return obs

    def _get_info(self, state: GameState):
        return {
            "turn": state.turn.value,
            "action_mask": self.action_mask(state),
            "goats_placed": state.goats_placed,
            "goats_captured": state.goats_captured,
            "winner": state.winner.value if state.winner else None,
        }

    def close(self):
        pass
