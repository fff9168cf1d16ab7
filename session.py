import logging
import random
from config import PADDLE_H, DEFAULT_DIFFICULTY
from core import (
    SimulationState, clamp_paddle, profile_for, reset_preview, start_match, step,
)
from ai import BotAI

logger = logging.getLogger(__name__)

MENU = "MENU"
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"


class GameSession:
    """Owns the simulation state and drives it through menu, match and game over.

    ``renderer`` is called with the state after every simulated frame and on
    ``render()``; ``on_score`` receives ``(score_player, score_bot)`` after each
    change and ``on_result`` receives ``(winner, (score_player, score_bot))``
    once per finished match. All three are optional.
    """

    def __init__(self, seed=None, difficulty=DEFAULT_DIFFICULTY, renderer=None,
                 on_score=None, on_result=None, bot_ai=None):
        profile_for(difficulty)
        self.rng = random.Random(seed)
        self.state = SimulationState(difficulty=difficulty)
        self.bot_ai = bot_ai or BotAI()
        self.renderer = renderer
        self.on_score = on_score
        self.on_result = on_result
        self.screen = MENU
        self.winner = None

    @property
    def running(self):
        return self.screen == RUNNING

    def set_difficulty(self, difficulty):
        profile_for(difficulty)
        if self.state.running:
            logger.warning("ignoring difficulty change to %s during a match", difficulty)
            return False
        self.state.difficulty = difficulty
        logger.debug("difficulty set to %s", difficulty)
        return True

    def move_player(self, pointer_y):
        self.state.player_y = clamp_paddle(pointer_y - PADDLE_H / 2)

    def start_match(self):
        start_match(self.state, self.rng)
        self.screen = RUNNING
        self.winner = None
        self._publish_score()
        logger.info("match started on %s", self.state.difficulty)

    def show_menu(self):
        self.state.running = False
        self.screen = MENU
        reset_preview(self.state)
        self.render()

    def render(self):
        if self.renderer is not None:
            self.renderer(self.state)

    def tick(self):
        if self.screen != RUNNING:
            return False
        step(self.state, self.rng, self.bot_ai, on_goal=self._goal)
        self.render()
        return self.screen == RUNNING

    def run(self, ticks):
        frames = 0
        for _ in ticks:
            if self.screen != RUNNING:
                break
            frames += 1
            if not self.tick():
                break
        return frames

    def _publish_score(self):
        if self.on_score is not None:
            self.on_score(self.state.score_player, self.state.score_bot)

    def _goal(self, scorer, winner):
        logger.debug("%s scores, %d - %d", scorer, self.state.score_player, self.state.score_bot)
        self._publish_score()
        if winner is None or self.screen != RUNNING:
            return
        self.screen = GAME_OVER
        self.winner = winner
        scores = (self.state.score_player, self.state.score_bot)
        logger.info("match over, %s wins %d - %d", winner, *scores)
        if self.on_result is not None:
            self.on_result(winner, scores)
