from config import BOT_DEAD_ZONE, PADDLE_H
from core import DifficultyProfile, SimulationState, profile_for

class BotAI:
    """Tracks the ball with the right paddle, skipping frames at the profile's mistake rate.

    With ``profile`` left as None the profile follows ``state.difficulty`` on
    every update, so a difficulty change between matches needs no reset.
    """

    def __init__(self, profile: DifficultyProfile = None):
        self.profile = profile

    def current_profile(self, state: SimulationState):
        if self.profile is not None:
            return self.profile
        return profile_for(state.difficulty)

    def update(self, state: SimulationState, rng):
        cfg = self.current_profile(state)
        if rng.random() <= cfg.mistake_rate:
            return

        center = state.bot_y + PADDLE_H / 2
        if center < state.ball.y - BOT_DEAD_ZONE:
            state.bot_y += cfg.bot_speed
        elif center > state.ball.y + BOT_DEAD_ZONE:
            state.bot_y -= cfg.bot_speed
