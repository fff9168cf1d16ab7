from dataclasses import dataclass, field
from config import (
    W, H, PADDLE_H, PADDLE_W, PADDLE_MARGIN, PADDLE_START_Y, BALL_START_VEL,
    SERVE_SPEED, SERVE_DY, SPEEDUP, ANGLE_FACTOR, MAX_SCORE, DIFFS,
    DEFAULT_DIFFICULTY, PLAYER, BOT,
)

class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __iter__(self): return iter((self.x, self.y))
    def __repr__(self): return f"Vec2({self.x:g}, {self.y:g})"

@dataclass(frozen=True)
class DifficultyProfile:
    bot_speed: float
    mistake_rate: float

def profile_for(difficulty) -> DifficultyProfile:
    try:
        cfg = DIFFS[difficulty]
    except KeyError:
        raise ValueError(f"unknown difficulty: {difficulty!r}") from None
    return DifficultyProfile(cfg["bot_speed"], cfg["mistake_rate"])

@dataclass
class SimulationState:
    player_y: float = PADDLE_START_Y
    bot_y: float = PADDLE_START_Y
    ball: Vec2 = field(default_factory=lambda: Vec2(W / 2, H / 2))
    vel: Vec2 = field(default_factory=lambda: Vec2(*BALL_START_VEL))
    score_player: int = 0
    score_bot: int = 0
    difficulty: str = DEFAULT_DIFFICULTY
    running: bool = False

def clamp(v, a, b):
    return max(a, min(b, v))

def clamp_paddle(y):
    return clamp(y, 0, H - PADDLE_H)

def reset_ball(state: SimulationState, rng):
    state.ball = Vec2(W / 2, H / 2)
    direction = 1 if rng.random() > 0.5 else -1
    state.vel = Vec2(direction * SERVE_SPEED, rng.uniform(-SERVE_DY, SERVE_DY))

def reset_preview(state: SimulationState):
    state.player_y = PADDLE_START_Y
    state.bot_y = PADDLE_START_Y
    state.ball = Vec2(W / 2, H / 2)

def start_match(state: SimulationState, rng):
    state.score_player = 0
    state.score_bot = 0
    state.running = True
    reset_ball(state, rng)

def check_match_end(state: SimulationState):
    """Stop the match once either side reaches MAX_SCORE; returns the winner or None."""
    if state.score_player >= MAX_SCORE:
        state.running = False
        return PLAYER
    if state.score_bot >= MAX_SCORE:
        state.running = False
        return BOT
    return None

def paddle_contact(state: SimulationState, paddle_y):
    return paddle_y < state.ball.y < paddle_y + PADDLE_H

def deflect(state: SimulationState, paddle_y):
    # the angle is set from the hit offset, it never accumulates
    state.vel.x = -state.vel.x * SPEEDUP
    state.vel.y = (state.ball.y - (paddle_y + PADDLE_H / 2)) * ANGLE_FACTOR

def _goal(state, rng, scorer, on_goal):
    if scorer == PLAYER:
        state.score_player += 1
    else:
        state.score_bot += 1
    winner = check_match_end(state)
    if on_goal is not None:
        on_goal(scorer, winner)
    reset_ball(state, rng)

def step(state: SimulationState, rng, bot_ai, on_goal=None):
    """Advance one frame.

    Moves the ball, bounces it off the top and bottom edges, lets ``bot_ai``
    steer the right paddle and resolves both paddle edges in turn (left
    first). Returns the scorers of this frame, usually an empty list.
    """
    if not state.running:
        return []

    state.ball = state.ball + state.vel

    if state.ball.y < 0 or state.ball.y > H:
        state.vel.y = -state.vel.y

    bot_ai.update(state, rng)
    state.bot_y = clamp_paddle(state.bot_y)

    goals = []

    if state.ball.x < PADDLE_W + PADDLE_MARGIN:
        if paddle_contact(state, state.player_y):
            deflect(state, state.player_y)
        elif state.ball.x < 0:
            goals.append(BOT)
            _goal(state, rng, BOT, on_goal)

    if state.ball.x > W - PADDLE_W - PADDLE_MARGIN:
        if paddle_contact(state, state.bot_y):
            deflect(state, state.bot_y)
        elif state.ball.x > W:
            goals.append(PLAYER)
            _goal(state, rng, PLAYER, on_goal)

    return goals
