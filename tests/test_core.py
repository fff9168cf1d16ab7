import random

import pytest

from ai import BotAI
from config import MAX_SCORE, PLAYER, BOT
from core import (
    DifficultyProfile, SimulationState, Vec2, check_match_end, clamp_paddle,
    profile_for, reset_ball, reset_preview, start_match, step,
)


def idle_bot():
    return BotAI(DifficultyProfile(bot_speed=0, mistake_rate=1.0))


def running_state(**kw):
    state = SimulationState(running=True)
    for k, v in kw.items():
        setattr(state, k, v)
    return state


@pytest.mark.parametrize("name,speed,rate", [
    ("easy", 4, 0.20),
    ("normal", 6, 0.08),
    ("hard", 9, 0.02),
])
def test_profiles(name, speed, rate):
    assert profile_for(name) == DifficultyProfile(speed, rate)


def test_unknown_difficulty_fails_fast():
    with pytest.raises(ValueError):
        profile_for("nightmare")


def test_clamp_paddle():
    assert clamp_paddle(-20) == 0
    assert clamp_paddle(700) == 500
    assert clamp_paddle(123.5) == 123.5


def test_reset_ball_direction_and_angle(make_rng):
    state = SimulationState(ball=Vec2(12, 34))
    reset_ball(state, make_rng(0.75))
    assert tuple(state.ball) == (400, 300)
    assert tuple(state.vel) == (5, 1.5)

    reset_ball(state, make_rng(0.25))
    assert tuple(state.vel) == (-5, -1.5)

    reset_ball(state, make_rng(0.0))
    assert tuple(state.vel) == (-5, -3)


def test_reset_ball_ranges_with_seeded_rng():
    rng = random.Random(1234)
    state = SimulationState()
    signs = set()
    for _ in range(500):
        reset_ball(state, rng)
        assert tuple(state.ball) == (400, 300)
        assert abs(state.vel.x) == 5
        assert -3 <= state.vel.y < 3
        signs.add(state.vel.x > 0)
    assert signs == {True, False}


def test_start_match_zeroes_scores(make_rng):
    state = SimulationState(score_player=4, score_bot=7, ball=Vec2(5, 5))
    start_match(state, make_rng())
    assert (state.score_player, state.score_bot) == (0, 0)
    assert state.running
    assert tuple(state.ball) == (400, 300)


def test_reset_preview_keeps_scores():
    state = SimulationState(player_y=10, bot_y=490, ball=Vec2(3, 3), score_player=2)
    reset_preview(state)
    assert (state.player_y, state.bot_y) == (250, 250)
    assert tuple(state.ball) == (400, 300)
    assert state.score_player == 2


def test_step_is_noop_when_stopped(make_rng):
    state = SimulationState(ball=Vec2(100, 100), vel=Vec2(5, 5))
    assert step(state, make_rng(), BotAI()) == []
    assert tuple(state.ball) == (100, 100)


def test_free_flight(make_rng):
    state = SimulationState()
    start_match(state, make_rng())
    state.ball = Vec2(400, 300)
    state.vel = Vec2(5, 0)
    assert step(state, make_rng(), BotAI()) == []
    assert tuple(state.ball) == (405, 300)
    assert tuple(state.vel) == (5, 0)
    assert (state.score_player, state.score_bot) == (0, 0)
    assert state.bot_y == 250


def test_hard_bot_moves_full_speed(make_rng):
    state = running_state(difficulty="hard", bot_y=0, ball=Vec2(400, 300), vel=Vec2(5, 0))
    step(state, make_rng(), BotAI())
    assert state.bot_y == 9


@pytest.mark.parametrize("y,vy", [(2, -5), (598, 4)])
def test_wall_bounce_flips_vertical_speed(make_rng, y, vy):
    state = running_state(ball=Vec2(400, y), vel=Vec2(3, vy))
    step(state, make_rng(), idle_bot())
    assert state.vel.y == -vy


def test_wall_bounce_uses_raw_edge(make_rng):
    state = running_state(ball=Vec2(400, 4), vel=Vec2(3, -4))
    step(state, make_rng(), idle_bot())
    assert state.ball.y == 0
    assert state.vel.y == -4


def test_player_paddle_hit(make_rng):
    state = running_state(player_y=250, ball=Vec2(24, 310), vel=Vec2(-5, 4))
    assert step(state, make_rng(), idle_bot()) == []
    assert tuple(state.ball) == (19, 314)
    assert state.vel.x == pytest.approx(5 * 1.05)
    assert state.vel.y == pytest.approx(3.5)


def test_bot_paddle_hit(make_rng):
    state = running_state(bot_y=250, ball=Vec2(776, 280), vel=Vec2(5, 1))
    step(state, make_rng(), idle_bot())
    assert state.vel.x == pytest.approx(-5 * 1.05)
    assert state.vel.y == pytest.approx((281 - 300) * 0.25)


def test_speedup_accumulates_within_rally(make_rng):
    state = running_state(player_y=250, ball=Vec2(24, 300), vel=Vec2(-5, 0))
    step(state, make_rng(), idle_bot())
    state.ball = Vec2(776, 300)
    state.bot_y = 250
    step(state, make_rng(), idle_bot())
    assert state.vel.x == pytest.approx(-5 * 1.05 * 1.05)


def test_near_edge_without_contact_keeps_flying(make_rng):
    state = running_state(player_y=250, ball=Vec2(15, 100), vel=Vec2(-5, 0))
    assert step(state, make_rng(), idle_bot()) == []
    assert tuple(state.ball) == (10, 100)
    assert state.score_bot == 0


def test_left_miss_scores_for_bot(make_rng):
    state = running_state(player_y=250, ball=Vec2(3, 100), vel=Vec2(-5, 0))
    assert step(state, make_rng(), idle_bot()) == [BOT]
    assert (state.score_player, state.score_bot) == (0, 1)
    assert tuple(state.ball) == (400, 300)
    assert state.running


def test_right_miss_scores_for_player(make_rng):
    state = running_state(bot_y=250, ball=Vec2(798, 100), vel=Vec2(5, 0))
    assert step(state, make_rng(), idle_bot()) == [PLAYER]
    assert (state.score_player, state.score_bot) == (1, 0)
    assert tuple(state.ball) == (400, 300)


def test_paddle_edge_is_not_contact(make_rng):
    state = running_state(player_y=250, ball=Vec2(3, 250), vel=Vec2(-5, 0))
    assert step(state, make_rng(), idle_bot()) == [BOT]


def test_match_end_stops_simulation(make_rng):
    calls = []
    state = running_state(score_bot=MAX_SCORE - 1, player_y=250, ball=Vec2(3, 100), vel=Vec2(-5, 0))
    step(state, make_rng(), idle_bot(), on_goal=lambda scorer, winner: calls.append((scorer, winner, state.running)))
    assert calls == [(BOT, BOT, False)]
    assert not state.running
    assert state.score_bot == MAX_SCORE

    state.ball = Vec2(3, 100)
    state.vel = Vec2(-5, 0)
    assert step(state, make_rng(), idle_bot()) == []
    assert state.score_bot == MAX_SCORE


def test_check_match_end_is_idempotent():
    state = running_state(score_player=MAX_SCORE, score_bot=3)
    assert check_match_end(state) == PLAYER
    assert check_match_end(state) == PLAYER
    assert not state.running

    state = running_state(score_player=9, score_bot=9)
    assert check_match_end(state) is None
    assert state.running


def test_bot_paddle_stays_in_bounds():
    rng = random.Random(99)
    state = SimulationState(difficulty="hard")
    start_match(state, rng)
    bot = BotAI()
    for _ in range(5000):
        if not state.running:
            start_match(state, rng)
        step(state, rng, bot)
        assert 0 <= state.bot_y <= 500
        assert 0 <= state.player_y <= 500
