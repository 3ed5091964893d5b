"""Pytest fixtures for Pong tests."""
import os

# Headless pygame for skin and audio tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import random

import pytest

from pong.game.entities import Ball, BallConfig, Paddle, PaddleConfig
from pong.game_mode import MatchController
from pong.models import MatchSettings, Side

FIELD_WIDTH = 800.0
FIELD_HEIGHT = 600.0


@pytest.fixture
def settings():
    """Default settings on an 800x600 field."""
    return MatchSettings(field_width=FIELD_WIDTH, field_height=FIELD_HEIGHT, winning_score=11)


@pytest.fixture
def paddle_config():
    return PaddleConfig(width=15.0, height=100.0, acceleration=0.8, max_speed=8.0, friction=0.85)


@pytest.fixture
def ball_config():
    return BallConfig(radius=10.0, base_speed=6.0, max_speed=15.0, speed_increment=0.5)


@pytest.fixture
def left_paddle(paddle_config):
    """Left paddle at x=30, centered (y=250)."""
    return Paddle(paddle_config, 30.0, Side.LEFT, FIELD_HEIGHT)


@pytest.fixture
def right_paddle(paddle_config):
    """Right paddle at x=755, centered (y=250)."""
    return Paddle(paddle_config, FIELD_WIDTH - 30.0 - 15.0, Side.RIGHT, FIELD_HEIGHT)


@pytest.fixture
def ball(ball_config):
    """Ball at the field center with a seeded launch."""
    return Ball(ball_config, FIELD_WIDTH, FIELD_HEIGHT, rng=random.Random(1234))


@pytest.fixture
def controller(settings):
    """Fresh, paused match with a seeded ball."""
    return MatchController(settings, rng=random.Random(42))


def send_ball_out(controller, side):
    """Send the ball out past the opponent of ``side`` in one frame.

    The ball travels at y=100, well clear of centered paddles.
    """
    ball = controller.ball
    if side is Side.LEFT:
        ball.set_position(FIELD_WIDTH - 15.0, 100.0)
        ball.set_velocity(6.0, 0.0)
    else:
        ball.set_position(15.0, 100.0)
        ball.set_velocity(-6.0, 0.0)
    return controller.update(16.0)


@pytest.fixture
def score_point():
    """Function scoring a point for a side with one frame of play."""
    return send_ball_out
