"""Pong game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig, BallStep

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig', 'BallStep',
]
