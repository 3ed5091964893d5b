"""Pong physics and collision detection."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    paddle_hit_offset,
    bounce_angle,
    resolve_paddle_collision,
    check_scoring,
)

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'paddle_hit_offset',
    'bounce_angle',
    'resolve_paddle_collision',
    'check_scoring',
]
