"""Collision detection and response for Pong.

Handles ball-wall and ball-paddle collisions and detects when the ball
has left the field. The ball is treated as its enclosing square
(side 2 * radius) for overlap purposes.
"""

import math
from typing import Optional, TYPE_CHECKING

from pong.models import Side

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle


def check_wall_collision(ball: 'Ball', field_height: float) -> bool:
    """Check and handle ball-wall collisions.

    A ball touching or crossing the top or bottom wall is clamped to the
    wall and its vertical velocity is negated (elastic, no energy loss).

    Args:
        ball: Ball to check (mutated in place)
        field_height: Playfield height in pixels

    Returns:
        True if the ball bounced off a wall
    """
    hit = False

    # Top wall
    if ball.y - ball.radius <= 0:
        ball.set_position(ball.x, ball.radius)
        ball.bounce_vertical()
        hit = True

    # Bottom wall
    if ball.y + ball.radius >= field_height:
        ball.set_position(ball.x, field_height - ball.radius)
        ball.bounce_vertical()
        hit = True

    return hit


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball overlaps paddle.

    Strict inequalities: a ball resting flush against the paddle face
    does not collide again.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball overlaps paddle
    """
    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    paddle_left, paddle_top, paddle_right, paddle_bottom = paddle.get_bounds()

    return (
        ball_left < paddle_right and
        ball_right > paddle_left and
        ball_top < paddle_bottom and
        ball_bottom > paddle_top
    )


def paddle_hit_offset(ball_y: float, paddle: 'Paddle') -> float:
    """Where on the paddle the ball struck, from -1 (top) to 1 (bottom).

    Args:
        ball_y: Ball center Y
        paddle: Paddle that was hit

    Returns:
        Offset from the paddle center in half-heights, clamped to [-1, 1]
    """
    offset = (ball_y - paddle.center_y) / (paddle.height / 2)
    return max(-1.0, min(1.0, offset))


def bounce_angle(
    ball_y: float,
    paddle: 'Paddle',
    max_angle_degrees: float = 60.0,
) -> float:
    """Calculate the deflection angle for a paddle hit.

    offset=0 (center) -> 0 radians (straight back)
    offset=-1 (top edge) -> -max_angle (steep, upward)
    offset=+1 (bottom edge) -> +max_angle (steep, downward)

    Args:
        ball_y: Ball center Y at impact
        paddle: Paddle that was hit
        max_angle_degrees: Deflection for an edge hit

    Returns:
        Bounce angle in radians
    """
    return paddle_hit_offset(ball_y, paddle) * math.radians(max_angle_degrees)


def resolve_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> None:
    """Move the ball flush against the paddle face and bounce it.

    Placing the ball outside the paddle before bouncing prevents it from
    tunnelling through or sticking inside on the next frame.

    Args:
        ball: Ball that hit the paddle (mutated in place)
        paddle: Paddle that was hit
    """
    paddle_left, _, paddle_right, _ = paddle.get_bounds()

    if paddle.side is Side.LEFT:
        ball.set_position(paddle_right + ball.radius, ball.y)
    else:
        ball.set_position(paddle_left - ball.radius, ball.y)

    ball.bounce_off_paddle(paddle)


def check_scoring(ball: 'Ball', field_width: float) -> Optional[Side]:
    """Check whether the ball has left the field.

    Leaving through the left edge awards the right player, and vice versa.

    Args:
        ball: Ball to check
        field_width: Playfield width in pixels

    Returns:
        The scoring side, or None while the ball is in play
    """
    if ball.x - ball.radius < 0:
        return Side.RIGHT
    if ball.x + ball.radius > field_width:
        return Side.LEFT
    return None
