"""Ball entity with per-frame velocity physics.

The ball bounces off the top/bottom walls and both paddles. Each paddle
hit speeds it up (up to a cap) and deflects it by an angle that depends on
where it struck the paddle. Leaving the field through a side edge is a
score for the opposite player.
"""

from dataclasses import dataclass
import math
import random
from typing import Optional, Tuple, TYPE_CHECKING

from pong.models import Side
from ..physics.collision import (
    bounce_angle,
    check_paddle_collision,
    check_scoring,
    check_wall_collision,
    resolve_paddle_collision,
)

if TYPE_CHECKING:
    from .paddle import Paddle


@dataclass
class BallConfig:
    """Ball configuration from match settings or defaults."""

    radius: float = 10.0
    base_speed: float = 6.0         # Launch speed in pixels/frame
    max_speed: float = 15.0
    speed_increment: float = 0.5    # Speed gained per paddle hit
    max_bounce_angle: float = 60.0  # Degrees, for an edge hit
    spin_factor: float = 0.3        # Share of paddle velocity added to vy


@dataclass(frozen=True)
class BallStep:
    """What happened to the ball during one update.

    Attributes:
        scorer: Side awarded a point, or None while the ball is in play
        wall_hit: True if the ball bounced off the top or bottom wall
        paddle_hit: Side of the paddle the ball bounced off, if any
    """
    scorer: Optional[Side] = None
    wall_hit: bool = False
    paddle_hit: Optional[Side] = None

    @property
    def scored(self) -> bool:
        return self.scorer is not None


class Ball:
    """Ball with a scalar speed and a velocity vector.

    The scalar speed is the magnitude the velocity is rebuilt from on every
    paddle hit. The spin added after a paddle hit is not renormalised, so
    right after a hit by a moving paddle the velocity magnitude may exceed
    ``speed`` (and even ``max_speed``) slightly. Wall bounces keep it.
    """

    def __init__(
        self,
        config: BallConfig,
        field_width: float,
        field_height: float,
        rng: Optional[random.Random] = None,
    ):
        """Initialize ball at the field center with a random launch.

        Args:
            config: Ball configuration
            field_width: Playfield width in pixels
            field_height: Playfield height in pixels
            rng: Random source for launch directions (default: fresh Random)
        """
        self._config = config
        self._field_width = field_width
        self._field_height = field_height
        self._rng = rng if rng is not None else random.Random()

        self._x = 0.0
        self._y = 0.0
        self._vx = 0.0
        self._vy = 0.0
        self._speed = config.base_speed
        self._last_hit_by: Optional[Side] = None
        self.reset()

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def vx(self) -> float:
        """Get X velocity (pixels/frame)."""
        return self._vx

    @property
    def vy(self) -> float:
        """Get Y velocity (pixels/frame)."""
        return self._vy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def speed(self) -> float:
        """Get scalar speed (rebuilt into velocity on each paddle hit)."""
        return self._speed

    @property
    def base_speed(self) -> float:
        return self._config.base_speed

    @property
    def max_speed(self) -> float:
        return self._config.max_speed

    @property
    def velocity_magnitude(self) -> float:
        """Get the actual length of the velocity vector."""
        return math.hypot(self._vx, self._vy)

    @property
    def last_hit_by(self) -> Optional[Side]:
        """Side of the paddle that touched the ball last this rally."""
        return self._last_hit_by

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom).

        Returns:
            Tuple of (left, top, right, bottom)
        """
        return (
            self._x - self._config.radius,
            self._y - self._config.radius,
            self._x + self._config.radius,
            self._y + self._config.radius,
        )

    def random_launch_angle(self) -> float:
        """Pick a launch direction roughly toward one of the paddles.

        Chooses right (0) or left (pi) with equal probability and spreads
        it by up to 45 degrees either way, so rallies never start vertical.

        Returns:
            Angle in radians
        """
        side = 0.0 if self._rng.random() < 0.5 else math.pi
        spread = self._rng.uniform(-math.pi / 4, math.pi / 4)
        return side + spread

    def reset(self) -> None:
        """Recenter, restore base speed and launch in a random direction."""
        self._x = self._field_width / 2
        self._y = self._field_height / 2
        self._speed = self._config.base_speed

        angle = self.random_launch_angle()
        self._vx = math.cos(angle) * self._speed
        self._vy = math.sin(angle) * self._speed
        self._last_hit_by = None

    def set_position(self, x: float, y: float) -> None:
        """Move the ball without touching its velocity."""
        self._x = x
        self._y = y

    def set_velocity(self, vx: float, vy: float) -> None:
        """Set velocity and take its magnitude as the new scalar speed."""
        self._vx = vx
        self._vy = vy
        self._speed = math.hypot(vx, vy)

    def bounce_vertical(self) -> None:
        """Bounce off horizontal surface (reverse Y velocity)."""
        self._vy = -self._vy

    def increase_speed(self) -> None:
        """Add one speed increment, up to max speed."""
        self._speed = min(
            self._speed + self._config.speed_increment,
            self._config.max_speed,
        )

    def bounce_off_paddle(self, paddle: 'Paddle') -> None:
        """Bounce off paddle with angle based on hit position.

        Hitting the center sends the ball straight back; hitting an edge
        deflects it by up to max_bounce_angle. The paddle's own motion adds
        spin to the vertical velocity.

        Args:
            paddle: Paddle that was hit
        """
        angle = bounce_angle(self._y, paddle, self._config.max_bounce_angle)
        direction = 1.0 if paddle.side is Side.LEFT else -1.0

        self.increase_speed()
        self._vx = direction * math.cos(angle) * self._speed
        self._vy = math.sin(angle) * self._speed

        # Spin is added on top of the rebuilt velocity and not renormalised
        self._vy += paddle.velocity * self._config.spin_factor

        self._last_hit_by = paddle.side

    def update(
        self,
        dt: float,
        left_paddle: 'Paddle',
        right_paddle: 'Paddle',
    ) -> BallStep:
        """Advance one frame: move, bounce, and detect scoring.

        The ball does not reset itself after a score; that is up to the
        caller.

        Args:
            dt: Elapsed time in milliseconds (motion is per-frame)
            left_paddle: Player 1 paddle
            right_paddle: Player 2 paddle

        Returns:
            BallStep describing collisions and any score this frame
        """
        self._x += self._vx
        self._y += self._vy

        wall_hit = check_wall_collision(self, self._field_height)

        paddle_hit: Optional[Side] = None
        for paddle in (left_paddle, right_paddle):
            if check_paddle_collision(self, paddle):
                resolve_paddle_collision(self, paddle)
                paddle_hit = paddle.side

        scorer = check_scoring(self, self._field_width)

        return BallStep(scorer=scorer, wall_hit=wall_hit, paddle_hit=paddle_hit)

    def __repr__(self) -> str:
        return (f"Ball(pos=({self._x:.1f}, {self._y:.1f}), "
                f"v=({self._vx:.2f}, {self._vy:.2f}), speed={self._speed:.2f})")
