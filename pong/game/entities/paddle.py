"""Paddle entity with acceleration/friction movement.

Holding a direction key accelerates the paddle; friction slows it every
frame, so the paddle glides to rest once the key is released. Motion is
per-frame (tuned for ~16.6 ms frames) and is not scaled by dt.
"""

from dataclasses import dataclass
from typing import Tuple

from pong.models import Side


@dataclass
class PaddleConfig:
    """Paddle configuration from match settings or defaults."""

    width: float = 15.0
    height: float = 100.0
    acceleration: float = 0.8   # Velocity change per frame while a key is held
    max_speed: float = 8.0      # Pixels per frame
    friction: float = 0.85      # Velocity multiplier per frame


class Paddle:
    """Vertical paddle on one side of the field.

    Position (x, y) is the top-left corner. x never changes; y stays within
    [0, field_height - height].
    """

    def __init__(
        self,
        config: PaddleConfig,
        x: float,
        side: Side,
        field_height: float,
    ):
        """Initialize paddle, vertically centered and at rest.

        Args:
            config: Paddle configuration
            x: Left edge X position
            side: Which player owns this paddle
            field_height: Playfield height in pixels
        """
        self._config = config
        self._x = x
        self._side = side
        self._field_height = field_height
        self._min_y = 0.0
        self._max_y = field_height - config.height
        self._y = 0.0
        self._velocity = 0.0
        self.reset()

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top edge Y."""
        return self._y

    @property
    def velocity(self) -> float:
        """Get signed vertical velocity (negative = up)."""
        return self._velocity

    @property
    def side(self) -> Side:
        return self._side

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    @property
    def center_y(self) -> float:
        """Get the vertical center of the paddle."""
        return self._y + self._config.height / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._config.width, self._config.height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding box (left, top, right, bottom)."""
        return (
            self._x,
            self._y,
            self._x + self._config.width,
            self._y + self._config.height,
        )

    def move_up(self) -> None:
        """Accelerate upward, capped at max speed."""
        self._velocity = max(
            self._velocity - self._config.acceleration,
            -self._config.max_speed,
        )

    def move_down(self) -> None:
        """Accelerate downward, capped at max speed."""
        self._velocity = min(
            self._velocity + self._config.acceleration,
            self._config.max_speed,
        )

    def update(self, dt: float) -> None:
        """Advance one frame: move, apply friction, clamp to the field.

        Args:
            dt: Elapsed time in milliseconds (unused, motion is per-frame)
        """
        self._y += self._velocity
        self._velocity *= self._config.friction

        # A wall stops the paddle dead
        if self._y < self._min_y:
            self._y = self._min_y
            self._velocity = 0.0
        elif self._y > self._max_y:
            self._y = self._max_y
            self._velocity = 0.0

    def reset(self) -> None:
        """Recenter vertically and stop."""
        self._y = (self._field_height - self._config.height) / 2
        self._velocity = 0.0

    def __repr__(self) -> str:
        return f"Paddle({self._side.value}, y={self._y:.1f}, v={self._velocity:.2f})"
