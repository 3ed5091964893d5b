"""
Paddle Controls - The four held-direction flags sampled each frame.

Uses dataclass for immutability and cheap per-frame construction.
"""
from dataclasses import dataclass

from pong.models import Side


@dataclass(frozen=True)
class PaddleControls:
    """Immutable level-triggered direction state for both players.

    Sampled once at the start of each frame. Holding both directions for
    one player is allowed; the accelerations cancel out.

    Attributes:
        left_up: Player 1 holds up
        left_down: Player 1 holds down
        right_up: Player 2 holds up
        right_down: Player 2 holds down
    """
    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False

    def up(self, side: Side) -> bool:
        """Is the player on this side holding up?"""
        return self.left_up if side is Side.LEFT else self.right_up

    def down(self, side: Side) -> bool:
        """Is the player on this side holding down?"""
        return self.left_down if side is Side.LEFT else self.right_down

    def __str__(self) -> str:
        """String representation for debugging."""
        flags = ''.join(
            ch if held else '.'
            for ch, held in zip('wsUD', (self.left_up, self.left_down,
                                         self.right_up, self.right_down))
        )
        return f"PaddleControls({flags})"


# No keys held
IDLE = PaddleControls()
