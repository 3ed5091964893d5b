"""
Pong enumerations.

These enums name the players, the events the simulation emits and the
edge-triggered lifecycle triggers coming from the keyboard.
"""

from enum import Enum


class Side(str, Enum):
    """Which half of the field a paddle (or player) belongs to.

    Attributes:
        LEFT: Player 1, paddle on the left edge
        RIGHT: Player 2, paddle on the right edge
    """
    LEFT = "left"
    RIGHT = "right"

    @property
    def player_label(self) -> str:
        """Display label for the player on this side."""
        return "Player 1" if self is Side.LEFT else "Player 2"


class EventType(str, Enum):
    """Discrete events emitted by the match for audio/particle sinks.

    Attributes:
        SESSION_START: First start of a controller's life (once only)
        START: Play started or resumed
        WALL_HIT: Ball bounced off the top or bottom wall
        PADDLE_HIT: Ball bounced off a paddle (side = paddle side)
        SCORE: A point was awarded (side = scorer)
        WIN: A player reached the winning score (side = winner)
        RESET: The match was reset
    """
    SESSION_START = "session_start"
    START = "start"
    WALL_HIT = "wall_hit"
    PADDLE_HIT = "paddle_hit"
    SCORE = "score"
    WIN = "win"
    RESET = "reset"


class Trigger(str, Enum):
    """Edge-triggered lifecycle inputs (one per keypress)."""
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"
    TOGGLE_DEBUG = "toggle_debug"
    TOGGLE_SOUND = "toggle_sound"
    QUIT = "quit"
