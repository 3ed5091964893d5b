"""
Pong - Configuration loader.

Loads settings from a .env file next to this module, with sensible
defaults. Speeds and accelerations are per-frame values tuned for a
60 FPS loop; timers are in milliseconds.
"""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)

# Rules
WINNING_SCORE = _get_int('WINNING_SCORE', 11)
SCORE_PAUSE_MS = _get_float('SCORE_PAUSE_MS', 1000.0)
FLASH_DECAY_MS = _get_float('FLASH_DECAY_MS', 500.0)  # full flash fades in this long

# Paddle (per-frame units)
PADDLE_WIDTH = _get_float('PADDLE_WIDTH', 15.0)
PADDLE_HEIGHT = _get_float('PADDLE_HEIGHT', 100.0)
PADDLE_OFFSET = _get_float('PADDLE_OFFSET', 30.0)  # gap between paddle and side edge
PADDLE_ACCELERATION = _get_float('PADDLE_ACCELERATION', 0.8)
PADDLE_MAX_SPEED = _get_float('PADDLE_MAX_SPEED', 8.0)
PADDLE_FRICTION = _get_float('PADDLE_FRICTION', 0.85)

# Ball (per-frame units)
BALL_RADIUS = _get_float('BALL_RADIUS', 10.0)
BALL_BASE_SPEED = _get_float('BALL_BASE_SPEED', 6.0)
BALL_MAX_SPEED = _get_float('BALL_MAX_SPEED', 15.0)
BALL_SPEED_INCREMENT = _get_float('BALL_SPEED_INCREMENT', 0.5)
BALL_MAX_BOUNCE_ANGLE = _get_float('BALL_MAX_BOUNCE_ANGLE', 60.0)  # degrees
BALL_SPIN_FACTOR = _get_float('BALL_SPIN_FACTOR', 0.3)  # share of paddle velocity

# Audio
SOUND_ENABLED = _get_bool('SOUND_ENABLED', True)
MASTER_VOLUME = _get_float('MASTER_VOLUME', 1.0)

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
FOREGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)
NET_COLOR: Tuple[int, int, int] = (51, 51, 51)
LABEL_COLOR: Tuple[int, int, int] = (102, 102, 102)
HINT_COLOR: Tuple[int, int, int] = (68, 68, 68)
DEBUG_COLOR: Tuple[int, int, int] = (0, 255, 0)
FINAL_SCORE_COLOR: Tuple[int, int, int] = (170, 170, 170)
WIN_BURST_COLOR: Tuple[int, int, int] = (255, 215, 0)
