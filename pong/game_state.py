"""Match states for Pong.

The MatchController reports exactly one of these states at any time.

States:
    PAUSED: Waiting for the start/resume trigger (initial state)
    PLAYING: Ball in play, paddles controllable
    SCORE_PAUSE: Short timed break after a point; paddles move, ball inert
    GAME_OVER: A player reached the winning score; terminal until reset

Transitions:
    PAUSED -> PLAYING          start()
    PLAYING -> PAUSED          pause()
    PLAYING -> SCORE_PAUSE     ball left the field, no winner yet
    PLAYING -> GAME_OVER       ball left the field, winning score reached
    SCORE_PAUSE -> PLAYING     countdown expired
    any -> PAUSED              reset()
"""
from enum import Enum


class MatchState(Enum):
    """Top-level state of a match."""
    PAUSED = "paused"
    PLAYING = "playing"
    SCORE_PAUSE = "score_pause"
    GAME_OVER = "game_over"
