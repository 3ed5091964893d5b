"""
Pong - two-player real-time Pong on pygame.

Packages:
- pong.game: Entities, physics, scoring, audio/particle sinks and skins
- pong.input: Keyboard input and the per-frame PaddleControls
- pong.models: Pydantic models (settings, events, render snapshots)

The match itself lives in pong.game_mode.MatchController.
"""

__version__ = "1.0.0"
