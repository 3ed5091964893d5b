"""Input sources for Pong."""

from pong.input.sources.base import InputSource
from pong.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
