"""
Input abstraction layer for Pong.

The match only ever sees PaddleControls (held directions) and Trigger
values (lifecycle keys); where they come from is up to the source.
"""

from pong.input.controls import PaddleControls, IDLE
from pong.input.sources import InputSource, KeyboardInputSource

__all__ = ['PaddleControls', 'IDLE', 'InputSource', 'KeyboardInputSource']
