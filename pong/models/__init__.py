"""
Data models for Pong.

- Enums: Side, EventType, Trigger
- Events: MatchEvent (simulation -> sinks)
- Snapshots: MatchSnapshot and its parts (simulation -> render sink)
- Settings: MatchSettings (validated match configuration)

Usage:
    >>> from pong.models import Side, MatchEvent, MatchSettings
"""

from .enums import Side, EventType, Trigger
from .events import MatchEvent
from .snapshot import PaddleSnapshot, BallSnapshot, ScoreSnapshot, MatchSnapshot
from .settings import MatchSettings

__all__ = [
    'Side', 'EventType', 'Trigger',
    'MatchEvent',
    'PaddleSnapshot', 'BallSnapshot', 'ScoreSnapshot', 'MatchSnapshot',
    'MatchSettings',
]
