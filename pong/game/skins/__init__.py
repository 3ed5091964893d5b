"""Pong skins for rendering."""

from .base import HudInfo, PongSkin
from .classic import ClassicSkin

__all__ = [
    'HudInfo',
    'PongSkin',
    'ClassicSkin',
]
