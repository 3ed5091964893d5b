"""
Render snapshot models.

A MatchSnapshot is the complete, immutable view of a match that the render
sink receives once per frame. Nothing in it refers back to the live
entities, so a skin can hold on to it without seeing later mutations.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from pong.game_state import MatchState
from .enums import Side


class PaddleSnapshot(BaseModel):
    """Paddle state for rendering (x/y are the top-left corner)."""
    side: Side
    x: float
    y: float
    width: float
    height: float
    velocity: float

    model_config = ConfigDict(frozen=True)

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)


class BallSnapshot(BaseModel):
    """Ball state for rendering (x/y are the center)."""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    speed: float
    last_hit_by: Optional[Side] = None

    model_config = ConfigDict(frozen=True)


class ScoreSnapshot(BaseModel):
    """Score state for rendering."""
    left: int = Field(default=0, ge=0)
    right: int = Field(default=0, ge=0)
    winning_score: int = Field(ge=1)
    winner: Optional[Side] = None
    last_scorer: Optional[Side] = None

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def score_string(self) -> str:
        """Score as "left - right"."""
        return f"{self.left} - {self.right}"


class MatchSnapshot(BaseModel):
    """Everything the render sink needs for one frame.

    Examples:
        >>> snapshot = controller.snapshot()
        >>> snapshot.state
        <MatchState.PAUSED: 'paused'>
        >>> snapshot.score.score_string
        '0 - 0'
    """
    state: MatchState
    field_width: float
    field_height: float
    left_paddle: PaddleSnapshot
    right_paddle: PaddleSnapshot
    ball: BallSnapshot
    score: ScoreSnapshot
    flash_intensity: float = Field(ge=0.0, le=1.0)
    countdown_ms: float = Field(default=0.0, ge=0.0)
    show_debug: bool = False

    model_config = ConfigDict(frozen=True)
