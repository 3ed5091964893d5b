"""
Match events.

Events are the contract between the simulation and its fire-and-forget
sinks (sound, particles). The controller returns them from each call; it
never calls a sink itself.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import EventType, Side


class MatchEvent(BaseModel):
    """A single tagged event emitted during a frame.

    Attributes:
        type: What happened
        side: Paddle side for PADDLE_HIT, scorer for SCORE, winner for WIN
        x: Field x coordinate where it happened, if meaningful
        y: Field y coordinate where it happened, if meaningful

    Examples:
        >>> event = MatchEvent(type=EventType.PADDLE_HIT, side=Side.LEFT, x=55.0, y=300.0)
        >>> event.side
        <Side.LEFT: 'left'>
    """
    type: EventType
    side: Optional[Side] = Field(default=None, description="Side involved, if any")
    x: Optional[float] = Field(default=None, description="Field x coordinate")
    y: Optional[float] = Field(default=None, description="Field y coordinate")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        side = f" {self.side.value}" if self.side is not None else ""
        return f"MatchEvent({self.type.value}{side})"
