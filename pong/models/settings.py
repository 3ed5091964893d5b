"""
Pydantic v2 model for match settings.

MatchSettings gathers every tunable of a match in one validated, immutable
object. Defaults come from pong.config (and so from the .env file); the CLI
overrides individual fields. Invalid combinations fail at startup with a
pydantic ValidationError.
"""

from pydantic import BaseModel, Field, model_validator

from pong import config


class MatchSettings(BaseModel):
    """
    Validated configuration for one match.

    Distances are pixels, speeds and accelerations are per-frame values and
    timers are milliseconds.
    """
    model_config = {"frozen": True}

    field_width: float = Field(default=config.SCREEN_WIDTH, gt=0)
    field_height: float = Field(default=config.SCREEN_HEIGHT, gt=0)
    winning_score: int = Field(
        default=config.WINNING_SCORE,
        ge=1,
        description="Points needed to win the match",
    )
    score_pause_ms: float = Field(default=config.SCORE_PAUSE_MS, ge=0)
    flash_decay_ms: float = Field(default=config.FLASH_DECAY_MS, gt=0)

    paddle_width: float = Field(default=config.PADDLE_WIDTH, gt=0)
    paddle_height: float = Field(default=config.PADDLE_HEIGHT, gt=0)
    paddle_offset: float = Field(default=config.PADDLE_OFFSET, ge=0)
    paddle_acceleration: float = Field(default=config.PADDLE_ACCELERATION, gt=0)
    paddle_max_speed: float = Field(default=config.PADDLE_MAX_SPEED, gt=0)
    paddle_friction: float = Field(
        default=config.PADDLE_FRICTION,
        gt=0.0,
        le=1.0,
        description="Velocity multiplier applied every frame",
    )

    ball_radius: float = Field(default=config.BALL_RADIUS, gt=0)
    ball_base_speed: float = Field(default=config.BALL_BASE_SPEED, gt=0)
    ball_max_speed: float = Field(default=config.BALL_MAX_SPEED, gt=0)
    ball_speed_increment: float = Field(default=config.BALL_SPEED_INCREMENT, ge=0)
    ball_max_bounce_angle: float = Field(
        default=config.BALL_MAX_BOUNCE_ANGLE,
        gt=0.0,
        lt=90.0,
        description="Deflection in degrees for an edge hit",
    )
    ball_spin_factor: float = Field(default=config.BALL_SPIN_FACTOR, ge=0)

    @model_validator(mode='after')
    def validate_geometry(self) -> 'MatchSettings':
        """Validate that the entities fit the field and speeds are ordered."""
        if self.ball_max_speed < self.ball_base_speed:
            raise ValueError(
                f'ball_max_speed ({self.ball_max_speed}) must be >= '
                f'ball_base_speed ({self.ball_base_speed})'
            )
        if self.paddle_height >= self.field_height:
            raise ValueError('paddle_height must be smaller than field_height')
        if 2 * (self.paddle_offset + self.paddle_width) >= self.field_width:
            raise ValueError('paddles overlap: field_width too small for paddle_offset/width')
        if 2 * self.ball_radius >= self.field_height:
            raise ValueError('ball does not fit between the walls')
        return self

    @property
    def right_paddle_x(self) -> float:
        """Left edge x of the right paddle."""
        return self.field_width - self.paddle_offset - self.paddle_width
