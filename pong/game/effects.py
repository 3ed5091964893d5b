"""
Particle effects for Pong.

The ParticleSystem is a fire-and-forget sink: it reacts to MatchEvents with
bursts of short-lived particles and never feeds anything back into the
match. Particle motion follows the match convention of per-frame
displacement; lifetimes are in milliseconds.

Classes:
    Particle: One particle (mutable, updated in place)
    ParticleSystem: Owns live particles and maps events to bursts
"""

from dataclasses import dataclass
import math
import random
from typing import Iterable, List, Optional, Tuple

from pong import config
from pong.logging import get_logger
from pong.models import EventType, MatchEvent, Side

log = get_logger('effects')

Color = Tuple[int, int, int]

GRAVITY = 0.1          # Added to vy every frame
AIR_FRICTION = 0.99    # vx multiplier every frame


@dataclass
class Particle:
    """A single particle.

    Attributes:
        x, y: Center position
        vx, vy: Per-frame displacement
        life: Remaining lifetime in ms
        max_life: Initial lifetime in ms
        color: RGB color at full opacity
        size: Side of the square in pixels
    """
    x: float
    y: float
    vx: float
    vy: float
    life: float
    max_life: float
    color: Color
    size: float

    @property
    def alpha(self) -> float:
        """Opacity from 1 (fresh) to 0 (expired)."""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, self.life / self.max_life)

    @property
    def is_dead(self) -> bool:
        return self.life <= 0

    def update(self, dt: float) -> None:
        """Advance one frame and age by dt milliseconds."""
        self.x += self.vx
        self.y += self.vy
        self.life -= dt
        self.vy += GRAVITY
        self.vx *= AIR_FRICTION


class ParticleSystem:
    """Manages live particles and turns match events into bursts.

    Examples:
        >>> particles = ParticleSystem(field_width=800)
        >>> particles.burst(400, 300, count=10, color=(255, 255, 255))
        >>> len(particles)
        10
    """

    PADDLE_BURST = 8
    SCORE_BURST = 16
    WIN_BURST = 30
    MAX_PARTICLES = 500

    def __init__(
        self,
        field_width: float = config.SCREEN_WIDTH,
        rng: Optional[random.Random] = None,
    ):
        """Initialize an empty particle system.

        Args:
            field_width: Playfield width, used to place score bursts
            rng: Random source (default: fresh Random)
        """
        self.particles: List[Particle] = []
        self._field_width = field_width
        self._rng = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.particles)

    def burst(self, x: float, y: float, count: int, color: Color) -> None:
        """Spray count particles evenly around (x, y).

        Args:
            x: Burst center X
            y: Burst center Y
            count: Number of particles
            color: RGB color
        """
        for i in range(count):
            angle = (math.pi * 2 / count) * i + self._rng.random() * 0.5
            speed = 2 + self._rng.random() * 4
            life = 300 + self._rng.random() * 400
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                life=life,
                max_life=life,
                color=color,
                size=3 + self._rng.random() * 4,
            ))

        # Drop the oldest when a long rally piles particles up
        overflow = len(self.particles) - self.MAX_PARTICLES
        if overflow > 0:
            del self.particles[:overflow]

    def trail(self, x: float, y: float, color: Color) -> None:
        """Leave one slow, short-lived particle behind a moving object."""
        life = 100 + self._rng.random() * 100
        self.particles.append(Particle(
            x=x,
            y=y,
            vx=(self._rng.random() - 0.5) * 2,
            vy=(self._rng.random() - 0.5) * 2,
            life=life,
            max_life=life,
            color=color,
            size=2 + self._rng.random() * 2,
        ))

    def score_anchor(self, side: Side) -> float:
        """X above the score of one side (quarter points of the field)."""
        quarter = self._field_width / 4
        return quarter if side is Side.LEFT else quarter * 3

    def handle_events(self, events: Iterable[MatchEvent]) -> None:
        """React to match events.

        Args:
            events: Events returned by the match this frame
        """
        for event in events:
            if event.type is EventType.PADDLE_HIT and event.x is not None:
                self.burst(event.x, event.y, self.PADDLE_BURST, config.FOREGROUND_COLOR)
            elif event.type is EventType.SCORE and event.side is not None:
                self.burst(self.score_anchor(event.side), 80,
                           self.SCORE_BURST, config.FOREGROUND_COLOR)
            elif event.type is EventType.WIN and event.side is not None:
                self.burst(self.score_anchor(event.side), 80,
                           self.WIN_BURST, config.WIN_BURST_COLOR)
            elif event.type is EventType.RESET:
                self.clear()

    def update(self, dt: float) -> None:
        """Advance all particles and drop the expired ones."""
        if dt <= 0:
            return
        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if not p.is_dead]

    def clear(self) -> None:
        """Remove every particle."""
        if self.particles:
            log.debug("Clearing %d particles", len(self.particles))
        self.particles = []
