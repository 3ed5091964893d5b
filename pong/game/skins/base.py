"""Base class for Pong skins.

Skins handle ALL rendering - the match only manages state. A skin reads a
MatchSnapshot (plus particles and frame statistics) and draws it; it never
touches the live match.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import pygame

from pong.game_state import MatchState

if TYPE_CHECKING:
    from pong.game.effects import Particle
    from pong.models import BallSnapshot, MatchSnapshot, PaddleSnapshot, ScoreSnapshot


@dataclass(frozen=True)
class HudInfo:
    """Frame statistics shown by the debug overlay.

    Attributes:
        fps: Frames counted during the last full second
        delta_ms: Length of the last frame
        particle_count: Live particles
        sound_enabled: Whether the sound board is on
    """
    fps: int = 0
    delta_ms: float = 0.0
    particle_count: int = 0
    sound_enabled: bool = True


class PongSkin(ABC):
    """Base class for game skins.

    Subclasses must draw paddles and the ball; every other layer has a
    no-op default so minimal skins stay small.
    """

    @abstractmethod
    def render_paddle(self, paddle: 'PaddleSnapshot', screen: pygame.Surface) -> None:
        """Render one paddle.

        Args:
            paddle: Paddle state
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'BallSnapshot', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball state
            screen: Pygame surface to draw on
        """
        pass

    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the frame."""
        screen.fill((0, 0, 0))

    def render_particles(self, particles: Sequence['Particle'], screen: pygame.Surface) -> None:
        """Render live particles."""
        pass

    def render_score_flash(
        self,
        score: 'ScoreSnapshot',
        intensity: float,
        screen: pygame.Surface,
    ) -> None:
        """Flash the half of the field of the player who just scored.

        Args:
            score: Score state (last_scorer picks the half)
            intensity: Flash strength 0-1
            screen: Pygame surface to draw on
        """
        pass

    def render_net(self, screen: pygame.Surface) -> None:
        """Render the center line."""
        pass

    def render_score(self, score: 'ScoreSnapshot', screen: pygame.Surface) -> None:
        """Render both scores and the winning-score hint."""
        pass

    def render_paused(self, screen: pygame.Surface) -> None:
        """Render the PAUSED panel."""
        pass

    def render_controls(self, screen: pygame.Surface) -> None:
        """Render the key help line."""
        pass

    def render_debug(
        self,
        snapshot: 'MatchSnapshot',
        hud: HudInfo,
        screen: pygame.Surface,
    ) -> None:
        """Render the debug overlay."""
        pass

    def render_game_over(self, score: 'ScoreSnapshot', screen: pygame.Surface) -> None:
        """Render the game over panel."""
        pass

    def render(
        self,
        screen: pygame.Surface,
        snapshot: 'MatchSnapshot',
        particles: Sequence['Particle'] = (),
        hud: HudInfo = HudInfo(),
    ) -> None:
        """Render one complete frame, back to front.

        Args:
            screen: Pygame surface to draw on
            snapshot: Match state for this frame
            particles: Live particles (drawn behind everything)
            hud: Frame statistics for the debug overlay
        """
        self.render_background(screen)
        self.render_particles(particles, screen)
        self.render_score_flash(snapshot.score, snapshot.flash_intensity, screen)
        self.render_net(screen)
        self.render_score(snapshot.score, screen)

        self.render_paddle(snapshot.left_paddle, screen)
        self.render_paddle(snapshot.right_paddle, screen)
        self.render_ball(snapshot.ball, screen)

        if snapshot.state is MatchState.PAUSED:
            self.render_paused(screen)
        self.render_controls(screen)

        if snapshot.show_debug:
            self.render_debug(snapshot, hud, screen)

        if snapshot.state is MatchState.GAME_OVER:
            self.render_game_over(snapshot.score, screen)
