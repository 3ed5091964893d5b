"""Classic skin - white on black, like the arcade original."""

from typing import Dict, Optional, Sequence, Tuple, TYPE_CHECKING

import pygame

from pong import config
from pong.models import Side
from .base import HudInfo, PongSkin

if TYPE_CHECKING:
    from pong.game.effects import Particle
    from pong.models import BallSnapshot, MatchSnapshot, PaddleSnapshot, ScoreSnapshot


class ClassicSkin(PongSkin):
    """Renders the match with plain rectangles and text.

    - Paddles: White rectangles
    - Ball: White circle
    - Net: Dashed gray line
    - Score flash: Translucent white over the scorer's half
    """

    CONTROLS_TEXT = "P1: W/S | P2: Up/Down | SPACE: Pause | M: Sound | D: Debug | R: Reset"

    FLASH_MAX_ALPHA = 0.3
    NET_DASH = 10

    def __init__(self):
        """Initialize classic skin; fonts load on first use."""
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        """Get a cached default font of the given size."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _blit_text(
        self,
        screen: pygame.Surface,
        text: str,
        size: int,
        color: Tuple[int, int, int],
        center: Optional[Tuple[float, float]] = None,
        topleft: Optional[Tuple[float, float]] = None,
    ) -> None:
        surface = self._font(size).render(text, True, color)
        rect = surface.get_rect()
        if center is not None:
            rect.center = (int(center[0]), int(center[1]))
        elif topleft is not None:
            rect.topleft = (int(topleft[0]), int(topleft[1]))
        screen.blit(surface, rect)

    def _shade(self, screen: pygame.Surface, rect: Tuple[int, int, int, int], alpha: int) -> None:
        """Darken part of the screen."""
        layer = pygame.Surface((rect[2], rect[3]), pygame.SRCALPHA)
        layer.fill((0, 0, 0, alpha))
        screen.blit(layer, (rect[0], rect[1]))

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(config.BACKGROUND_COLOR)

    def render_paddle(self, paddle: 'PaddleSnapshot', screen: pygame.Surface) -> None:
        """Render paddle as a white rectangle."""
        x, y, w, h = paddle.rect
        pygame.draw.rect(screen, config.FOREGROUND_COLOR, pygame.Rect(int(x), int(y), int(w), int(h)))

    def render_ball(self, ball: 'BallSnapshot', screen: pygame.Surface) -> None:
        """Render ball as a white circle."""
        pygame.draw.circle(
            screen,
            config.FOREGROUND_COLOR,
            (int(ball.x), int(ball.y)),
            int(ball.radius),
        )

    def render_particles(self, particles: Sequence['Particle'], screen: pygame.Surface) -> None:
        """Render particles as fading squares on one alpha layer."""
        if not particles:
            return
        layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for p in particles:
            half = p.size / 2
            color = (*p.color, int(255 * p.alpha))
            pygame.draw.rect(layer, color, pygame.Rect(int(p.x - half), int(p.y - half),
                                                       max(1, int(p.size)), max(1, int(p.size))))
        screen.blit(layer, (0, 0))

    def render_score_flash(
        self,
        score: 'ScoreSnapshot',
        intensity: float,
        screen: pygame.Surface,
    ) -> None:
        if intensity <= 0 or score.last_scorer is None:
            return

        width, height = screen.get_size()
        half = width // 2
        layer = pygame.Surface((half, height), pygame.SRCALPHA)
        layer.fill((255, 255, 255, int(255 * intensity * self.FLASH_MAX_ALPHA)))
        x = 0 if score.last_scorer is Side.LEFT else half
        screen.blit(layer, (x, 0))

    def render_net(self, screen: pygame.Surface) -> None:
        """Render the net as a dashed vertical line."""
        width, height = screen.get_size()
        x = width // 2
        for y in range(0, height, self.NET_DASH * 2):
            pygame.draw.line(screen, config.NET_COLOR, (x, y), (x, min(height, y + self.NET_DASH)), 2)

    def render_score(self, score: 'ScoreSnapshot', screen: pygame.Surface) -> None:
        width = screen.get_width()
        left_x, right_x = width / 4, width / 4 * 3

        self._blit_text(screen, str(score.left), 72, config.FOREGROUND_COLOR, center=(left_x, 60))
        self._blit_text(screen, str(score.right), 72, config.FOREGROUND_COLOR, center=(right_x, 60))

        self._blit_text(screen, Side.LEFT.player_label.upper(), 20, config.LABEL_COLOR,
                        center=(left_x, 105))
        self._blit_text(screen, Side.RIGHT.player_label.upper(), 20, config.LABEL_COLOR,
                        center=(right_x, 105))

        self._blit_text(screen, f"First to {score.winning_score}", 18, config.HINT_COLOR,
                        center=(width / 2, 30))

    def render_paused(self, screen: pygame.Surface) -> None:
        width, height = screen.get_size()
        cx, cy = width / 2, height / 2
        self._shade(screen, (int(cx - 150), int(cy - 60), 300, 120), 128)

        self._blit_text(screen, "PAUSED", 44, config.FOREGROUND_COLOR, center=(cx, cy - 15))
        self._blit_text(screen, "Press SPACE to start", 20, (136, 136, 136), center=(cx, cy + 15))
        self._blit_text(screen, "M: Toggle Sound", 20, (136, 136, 136), center=(cx, cy + 35))

    def render_controls(self, screen: pygame.Surface) -> None:
        width, height = screen.get_size()
        self._blit_text(screen, self.CONTROLS_TEXT, 18, config.HINT_COLOR,
                        center=(width / 2, height - 15))

    def render_debug(
        self,
        snapshot: 'MatchSnapshot',
        hud: HudInfo,
        screen: pygame.Surface,
    ) -> None:
        """Render frame statistics and entity state in the top-left corner."""
        ball = snapshot.ball
        left, right = snapshot.left_paddle, snapshot.right_paddle
        lines = [
            f"FPS: {hud.fps}",
            f"State: {snapshot.state.value}",
            f"Delta: {hud.delta_ms:.2f}ms",
            f"P1 Y: {left.y:.0f} V: {left.velocity:.2f}",
            f"P2 Y: {right.y:.0f} V: {right.velocity:.2f}",
            f"Ball: ({ball.x:.0f}, {ball.y:.0f}) V: ({ball.vx:.2f}, {ball.vy:.2f})",
            f"Ball Speed: {ball.speed:.2f}",
            f"Particles: {hud.particle_count}",
            f"Sound: {'ON' if hud.sound_enabled else 'OFF'}",
        ]
        for i, line in enumerate(lines):
            self._blit_text(screen, line, 16, config.DEBUG_COLOR, topleft=(10, 10 + i * 15))

    def render_game_over(self, score: 'ScoreSnapshot', screen: pygame.Surface) -> None:
        width, height = screen.get_size()
        cx, cy = width / 2, height / 2
        self._shade(screen, (0, 0, width, height), 178)

        winner = score.winner.player_label if score.winner is not None else "Nobody"
        self._blit_text(screen, f"{winner} Wins!", 64, config.FOREGROUND_COLOR, center=(cx, cy - 40))
        self._blit_text(screen, score.score_string, 44, config.FINAL_SCORE_COLOR, center=(cx, cy + 10))
        self._blit_text(screen, "Press R to play again", 22, config.LABEL_COLOR, center=(cx, cy + 60))
