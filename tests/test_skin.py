"""Tests for skins, drawing onto an off-screen surface."""

import random

import pygame
import pytest

from pong.game.effects import ParticleSystem
from pong.game.skins import ClassicSkin, HudInfo, PongSkin
from pong.game_mode import MatchController
from pong.models import MatchSettings, Side

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class RecordingSkin(PongSkin):
    """Minimal skin that records which layers were drawn."""

    def __init__(self):
        self.calls = []

    def render_paddle(self, paddle, screen):
        self.calls.append(('paddle', paddle.side))

    def render_ball(self, ball, screen):
        self.calls.append(('ball',))

    def render_paused(self, screen):
        self.calls.append(('paused',))

    def render_debug(self, snapshot, hud, screen):
        self.calls.append(('debug', hud.fps))

    def render_game_over(self, score, screen):
        self.calls.append(('game_over', score.winner))


@pytest.fixture
def screen():
    return pygame.Surface((800, 600))


class TestRenderOrder:

    def test_paused_frame(self, controller, screen):
        skin = RecordingSkin()
        skin.render(screen, controller.snapshot())
        assert skin.calls == [
            ('paddle', Side.LEFT),
            ('paddle', Side.RIGHT),
            ('ball',),
            ('paused',),
        ]

    def test_debug_and_game_over_on_top(self, screen, score_point):
        controller = MatchController(MatchSettings(winning_score=1), rng=random.Random(1))
        controller.start()
        controller.toggle_debug()
        score_point(controller, Side.LEFT)

        skin = RecordingSkin()
        skin.render(screen, controller.snapshot(), hud=HudInfo(fps=60))

        assert skin.calls[-2:] == [('debug', 60), ('game_over', Side.LEFT)]
        assert ('paused',) not in skin.calls


class TestClassicSkin:

    def test_paddles_drawn_white(self, controller, screen):
        ClassicSkin().render(screen, controller.snapshot())
        assert screen.get_at((35, 300)) == WHITE
        assert screen.get_at((760, 300)) == WHITE

    def test_ball_drawn_while_playing(self, controller, screen):
        controller.start()
        controller.ball.set_position(300.0, 400.0)
        ClassicSkin().render(screen, controller.snapshot())
        assert screen.get_at((300, 400)) == WHITE

    def test_score_flash_lights_scorer_half(self, controller, screen, score_point):
        controller.start()
        score_point(controller, Side.LEFT)
        ClassicSkin().render(screen, controller.snapshot())

        lit = screen.get_at((100, 450))
        dark = screen.get_at((700, 450))
        assert lit.r > 50
        assert dark == BLACK

    def test_game_over_shades_field(self, screen, score_point):
        controller = MatchController(MatchSettings(winning_score=1), rng=random.Random(1))
        controller.start()
        score_point(controller, Side.RIGHT)
        ClassicSkin().render(screen, controller.snapshot())
        assert screen.get_at((35, 300)) != WHITE

    def test_debug_overlay_and_particles(self, controller, screen):
        controller.start()
        controller.toggle_debug()
        particles = ParticleSystem(800.0, rng=random.Random(0))
        particles.burst(200, 200, 10, (255, 0, 0))

        ClassicSkin().render(screen, controller.snapshot(), particles.particles,
                             HudInfo(fps=60, delta_ms=16.7, particle_count=len(particles)))

        # Debug text is drawn in green near the top-left corner
        greens = [screen.get_at((x, y)) for x in range(10, 120) for y in range(10, 24)]
        assert any(c.g > 200 and c.r < 50 for c in greens)
