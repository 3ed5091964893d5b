"""Tests for the particle system."""

import random

import pytest

from pong import config
from pong.game.effects import Particle, ParticleSystem
from pong.models import EventType, MatchEvent, Side


@pytest.fixture
def particles():
    return ParticleSystem(field_width=800.0, rng=random.Random(0))


class TestParticle:

    def test_update_moves_and_ages(self):
        p = Particle(x=0, y=0, vx=2, vy=1, life=100, max_life=200, color=(255, 255, 255), size=3)
        p.update(16.0)
        assert (p.x, p.y) == (2, 1)
        assert p.life == 84
        assert p.vy == pytest.approx(1.1)
        assert p.vx == pytest.approx(1.98)

    def test_alpha_and_death(self):
        p = Particle(x=0, y=0, vx=0, vy=0, life=50, max_life=100, color=(0, 0, 0), size=2)
        assert p.alpha == 0.5
        assert not p.is_dead
        p.update(60.0)
        assert p.is_dead
        assert p.alpha == 0.0


class TestParticleSystem:

    def test_burst_adds_count(self, particles):
        particles.burst(100, 100, 12, (255, 0, 0))
        assert len(particles) == 12
        assert all(300 <= p.max_life <= 700 for p in particles.particles)

    def test_particles_expire(self, particles):
        particles.burst(100, 100, 10, (255, 0, 0))
        for _ in range(50):
            particles.update(16.0)
        assert len(particles) == 0

    def test_zero_dt_does_not_age(self, particles):
        particles.burst(100, 100, 5, (255, 0, 0))
        lives = [p.life for p in particles.particles]
        particles.update(0.0)
        assert [p.life for p in particles.particles] == lives

    def test_capped(self, particles):
        for _ in range(40):
            particles.burst(100, 100, 20, (255, 0, 0))
        assert len(particles) == ParticleSystem.MAX_PARTICLES

    def test_paddle_hit_burst_at_contact(self, particles):
        particles.handle_events([
            MatchEvent(type=EventType.PADDLE_HIT, side=Side.LEFT, x=55.0, y=300.0),
        ])
        assert len(particles) == ParticleSystem.PADDLE_BURST
        assert all((p.x, p.y) == (55.0, 300.0) for p in particles.particles)

    def test_score_burst_over_scorer(self, particles):
        particles.handle_events([MatchEvent(type=EventType.SCORE, side=Side.RIGHT)])
        assert len(particles) == ParticleSystem.SCORE_BURST
        assert all(p.x == 600.0 for p in particles.particles)

    def test_win_adds_gold_burst(self, particles):
        particles.handle_events([
            MatchEvent(type=EventType.SCORE, side=Side.LEFT),
            MatchEvent(type=EventType.WIN, side=Side.LEFT),
        ])
        gold = [p for p in particles.particles if p.color == config.WIN_BURST_COLOR]
        assert len(gold) == ParticleSystem.WIN_BURST
        assert all(p.x == 200.0 for p in gold)

    def test_wall_hit_and_start_are_silent(self, particles):
        particles.handle_events([
            MatchEvent(type=EventType.WALL_HIT, x=1.0, y=10.0),
            MatchEvent(type=EventType.START),
        ])
        assert len(particles) == 0

    def test_reset_clears(self, particles):
        particles.burst(100, 100, 10, (255, 0, 0))
        particles.handle_events([MatchEvent(type=EventType.RESET)])
        assert len(particles) == 0

    def test_trail_is_short_lived(self, particles):
        particles.trail(400, 300, config.NET_COLOR)
        assert len(particles) == 1
        assert 100 <= particles.particles[0].life <= 200
