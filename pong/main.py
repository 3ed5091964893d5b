#!/usr/bin/env python3
"""Pong - Standalone Entry Point.

Two players, one keyboard.

Usage:
    pong
    pong --winning-score 5
    pong --fullscreen --no-sound
    python -m pong --debug
"""

import argparse
import random
import sys
from typing import Any, Dict, Iterable, List, Optional

import pygame
from pydantic import ValidationError

from pong import config
from pong.game.audio import SoundBoard
from pong.game.effects import ParticleSystem
from pong.game.skins import ClassicSkin, HudInfo, PongSkin
from pong.game_mode import MatchController
from pong.game_state import MatchState
from pong.input import InputSource, KeyboardInputSource
from pong.logging import LogLevel, configure_logging, get_logger
from pong.models import MatchEvent, MatchSettings, Trigger

log = get_logger('main')


class FrameStats:
    """Counts frames per wall-clock second and remembers the last delta."""

    def __init__(self):
        self.fps = 0
        self.delta_ms = 0.0
        self._frames = 0
        self._window_ms = 0.0

    def tick(self, dt: float) -> None:
        """Record one frame of dt milliseconds."""
        self.delta_ms = dt
        self._frames += 1
        self._window_ms += max(0.0, dt)
        if self._window_ms >= 1000.0:
            self.fps = self._frames
            self._frames = 0
            self._window_ms = 0.0


class PongApp:
    """Wires the match to its input source and sinks.

    One frame is: handle triggers, sample controls, advance the match, feed
    the events to sound and particles, then render the snapshot.
    """

    def __init__(
        self,
        match: MatchController,
        input_source: InputSource,
        sound: Optional[SoundBoard] = None,
        particles: Optional[ParticleSystem] = None,
        skin: Optional[PongSkin] = None,
    ):
        self.match = match
        self.input = input_source
        self.sound = sound if sound is not None else SoundBoard()
        self.particles = particles if particles is not None else ParticleSystem(
            match.settings.field_width)
        self.skin = skin if skin is not None else ClassicSkin()
        self.stats = FrameStats()
        self.running = True

    def dispatch(self, events: Iterable[MatchEvent]) -> None:
        """Hand events to every sink."""
        events = list(events)
        if not events:
            return
        if log.is_enabled_for(LogLevel.TRACE):
            log.trace("Events: %s", ', '.join(str(e) for e in events))
        self.sound.handle_events(events)
        self.particles.handle_events(events)

    def handle_triggers(self, triggers: Iterable[Trigger]) -> None:
        """Apply lifecycle triggers; sound and quit are handled here."""
        for trigger in triggers:
            if trigger is Trigger.QUIT:
                self.running = False
            elif trigger is Trigger.TOGGLE_SOUND:
                self.sound.toggle()
            else:
                self.dispatch(self.match.handle_trigger(trigger))

    def step(self, dt: float) -> List[MatchEvent]:
        """Advance the whole app by one frame (no drawing).

        Args:
            dt: Elapsed milliseconds

        Returns:
            Events the match emitted this frame
        """
        self.stats.tick(dt)
        self.handle_triggers(self.input.poll_triggers())

        events = self.match.update(dt, self.input.sample())
        self.dispatch(events)

        if self.match.state is MatchState.PLAYING:
            ball = self.match.ball
            self.particles.trail(ball.x, ball.y, config.NET_COLOR)
        self.particles.update(dt)
        return events

    def render(self, screen: pygame.Surface) -> None:
        """Draw the current frame."""
        hud = HudInfo(
            fps=self.stats.fps,
            delta_ms=self.stats.delta_ms,
            particle_count=len(self.particles),
            sound_enabled=self.sound.enabled,
        )
        self.skin.render(screen, self.match.snapshot(), self.particles.particles, hud)

    def run(self, screen: pygame.Surface, fps: int = config.FPS) -> None:
        """Main loop until the window closes or Escape is pressed."""
        clock = pygame.time.Clock()

        while self.running:
            dt = float(clock.tick(fps))

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                self.input.handle_event(event)

            self.step(dt)
            self.render(screen)
            pygame.display.flip()


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser, including the match's own ARGUMENTS."""
    parser = argparse.ArgumentParser(description="Pong - two players, one keyboard")

    # Display options
    parser.add_argument('--width', type=int, default=config.SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=config.SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=config.FPS, help='Target frame rate')

    # Feedback options
    parser.add_argument('--no-sound', action='store_true', help='Start with sound off')
    parser.add_argument('--debug', action='store_true', help='Show the debug overlay')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level (TRACE, DEBUG, INFO, WARNING, ERROR, OFF)')

    for arg_def in MatchController.ARGUMENTS:
        kwargs = {k: v for k, v in arg_def.items() if k != 'name'}
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def build_settings(args: argparse.Namespace, width: int, height: int) -> MatchSettings:
    """Create validated match settings from CLI arguments.

    Raises:
        ValidationError: If the resulting settings are inconsistent
    """
    overrides: Dict[str, Any] = {'field_width': width, 'field_height': height}
    if args.winning_score is not None:
        overrides['winning_score'] = args.winning_score
    return MatchSettings(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Run Pong standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    pygame.font.init()

    # Create display
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width, height = args.width, args.height
        screen = pygame.display.set_mode((width, height))

    pygame.display.set_caption("Pong")

    try:
        settings = build_settings(args, width, height)
    except ValidationError as e:
        log.error("Invalid settings: %s", e)
        pygame.quit()
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    match = MatchController(settings, rng=rng)
    if args.debug:
        match.toggle_debug()

    app = PongApp(
        match,
        KeyboardInputSource(),
        sound=SoundBoard(enabled=config.SOUND_ENABLED and not args.no_sound),
        particles=ParticleSystem(settings.field_width),
    )

    log.info("First to %d wins! P1: W/S, P2: Up/Down, SPACE to start",
             settings.winning_score)

    app.run(screen, fps=args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
