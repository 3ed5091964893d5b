"""Pong - Two-player match controller.

The MatchController owns both paddles, the ball and the score, drives the
match state machine, and turns each frame into a list of MatchEvents. It
never renders or plays sounds itself: sinks read snapshot() and the
returned events.

Features:
- Acceleration/friction paddles, controllable during score pauses
- Ball speeds up on every paddle hit, angle depends on hit position
- Timed score pause with a decaying flash, first to N wins
"""

import random
from typing import Any, Dict, List, Optional

from pong.game.entities.ball import Ball, BallConfig
from pong.game.entities.paddle import Paddle, PaddleConfig
from pong.game.scoring import ScoreManager
from pong.game_state import MatchState
from pong.input.controls import IDLE, PaddleControls
from pong.logging import get_logger
from pong.models import (
    BallSnapshot,
    EventType,
    MatchEvent,
    MatchSettings,
    MatchSnapshot,
    PaddleSnapshot,
    Side,
    Trigger,
)

log = get_logger('game_mode')


class MatchController:
    """Frame update and state machine for one Pong match.

    States: PAUSED -> PLAYING <-> SCORE_PAUSE, PLAYING -> GAME_OVER.
    See pong.game_state for the full transition table.
    """

    # CLI arguments
    ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--winning-score',
            'type': int,
            'default': None,
            'help': 'Points needed to win (default from WINNING_SCORE)'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for ball launch directions'
        },
    ]

    def __init__(
        self,
        settings: Optional[MatchSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize a match in the PAUSED state.

        Args:
            settings: Match settings (default: MatchSettings() from config)
            rng: Random source for ball launches
        """
        self._settings = settings if settings is not None else MatchSettings()
        s = self._settings

        paddle_config = PaddleConfig(
            width=s.paddle_width,
            height=s.paddle_height,
            acceleration=s.paddle_acceleration,
            max_speed=s.paddle_max_speed,
            friction=s.paddle_friction,
        )
        self._left_paddle = Paddle(paddle_config, s.paddle_offset, Side.LEFT, s.field_height)
        self._right_paddle = Paddle(paddle_config, s.right_paddle_x, Side.RIGHT, s.field_height)

        ball_config = BallConfig(
            radius=s.ball_radius,
            base_speed=s.ball_base_speed,
            max_speed=s.ball_max_speed,
            speed_increment=s.ball_speed_increment,
            max_bounce_angle=s.ball_max_bounce_angle,
            spin_factor=s.ball_spin_factor,
        )
        self._ball = Ball(ball_config, s.field_width, s.field_height, rng=rng)
        self._scores = ScoreManager(s.winning_score)

        self._state = MatchState.PAUSED
        self._countdown_ms = 0.0
        self._flash_intensity = 0.0
        self._show_debug = False
        self._session_started = False

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def settings(self) -> MatchSettings:
        return self._settings

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def left_paddle(self) -> Paddle:
        return self._left_paddle

    @property
    def right_paddle(self) -> Paddle:
        return self._right_paddle

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def scores(self) -> ScoreManager:
        return self._scores

    @property
    def countdown_ms(self) -> float:
        """Remaining score-pause time (0 outside SCORE_PAUSE)."""
        return self._countdown_ms

    @property
    def flash_intensity(self) -> float:
        """Score flash strength, 1.0 right after a point, fading to 0."""
        return self._flash_intensity

    @property
    def show_debug(self) -> bool:
        return self._show_debug

    def get_score(self, side: Side) -> int:
        """Get current score of one side."""
        return self._scores.get_score(side)

    # =========================================================================
    # Lifecycle triggers
    # =========================================================================

    def start(self) -> List[MatchEvent]:
        """Start or resume play. Only valid from PAUSED.

        Returns:
            SESSION_START (first start only) and START, or nothing if the
            match was not paused
        """
        if self._state is not MatchState.PAUSED:
            return []

        events: List[MatchEvent] = []
        if not self._session_started:
            self._session_started = True
            events.append(MatchEvent(type=EventType.SESSION_START))

        self._transition(MatchState.PLAYING)
        events.append(MatchEvent(type=EventType.START))
        return events

    def pause(self) -> List[MatchEvent]:
        """Pause play. Only valid from PLAYING; a no-op elsewhere."""
        if self._state is MatchState.PLAYING:
            self._transition(MatchState.PAUSED)
        return []

    def toggle_pause(self) -> List[MatchEvent]:
        """Single pause key: start when paused, pause when playing."""
        if self._state is MatchState.PAUSED:
            return self.start()
        return self.pause()

    def reset(self) -> List[MatchEvent]:
        """Reinitialize paddles, ball and score and return to PAUSED.

        Accepted from every state.
        """
        self._left_paddle.reset()
        self._right_paddle.reset()
        self._ball.reset()
        self._scores.reset()
        self._countdown_ms = 0.0
        self._flash_intensity = 0.0
        self._transition(MatchState.PAUSED)
        return [MatchEvent(type=EventType.RESET)]

    def toggle_debug(self) -> bool:
        """Flip the debug overlay flag.

        Returns:
            New flag value
        """
        self._show_debug = not self._show_debug
        log.debug("Debug overlay %s", "on" if self._show_debug else "off")
        return self._show_debug

    def handle_trigger(self, trigger: Trigger) -> List[MatchEvent]:
        """Dispatch a lifecycle trigger.

        Triggers the match does not own (sound, quit) are ignored.

        Args:
            trigger: Edge-triggered input

        Returns:
            Events emitted by the trigger
        """
        if trigger is Trigger.TOGGLE_PAUSE:
            return self.toggle_pause()
        if trigger is Trigger.RESET:
            return self.reset()
        if trigger is Trigger.TOGGLE_DEBUG:
            self.toggle_debug()
        return []

    # =========================================================================
    # Frame update
    # =========================================================================

    def update(self, dt: float, controls: PaddleControls = IDLE) -> List[MatchEvent]:
        """Advance the match by one frame.

        A frame of zero (or negative, clamped to zero) length advances
        nothing: no motion, no timers, no transitions.

        Args:
            dt: Elapsed time in milliseconds since the previous frame
            controls: Held directions sampled for this frame

        Returns:
            Events emitted this frame, in order
        """
        dt = max(0.0, dt)
        if dt == 0.0:
            return []

        if self._state is MatchState.SCORE_PAUSE:
            self._update_score_pause(dt, controls)
            return []

        if self._state is not MatchState.PLAYING:
            return []

        self._update_paddles(dt, controls)

        step = self._ball.update(dt, self._left_paddle, self._right_paddle)
        events: List[MatchEvent] = []

        if step.wall_hit:
            events.append(MatchEvent(type=EventType.WALL_HIT, x=self._ball.x, y=self._ball.y))
        if step.paddle_hit is not None:
            log.trace("Paddle hit %s speed=%.2f |v|=%.2f", step.paddle_hit.value,
                      self._ball.speed, self._ball.velocity_magnitude)
            events.append(MatchEvent(
                type=EventType.PADDLE_HIT,
                side=step.paddle_hit,
                x=self._ball.x,
                y=self._ball.y,
            ))

        if step.scorer is not None:
            events.extend(self._handle_score(step.scorer))
            return events

        self._flash_intensity = max(
            0.0, self._flash_intensity - dt / self._settings.flash_decay_ms
        )
        return events

    def _update_paddles(self, dt: float, controls: PaddleControls) -> None:
        """Apply held directions, then move both paddles."""
        for paddle in (self._left_paddle, self._right_paddle):
            if controls.up(paddle.side):
                paddle.move_up()
            if controls.down(paddle.side):
                paddle.move_down()
            paddle.update(dt)

    def _update_score_pause(self, dt: float, controls: PaddleControls) -> None:
        """Count down the score pause; paddles stay live, ball stays put."""
        self._countdown_ms -= dt
        pause_ms = self._settings.score_pause_ms
        if pause_ms > 0:
            self._flash_intensity = max(0.0, self._countdown_ms / pause_ms)
        else:
            self._flash_intensity = 0.0

        if self._countdown_ms <= 0:
            self._countdown_ms = 0.0
            self._transition(MatchState.PLAYING)

        self._update_paddles(dt, controls)

    def _handle_score(self, scorer: Side) -> List[MatchEvent]:
        """Award the point, relaunch the ball and pick the next state."""
        exit_x, exit_y = self._ball.x, self._ball.y
        self._scores.add_point(scorer)
        events = [MatchEvent(type=EventType.SCORE, side=scorer, x=exit_x, y=exit_y)]

        if self._scores.is_game_over:
            log.info("Game over: %s wins %s", self._scores.winner_label, self._scores.score_string)
            self._countdown_ms = 0.0
            self._transition(MatchState.GAME_OVER)
            events.append(MatchEvent(type=EventType.WIN, side=scorer))
        else:
            self._countdown_ms = self._settings.score_pause_ms
            self._flash_intensity = 1.0
            self._transition(MatchState.SCORE_PAUSE)

        self._ball.reset()
        return events

    def _transition(self, new_state: MatchState) -> None:
        """Change state, logging the transition."""
        if new_state is self._state:
            return
        log.info("%s -> %s (%s)", self._state.value, new_state.value,
                 self._scores.score_string)
        self._state = new_state

    # =========================================================================
    # Render snapshot
    # =========================================================================

    def snapshot(self) -> MatchSnapshot:
        """Get an immutable view of the match for the render sink."""
        return MatchSnapshot(
            state=self._state,
            field_width=self._settings.field_width,
            field_height=self._settings.field_height,
            left_paddle=_paddle_snapshot(self._left_paddle),
            right_paddle=_paddle_snapshot(self._right_paddle),
            ball=BallSnapshot(
                x=self._ball.x,
                y=self._ball.y,
                vx=self._ball.vx,
                vy=self._ball.vy,
                radius=self._ball.radius,
                speed=self._ball.speed,
                last_hit_by=self._ball.last_hit_by,
            ),
            score=self._scores.snapshot(),
            flash_intensity=self._flash_intensity,
            countdown_ms=self._countdown_ms,
            show_debug=self._show_debug,
        )


def _paddle_snapshot(paddle: Paddle) -> PaddleSnapshot:
    return PaddleSnapshot(
        side=paddle.side,
        x=paddle.x,
        y=paddle.y,
        width=paddle.width,
        height=paddle.height,
        velocity=paddle.velocity,
    )
