"""
Tests for MatchController: state machine, frame update and events.
"""

import random

import pytest

from pong.game_mode import MatchController
from pong.game_state import MatchState
from pong.input import IDLE, PaddleControls
from pong.models import EventType, MatchSettings, Side, Trigger


def _types(events):
    return [e.type for e in events]


class TestInitialState:

    def test_starts_paused_with_zero_score(self, controller):
        assert controller.state is MatchState.PAUSED
        assert controller.get_score(Side.LEFT) == 0
        assert controller.get_score(Side.RIGHT) == 0
        assert controller.flash_intensity == 0.0
        assert controller.countdown_ms == 0.0

    def test_paused_update_does_nothing(self, controller):
        """No motion while paused."""
        x, y = controller.ball.x, controller.ball.y
        events = controller.update(16.0, PaddleControls(left_down=True))
        assert events == []
        assert (controller.ball.x, controller.ball.y) == (x, y)
        assert controller.left_paddle.velocity == 0.0

    def test_default_settings(self):
        controller = MatchController()
        assert controller.settings == MatchSettings()


class TestLifecycle:

    def test_first_start_emits_session_start(self, controller):
        """SESSION_START precedes START on the very first start only."""
        assert _types(controller.start()) == [EventType.SESSION_START, EventType.START]
        assert controller.state is MatchState.PLAYING

        controller.pause()
        assert _types(controller.start()) == [EventType.START]

    def test_session_start_not_repeated_after_reset(self, controller):
        controller.start()
        assert _types(controller.reset()) == [EventType.RESET]
        assert _types(controller.start()) == [EventType.START]

    def test_start_only_from_paused(self, controller):
        controller.start()
        assert controller.start() == []
        assert controller.state is MatchState.PLAYING

    def test_pause_only_from_playing(self, controller, score_point):
        """pause() is a no-op outside PLAYING."""
        controller.pause()
        assert controller.state is MatchState.PAUSED

        controller.start()
        score_point(controller, Side.LEFT)
        assert controller.state is MatchState.SCORE_PAUSE
        controller.pause()
        assert controller.state is MatchState.SCORE_PAUSE

    def test_toggle_pause(self, controller):
        controller.toggle_pause()
        assert controller.state is MatchState.PLAYING
        controller.toggle_pause()
        assert controller.state is MatchState.PAUSED

    def test_reset_from_playing_restores_everything(self, controller, score_point):
        controller.start()
        for _ in range(10):
            controller.update(16.0, PaddleControls(left_up=True, right_down=True))
        score_point(controller, Side.RIGHT)

        controller.reset()

        assert controller.state is MatchState.PAUSED
        assert controller.scores.score_string == "0 - 0"
        assert controller.left_paddle.y == pytest.approx(250.0)
        assert controller.right_paddle.y == pytest.approx(250.0)
        assert controller.left_paddle.velocity == 0.0
        assert (controller.ball.x, controller.ball.y) == (400.0, 300.0)
        assert controller.ball.speed == 6.0
        assert controller.flash_intensity == 0.0
        assert controller.countdown_ms == 0.0

    def test_handle_trigger(self, controller):
        """Pause/reset/debug triggers map to controller operations."""
        controller.handle_trigger(Trigger.TOGGLE_PAUSE)
        assert controller.state is MatchState.PLAYING

        assert controller.handle_trigger(Trigger.TOGGLE_DEBUG) == []
        assert controller.show_debug

        assert controller.handle_trigger(Trigger.TOGGLE_SOUND) == []
        assert controller.handle_trigger(Trigger.QUIT) == []
        assert controller.state is MatchState.PLAYING

        assert _types(controller.handle_trigger(Trigger.RESET)) == [EventType.RESET]
        assert controller.state is MatchState.PAUSED

    def test_toggle_debug_returns_flag(self, controller):
        assert controller.toggle_debug() is True
        assert controller.toggle_debug() is False


class TestFrameUpdate:

    def test_zero_dt_changes_nothing(self, controller):
        """A zero-length frame is a no-op."""
        controller.start()
        x, y = controller.ball.x, controller.ball.y
        assert controller.update(0.0, PaddleControls(left_up=True)) == []
        assert (controller.ball.x, controller.ball.y) == (x, y)
        assert controller.left_paddle.velocity == 0.0

    def test_negative_dt_treated_as_zero(self, controller):
        controller.start()
        x = controller.ball.x
        assert controller.update(-20.0) == []
        assert controller.ball.x == x

    def test_playing_moves_ball_by_velocity(self, controller):
        controller.start()
        controller.ball.set_position(400.0, 300.0)
        controller.ball.set_velocity(3.0, -2.0)
        controller.update(16.0)
        assert controller.ball.x == pytest.approx(403.0)
        assert controller.ball.y == pytest.approx(298.0)

    def test_controls_drive_paddles(self, controller):
        controller.start()
        controller.update(16.0, PaddleControls(left_up=True, right_down=True))
        assert controller.left_paddle.y < 250.0
        assert controller.right_paddle.y > 250.0

    def test_wall_hit_event(self, controller):
        controller.start()
        controller.ball.set_position(400.0, 15.0)
        controller.ball.set_velocity(3.0, -8.0)
        events = controller.update(16.0)
        assert _types(events) == [EventType.WALL_HIT]
        assert events[0].y == pytest.approx(10.0)

    def test_paddle_hit_event(self, controller):
        controller.start()
        controller.ball.set_position(740.0, 300.0)
        controller.ball.set_velocity(6.0, 0.0)
        events = controller.update(16.0)
        assert _types(events) == [EventType.PADDLE_HIT]
        assert events[0].side is Side.RIGHT
        assert controller.ball.vx < 0


class TestScoring:

    def test_point_enters_score_pause(self, controller, score_point):
        """A non-winning point starts the countdown with a full flash."""
        controller.start()
        events = score_point(controller, Side.RIGHT)

        assert _types(events) == [EventType.SCORE]
        assert events[0].side is Side.RIGHT
        assert controller.state is MatchState.SCORE_PAUSE
        assert controller.get_score(Side.RIGHT) == 1
        assert controller.countdown_ms == 1000.0
        assert controller.flash_intensity == 1.0
        assert (controller.ball.x, controller.ball.y) == (400.0, 300.0)
        assert controller.ball.speed == 6.0

    def test_countdown_and_flash_follow_each_other(self, controller, score_point):
        controller.start()
        score_point(controller, Side.LEFT)

        controller.update(250.0)
        assert controller.countdown_ms == pytest.approx(750.0)
        assert controller.flash_intensity == pytest.approx(0.75)
        assert controller.state is MatchState.SCORE_PAUSE

        controller.update(750.0)
        assert controller.state is MatchState.PLAYING
        assert controller.countdown_ms == 0.0
        assert controller.flash_intensity == 0.0

    def test_ball_frozen_but_paddles_live_during_score_pause(self, controller, score_point):
        controller.start()
        score_point(controller, Side.LEFT)
        ball_pos = (controller.ball.x, controller.ball.y)

        events = controller.update(16.0, PaddleControls(left_up=True, right_up=True))

        assert events == []
        assert (controller.ball.x, controller.ball.y) == ball_pos
        assert controller.left_paddle.y < 250.0
        assert controller.right_paddle.y < 250.0

    def test_resume_after_pause_continues_rally(self, controller, score_point):
        controller.start()
        score_point(controller, Side.LEFT)
        controller.update(1000.0)
        x = controller.ball.x
        vx = controller.ball.vx
        controller.update(16.0)
        assert controller.ball.x == pytest.approx(x + vx)

    def test_eleven_nothing(self, controller, score_point):
        """Left scores eleven straight points and wins 11 - 0."""
        controller.start()
        for point in range(1, 11):
            events = score_point(controller, Side.LEFT)
            assert _types(events) == [EventType.SCORE]
            assert controller.get_score(Side.LEFT) == point
            controller.update(1000.0)
            assert controller.state is MatchState.PLAYING

        events = score_point(controller, Side.LEFT)

        assert _types(events) == [EventType.SCORE, EventType.WIN]
        assert events[1].side is Side.LEFT
        assert controller.state is MatchState.GAME_OVER
        assert controller.scores.winner is Side.LEFT
        assert controller.scores.score_string == "11 - 0"

    def test_game_over_is_terminal_until_reset(self, score_point):
        controller = MatchController(MatchSettings(winning_score=1), rng=random.Random(3))
        controller.start()
        score_point(controller, Side.RIGHT)
        assert controller.state is MatchState.GAME_OVER
        assert controller.scores.is_game_over
        assert controller.scores.winner_label == "Player 2"

        x = controller.ball.x
        assert controller.update(16.0) == []
        assert controller.ball.x == x
        assert controller.start() == []
        assert controller.toggle_pause() == []
        assert controller.state is MatchState.GAME_OVER

        controller.reset()
        assert controller.state is MatchState.PAUSED
        assert controller.scores.winner is None

    def test_zero_score_pause_resumes_next_frame(self, score_point):
        controller = MatchController(MatchSettings(score_pause_ms=0), rng=random.Random(3))
        controller.start()
        score_point(controller, Side.LEFT)
        assert controller.state is MatchState.SCORE_PAUSE
        controller.update(16.0)
        assert controller.state is MatchState.PLAYING
        assert controller.flash_intensity == 0.0


class TestInvariants:

    def test_random_session_keeps_invariants(self, settings):
        """Paddles stay in bounds and scores only grow, over a long random session."""
        rng = random.Random(2024)
        controller = MatchController(settings, rng=random.Random(11))
        controller.start()
        previous = (0, 0)

        for _ in range(20000):
            controls = PaddleControls(
                left_up=rng.random() < 0.4,
                left_down=rng.random() < 0.4,
                right_up=rng.random() < 0.4,
                right_down=rng.random() < 0.4,
            )
            controller.update(rng.choice([8.0, 16.0, 33.0]), controls)

            for paddle in (controller.left_paddle, controller.right_paddle):
                assert 0.0 <= paddle.y <= 500.0
            assert 0.0 <= controller.flash_intensity <= 1.0

            current = (controller.scores.left, controller.scores.right)
            assert current[0] >= previous[0] and current[1] >= previous[1]
            assert max(current) <= settings.winning_score
            previous = current

            if controller.state is MatchState.GAME_OVER:
                assert controller.scores.winner is not None
                break


class TestSnapshot:

    def test_snapshot_reflects_state(self, controller, score_point):
        controller.start()
        score_point(controller, Side.RIGHT)
        snap = controller.snapshot()

        assert snap.state is MatchState.SCORE_PAUSE
        assert snap.score.score_string == "0 - 1"
        assert snap.score.last_scorer is Side.RIGHT
        assert snap.flash_intensity == 1.0
        assert snap.countdown_ms == 1000.0
        assert snap.left_paddle.side is Side.LEFT
        assert snap.right_paddle.x == 755.0
        assert snap.ball.radius == 10.0
        assert snap.field_width == 800.0

    def test_snapshot_is_detached(self, controller):
        """Later frames do not change an earlier snapshot."""
        controller.start()
        snap = controller.snapshot()
        x = snap.ball.x
        controller.update(16.0, IDLE)
        assert snap.ball.x == x
        assert controller.ball.x != x
