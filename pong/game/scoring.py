"""
Score tracking for Pong.

ScoreManager keeps both players' points and decides when the match is won.
It is pure data: no timers, no rendering.

Examples:
    >>> scores = ScoreManager(winning_score=3)
    >>> scores.add_point(Side.LEFT)
    False
    >>> scores.score_string
    '1 - 0'
"""

from typing import Optional

from pong.logging import get_logger
from pong.models import ScoreSnapshot, Side

log = get_logger('scoring')


class ScoreManager:
    """Tracks points for both sides and the winner.

    Once a winner is recorded the scores are frozen; further add_point
    calls change nothing until reset().

    Attributes:
        winning_score: Points needed to win
    """

    def __init__(self, winning_score: int = 11):
        """Initialize score manager.

        Args:
            winning_score: Points needed to win (must be positive)

        Raises:
            ValueError: If winning_score is not positive
        """
        if winning_score < 1:
            raise ValueError(f'winning_score must be positive, got {winning_score}')
        self.winning_score = winning_score
        self._left = 0
        self._right = 0
        self._winner: Optional[Side] = None
        self._last_scorer: Optional[Side] = None

    @property
    def left(self) -> int:
        """Player 1 score."""
        return self._left

    @property
    def right(self) -> int:
        """Player 2 score."""
        return self._right

    @property
    def winner(self) -> Optional[Side]:
        return self._winner

    @property
    def last_scorer(self) -> Optional[Side]:
        """Side that scored most recently (routes the score flash)."""
        return self._last_scorer

    @property
    def is_game_over(self) -> bool:
        return self._winner is not None

    @property
    def score_string(self) -> str:
        """Score as "left - right", e.g. "11 - 0"."""
        return f"{self._left} - {self._right}"

    @property
    def winner_label(self) -> Optional[str]:
        """Winner as "Player 1"/"Player 2", or None."""
        return self._winner.player_label if self._winner is not None else None

    def get_score(self, side: Side) -> int:
        """Get the score of one side."""
        return self._left if side is Side.LEFT else self._right

    def add_point(self, side: Side) -> bool:
        """Award a point.

        Args:
            side: Side that scored

        Returns:
            True if the match is over (this point reached the winning
            score, or a winner was already recorded)
        """
        if self._winner is not None:
            log.warning("Point for %s ignored: match already won by %s",
                        side.value, self._winner.value)
            return True

        self._last_scorer = side
        if side is Side.LEFT:
            self._left += 1
        else:
            self._right += 1

        log.debug("Point %s -> %s", side.value, self.score_string)

        if self.get_score(side) >= self.winning_score:
            self._winner = side
            log.info("%s wins %s", side.player_label, self.score_string)
            return True

        return False

    def reset(self) -> None:
        """Zero both scores and clear winner and last scorer."""
        self._left = 0
        self._right = 0
        self._winner = None
        self._last_scorer = None

    def snapshot(self) -> ScoreSnapshot:
        """Get immutable score state for rendering."""
        return ScoreSnapshot(
            left=self._left,
            right=self._right,
            winning_score=self.winning_score,
            winner=self._winner,
            last_scorer=self._last_scorer,
        )
