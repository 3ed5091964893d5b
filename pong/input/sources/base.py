"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

import pygame

from pong.input.controls import PaddleControls
from pong.models import Trigger


class InputSource(ABC):
    """Abstract base class for input sources.

    A source exposes two kinds of input: held directions (level-triggered,
    sampled once per frame) and lifecycle triggers (edge-triggered, one per
    press).
    """

    @abstractmethod
    def sample(self) -> PaddleControls:
        """Sample the currently held directions.

        Returns:
            PaddleControls for this frame.
        """
        pass

    def handle_event(self, event: pygame.event.Event) -> Optional[Trigger]:
        """Offer a pygame event to the source.

        Sources that do not read the pygame event queue ignore it.

        Returns:
            The trigger queued for this event, if any
        """
        return None

    @abstractmethod
    def poll_triggers(self) -> List[Trigger]:
        """Get lifecycle triggers collected since last poll.

        Returns:
            Triggers in the order they were pressed.
        """
        pass
