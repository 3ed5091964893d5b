"""
Keyboard Input Source - Two players sharing one keyboard.

Player 1 uses W/S, player 2 uses the arrow keys. Space, R, D, M and Escape
are lifecycle triggers.
"""
from typing import Callable, Dict, List, Optional, Sequence

import pygame

from pong.input.controls import PaddleControls
from pong.input.sources.base import InputSource
from pong.logging import get_logger
from pong.models import Trigger

log = get_logger('input')

DEFAULT_BINDINGS: Dict[str, int] = {
    'left_up': pygame.K_w,
    'left_down': pygame.K_s,
    'right_up': pygame.K_UP,
    'right_down': pygame.K_DOWN,
}

DEFAULT_TRIGGER_KEYS: Dict[int, Trigger] = {
    pygame.K_SPACE: Trigger.TOGGLE_PAUSE,
    pygame.K_r: Trigger.RESET,
    pygame.K_d: Trigger.TOGGLE_DEBUG,
    pygame.K_m: Trigger.TOGGLE_SOUND,
    pygame.K_ESCAPE: Trigger.QUIT,
}


class KeyboardInputSource(InputSource):
    """Keyboard input source.

    Held directions are read from the pygame key state; triggers are
    collected from KEYDOWN events fed in by the main loop, so holding a key
    produces a single trigger.
    """

    def __init__(
        self,
        bindings: Optional[Dict[str, int]] = None,
        trigger_keys: Optional[Dict[int, Trigger]] = None,
        key_state: Optional[Callable[[], Sequence[bool]]] = None,
    ):
        """Initialize the keyboard input source.

        Args:
            bindings: Direction name -> pygame key code
            trigger_keys: pygame key code -> Trigger
            key_state: Callable returning the held-key state indexed by key
                code (default: pygame.key.get_pressed)
        """
        self._bindings = dict(DEFAULT_BINDINGS)
        if bindings:
            self._bindings.update(bindings)
        self._trigger_keys = dict(trigger_keys or DEFAULT_TRIGGER_KEYS)
        self._key_state = key_state or pygame.key.get_pressed
        self._trigger_queue: List[Trigger] = []

    def sample(self) -> PaddleControls:
        """Read the held direction keys."""
        pressed = self._key_state()
        return PaddleControls(
            left_up=bool(pressed[self._bindings['left_up']]),
            left_down=bool(pressed[self._bindings['left_down']]),
            right_up=bool(pressed[self._bindings['right_up']]),
            right_down=bool(pressed[self._bindings['right_down']]),
        )

    def handle_event(self, event: pygame.event.Event) -> Optional[Trigger]:
        """Turn a pygame event into a queued trigger, if it is one.

        Args:
            event: Event from pygame.event.get()

        Returns:
            The trigger queued, or None
        """
        trigger: Optional[Trigger] = None
        if event.type == pygame.QUIT:
            trigger = Trigger.QUIT
        elif event.type == pygame.KEYDOWN:
            trigger = self._trigger_keys.get(event.key)

        if trigger is not None:
            log.debug("Trigger %s", trigger.value)
            self._trigger_queue.append(trigger)
        return trigger

    def poll_triggers(self) -> List[Trigger]:
        """Get triggers since last poll."""
        triggers = self._trigger_queue.copy()
        self._trigger_queue.clear()
        return triggers

    def clear(self) -> None:
        """Clear the trigger queue."""
        self._trigger_queue.clear()
