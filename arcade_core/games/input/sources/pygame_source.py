"""
Pygame Input Source - Mouse and keyboard input.

Converts pygame events into InputEvent models. Pointer positions are
mapped from window pixels to playfield units, since the playfield is
rendered at a fixed logical size and scaled to the window.
"""
import time
from typing import Callable, List, Optional

import pygame

from models import Vector2D, InputAction, Resolution
from arcade_core.games.input.input_event import InputEvent
from arcade_core.games.input.sources.base import InputSource
from arcade_core.logging import get_logger

log = get_logger('input')

_KEY_ACTIONS = {
    (pygame.KEYDOWN, pygame.K_LEFT): InputAction.LEFT_PRESSED,
    (pygame.KEYUP, pygame.K_LEFT): InputAction.LEFT_RELEASED,
    (pygame.KEYDOWN, pygame.K_RIGHT): InputAction.RIGHT_PRESSED,
    (pygame.KEYUP, pygame.K_RIGHT): InputAction.RIGHT_RELEASED,
}

FIRE_KEYS = (pygame.K_SPACE,)


class PygameInputSource(InputSource):
    """Mouse and keyboard input source.

    - Mouse motion -> POINTER_MOVE (playfield coordinates)
    - Left mouse button -> FIRE
    - Left/right arrows -> *_PRESSED / *_RELEASED
    - Space -> FIRE once per press; auto-repeat while held is ignored

    Events this source does not consume are re-posted to the pygame
    event queue for the main loop (quit, control shortcuts).
    """

    def __init__(
        self,
        playfield: Resolution,
        display: Optional[Resolution] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the input source.

        Args:
            playfield: Logical playfield size the game works in
            display: Window size; defaults to the playfield size (no scaling)
            clock: Timestamp source for events
        """
        self._playfield = playfield
        self._display = display or playfield
        self._clock = clock
        self._event_queue: List[InputEvent] = []
        self._fire_keys_down = set()

    def set_display(self, display: Resolution) -> None:
        """Update the window size after a resize."""
        self._display = display

    def to_playfield(self, pos) -> Vector2D:
        """Map a window pixel position to playfield units."""
        scale_x = self._playfield.width / self._display.width
        scale_y = self._playfield.height / self._display.height
        return Vector2D(x=pos[0] * scale_x, y=pos[1] * scale_y)

    def translate(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Convert one pygame event into an InputEvent.

        Returns:
            The InputEvent, or None if the event produces no player action
        """
        if event.type == pygame.MOUSEMOTION:
            return self._make(InputAction.POINTER_MOVE, self.to_playfield(event.pos))

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:  # Left mouse button only
                return self._make(InputAction.FIRE, self.to_playfield(event.pos))
            return None

        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            if event.key in FIRE_KEYS:
                return self._translate_fire_key(event)
            action = _KEY_ACTIONS.get((event.type, event.key))
            if action is not None:
                return self._make(action)

        return None

    def consumes(self, event: pygame.event.Event) -> bool:
        """Check whether this source owns the event (it is not re-posted)."""
        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
            return True
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            return event.key in FIRE_KEYS or (event.type, event.key) in _KEY_ACTIONS
        return False

    def _translate_fire_key(self, event: pygame.event.Event) -> Optional[InputEvent]:
        if event.type == pygame.KEYUP:
            self._fire_keys_down.discard(event.key)
            return None
        if event.key in self._fire_keys_down:
            log.trace("Ignoring repeated fire key")
            return None
        self._fire_keys_down.add(event.key)
        return self._make(InputAction.FIRE)

    def _make(self, action: InputAction, position: Optional[Vector2D] = None) -> InputEvent:
        return InputEvent(action=action, timestamp=self._clock(), position=position)

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect player actions."""
        for event in pygame.event.get():
            input_event = self.translate(event)
            if input_event is not None:
                self._event_queue.append(input_event)
            elif not self.consumes(event):
                # Re-post events the main loop handles
                pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
