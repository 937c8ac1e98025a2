"""
Mouse Input Source - Mouse and window events for desktop play.
"""
import time
from typing import List, Optional

import pygame

from bearwatch.games.input.input_event import InputEvent
from bearwatch.games.input.sources.base import InputSource
from bearwatch.models import Point2D

_HIDDEN_EVENTS = (pygame.WINDOWHIDDEN, pygame.WINDOWMINIMIZED)
_SHOWN_EVENTS = (pygame.WINDOWSHOWN, pygame.WINDOWRESTORED)


class MouseInputSource(InputSource):
    """Mouse input source.

    Converts left clicks into CLICK events and window hide/minimize and
    show/restore into VISIBILITY events. Every other event is re-posted to
    the pygame queue for the main loop.
    """

    def __init__(self):
        self._event_queue: List[InputEvent] = []
        self._visible = True
        self._last_pointer: Optional[Point2D] = None

    def poll_events(self) -> List[InputEvent]:
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect clicks and visibility changes."""
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    pos_x, pos_y = event.pos
                    self._event_queue.append(
                        InputEvent.click(pos_x, pos_y, time.monotonic())
                    )
            elif event.type in _HIDDEN_EVENTS:
                self._set_visible(False)
            elif event.type in _SHOWN_EVENTS:
                self._set_visible(True)
            elif event.type != pygame.MOUSEMOTION:
                pygame.event.post(event)

    def _set_visible(self, visible: bool) -> None:
        # Hidden and minimized both arrive on minimize; report the edge once.
        if visible == self._visible:
            return
        self._visible = visible
        self._event_queue.append(InputEvent.visibility(visible, time.monotonic()))

    def pointer_position(self) -> Optional[Point2D]:
        """Pointer position relative to the window.

        Once the pointer has left the window the last sample is kept, so
        followers keep heading for where it went out. None until the
        pointer has entered the window at least once.
        """
        if pygame.mouse.get_focused():
            x, y = pygame.mouse.get_pos()
            self._last_pointer = Point2D(x=float(x), y=float(y))
        return self._last_pointer

    def clear(self) -> None:
        self._event_queue.clear()
