"""
Input Manager - Collects input from the active source.

This is a shared module used by all games.
"""
from typing import List, Optional

from bearwatch.games.input.input_event import InputEvent
from bearwatch.games.input.sources.base import InputSource
from bearwatch.models import Point2D


class InputManager:
    """Manages an input source and collects its events.

    Lets launchers swap the source (mouse, scripted replay) at runtime
    without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        self._source = source

    def set_source(self, source: InputSource) -> None:
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()

    def get_pointer(self) -> Optional[Point2D]:
        """Current pointer position from the active source, if it has one."""
        if self._source is None:
            return None
        return self._source.pointer_position()

    def clear_events(self) -> None:
        if self._source is not None:
            self._source.poll_events()
