"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from bearwatch.games.input.input_event import InputEvent
from bearwatch.models import Point2D


class InputSource(ABC):
    """Abstract base class for input sources.

    Discrete events (clicks, visibility changes) are queued and polled;
    the pointer is sampled on demand and never queued.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    def pointer_position(self) -> Optional[Point2D]:
        """Sample the current pointer position. None when there is no pointer."""
        return None
