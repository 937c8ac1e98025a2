"""
Input Event - Represents a single inbound action.

This is a shared module used by all games.
"""
from dataclasses import dataclass
from typing import Optional

from bearwatch.models import Point2D, EventType


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    All input sources convert what they observe into this common format.
    Games queue these and drain them once per frame.

    Attributes:
        event_type: CLICK, VISIBILITY or RESET
        timestamp: Time when the event occurred (seconds, monotonic clock)
        position: Playfield position of a CLICK (may lie outside the playfield)
        visible: New visibility for a VISIBILITY event
    """
    event_type: EventType
    timestamp: float
    position: Optional[Point2D] = None
    visible: Optional[bool] = None

    def __post_init__(self):
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.event_type == EventType.CLICK and self.position is None:
            raise ValueError('CLICK events need a position')
        if self.event_type == EventType.VISIBILITY and self.visible is None:
            raise ValueError('VISIBILITY events need a visible flag')

    @classmethod
    def click(cls, x: float, y: float, timestamp: float) -> 'InputEvent':
        return cls(EventType.CLICK, timestamp, position=Point2D(x=float(x), y=float(y)))

    @classmethod
    def visibility(cls, visible: bool, timestamp: float) -> 'InputEvent':
        return cls(EventType.VISIBILITY, timestamp, visible=visible)

    @classmethod
    def reset(cls, timestamp: float) -> 'InputEvent':
        return cls(EventType.RESET, timestamp)

    def __str__(self) -> str:
        if self.event_type == EventType.CLICK:
            detail = f"pos=({self.position.x:.2f}, {self.position.y:.2f})"
        elif self.event_type == EventType.VISIBILITY:
            detail = f"visible={self.visible}"
        else:
            detail = "reset"
        return f"InputEvent({detail}, t={self.timestamp:.3f}, type={self.event_type.value})"
