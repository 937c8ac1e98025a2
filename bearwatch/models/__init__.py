"""
Data models shared by bearwatch games.

- Primitives: Point2D (alias Vector2D), Extent, Resolution
- Enums: EventType, AlertState, Cue
- Chase: ChaseConfig

Usage:
    >>> from bearwatch.models import Point2D, ChaseConfig
"""

from .primitives import (
    Point2D,
    Vector2D,
    Extent,
    Resolution,
)
from .enums import (
    EventType,
    AlertState,
    Cue,
)
from .chase import ChaseConfig

__all__ = [
    'Point2D',
    'Vector2D',
    'Extent',
    'Resolution',
    'EventType',
    'AlertState',
    'Cue',
    'ChaseConfig',
]
