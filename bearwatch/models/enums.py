"""
Shared enumerations for input and alert feedback.
"""

from enum import Enum


class EventType(str, Enum):
    """Types of inbound events a game drains once per frame.

    Attributes:
        CLICK: A pointer press at a playfield position
        VISIBILITY: The playfield became visible or hidden
        RESET: Explicit request to reset the session
    """
    CLICK = "click"
    VISIBILITY = "visibility"
    RESET = "reset"


class AlertState(str, Enum):
    """Feedback state of a guarding NPC.

    Attributes:
        CALM: No capture in progress
        ALERT: The guardian is holding a target the avatar went for
    """
    CALM = "calm"
    ALERT = "alert"


class Cue(str, Enum):
    """Named audio cues.

    Attributes:
        AMBIENT: Looping background bed, paused during an alert
        ALERT: One-shot sting fired on capture and on guardian clicks
        TENSION: Loop that plays for as long as the alert lasts
    """
    AMBIENT = "ambient"
    ALERT = "alert"
    TENSION = "tension"
