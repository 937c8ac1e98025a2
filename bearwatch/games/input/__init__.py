"""
Input abstraction layer for bearwatch games.

Provides unified input handling: clicks, visibility changes and reset
requests arrive as InputEvents; the pointer is sampled each frame.
"""

from bearwatch.games.input.input_event import InputEvent
from bearwatch.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
