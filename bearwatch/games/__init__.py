"""
Bearwatch Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard SessionState enum for launcher compatibility
- pacing: Named tuning presets
- input: Common input event handling
"""

from bearwatch.games.game_state import SessionState
from bearwatch.games.base_game import BaseGame
from bearwatch.games.pacing import get_pacing_preset, get_pacing_names

__all__ = [
    'SessionState',
    'BaseGame',
    'get_pacing_preset',
    'get_pacing_names',
]
