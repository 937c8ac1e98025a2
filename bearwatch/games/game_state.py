"""Standard session states for bearwatch games.

Launchers (dev_game.py, main.py) and the registry only look at these
values; games may track more detail internally and map it here via
`_get_internal_state`.
"""
from enum import Enum


class SessionState(Enum):
    """Standard session states.

    States:
        NOT_STARTED: Waiting for the player's start click; the start prompt
            is shown and nothing moves
        RUNNING: Active gameplay in progress

    Usage in game_mode.py:
        from bearwatch.games import SessionState

        class MyGame(BaseGame):
            def _get_internal_state(self) -> SessionState:
                return SessionState.RUNNING if self._started else SessionState.NOT_STARTED
    """
    NOT_STARTED = "not_started"
    RUNNING = "running"
