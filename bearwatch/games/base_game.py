"""Base class for all bearwatch games.

All games inherit from BaseGame so the registry and launchers can discover,
configure and drive them the same way.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin architecture.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from bearwatch.games.game_state import SessionState


class BaseGame(ABC):
    """Abstract base class for all bearwatch games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> SessionState
        - get_score() -> int
        - handle_input(events): Queue or process input events
        - update(dt): Advance game logic by one frame
        - render(screen): Draw the game

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"
            ARGUMENTS = [
                {'name': '--speed', 'type': float, 'default': None,
                 'help': 'Enemy speed'},
            ]

            def __init__(self, speed=None, **kwargs):
                super().__init__(**kwargs)
                self._speed = speed
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # Each entry is a dict with keys: name, type, default, help,
    # choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to every game; game-specific entries win on name clash
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible layouts'
        },
        {
            'name': '--mute',
            'action': 'store_true',
            'default': False,
            'help': 'Disable audio'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific first, then base).

        Duplicates by name are removed, keeping the game-specific definition.
        """
        seen_names = set()
        result = []
        for arg in list(cls.ARGUMENTS) + list(cls._BASE_ARGUMENTS):
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)
        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    def __init__(self, **kwargs):
        # Launchers pass every parsed flag; unknown ones are ignored here.
        pass

    @property
    def state(self) -> SessionState:
        """Current session state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> SessionState:
        """Map internal game state to the standard SessionState."""
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    def reset(self) -> None:
        """Reset game to initial state. Override for game-specific logic."""
        pass
