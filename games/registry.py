"""
Game Registry - Auto-discovery and management of bearwatch games.

Games are discovered by scanning the games/ directory for subdirectories
containing a game_mode.py with a class inheriting from BaseGame. Metadata
and CLI arguments come from the game class itself.

Usage:
    from games.registry import get_registry

    registry = get_registry()
    available = registry.list_games()  # ['fishguard']

    info = registry.get_game_info('fishguard')
    args = registry.get_game_arguments('fishguard')

    game = registry.create_game('fishguard', width=1280, height=720)
"""

import importlib
import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from bearwatch.games.base_game import BaseGame
from bearwatch.games.input import InputManager
from bearwatch.games.input.sources.mouse import MouseInputSource
from bearwatch.logging import get_logger

log = get_logger('registry')

GAMES_DIR = Path(__file__).parent


@dataclass
class GameInfo:
    """Information about a registered game."""
    name: str
    slug: str  # lowercase directory name
    description: str
    version: str
    author: str
    module_path: str  # e.g., 'games.FishGuard'

    arguments: List[Dict[str, Any]] = field(default_factory=list)

    has_config: bool = False
    config_file: Optional[str] = None


class GameRegistry:
    """
    Registry for discovering and creating bearwatch games.

    Discovery works by:
    1. Looking for game_mode.py in each game directory
    2. Importing it and finding the class that inherits from BaseGame
    3. Reading metadata from class attributes (NAME, DESCRIPTION, etc.)
    """

    def __init__(self, games_dir: Optional[Path] = None, package: str = 'games'):
        self._games_dir = games_dir or GAMES_DIR
        self._package = package
        self._games: Dict[str, GameInfo] = {}
        self._game_classes: Dict[str, Type[BaseGame]] = {}
        self._discover_games()

    def _discover_games(self) -> None:
        skip_dirs = {'tests', '__pycache__'}
        if not self._games_dir.exists():
            return
        for game_dir in sorted(self._games_dir.iterdir()):
            if not game_dir.is_dir():
                continue
            if game_dir.name.startswith(('_', '.')) or game_dir.name.lower() in skip_dirs:
                continue
            if (game_dir / 'game_mode.py').exists():
                self._register_game(game_dir)

    def _register_game(self, game_dir: Path) -> None:
        """Import a game's game_mode module and register its BaseGame class.

        Games that fail to import are skipped with a warning.
        """
        slug = game_dir.name.lower()
        module_path = f"{self._package}.{game_dir.name}"

        try:
            module = importlib.import_module(f"{module_path}.game_mode")
        except Exception as e:
            log.warning("Failed to load game from %s: %s", game_dir, e)
            return

        game_class = self._find_game_class(module)
        if game_class is None:
            log.warning("No BaseGame subclass in %s.game_mode", module_path)
            return

        has_env = (game_dir / '.env').exists()
        self._game_classes[slug] = game_class
        self._games[slug] = GameInfo(
            name=game_class.NAME,
            slug=slug,
            description=game_class.DESCRIPTION,
            version=game_class.VERSION,
            author=game_class.AUTHOR,
            module_path=module_path,
            arguments=game_class.get_arguments(),
            has_config=has_env or (game_dir / 'config.py').exists(),
            config_file='.env' if has_env else None,
        )

    @staticmethod
    def _find_game_class(module) -> Optional[Type[BaseGame]]:
        for _, obj in inspect.getmembers(module, inspect.isclass):
            # Only classes defined in the module itself
            if obj.__module__ != module.__name__:
                continue
            if issubclass(obj, BaseGame) and obj is not BaseGame:
                return obj
        return None

    def list_games(self) -> List[str]:
        """Sorted slugs of all registered games."""
        return sorted(self._games.keys())

    def get_game_info(self, slug: str) -> Optional[GameInfo]:
        return self._games.get(slug.lower())

    def get_game_arguments(self, slug: str) -> List[Dict[str, Any]]:
        """CLI argument definitions for a game, empty for unknown slugs."""
        info = self._games.get(slug.lower())
        if info is None:
            return []
        return info.arguments

    def get_game_class(self, slug: str) -> Optional[Type[BaseGame]]:
        return self._game_classes.get(slug.lower())

    def get_all_games(self) -> Dict[str, GameInfo]:
        return self._games.copy()

    def create_game(self, slug: str, width: int, height: int, **kwargs) -> BaseGame:
        """
        Create a game instance sized for the display.

        Raises:
            ValueError: If game not found
        """
        game_class = self._game_classes.get(slug.lower())
        if game_class is None:
            available = ', '.join(self.list_games())
            raise ValueError(f"Unknown game: {slug}. Available: {available}")
        return game_class(width=width, height=height, **kwargs)

    def create_input_manager(self, slug: str) -> InputManager:
        """
        Create an InputManager for standalone (mouse) play.

        Raises:
            ValueError: If game not found
        """
        if slug.lower() not in self._games:
            raise ValueError(f"Unknown game: {slug}")
        return InputManager(MouseInputSource())


_registry: Optional[GameRegistry] = None


def get_registry() -> GameRegistry:
    """Get the global game registry instance, discovering games on first use."""
    global _registry
    if _registry is None:
        _registry = GameRegistry()
    return _registry
