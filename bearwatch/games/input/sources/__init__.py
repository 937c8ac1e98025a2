"""Input sources for bearwatch games."""

from bearwatch.games.input.sources.base import InputSource
from bearwatch.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
