"""
Bearwatch - a small pygame game framework.

Provides:
- logging: module loggers and structured record sinks
- models: pydantic data models shared by games
- games: BaseGame, session states, pacing presets and input handling
"""

__version__ = "1.0.0"
