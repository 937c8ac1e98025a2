"""
FishGuard - Configuration loader.

Loads settings from .env file with sensible defaults.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from bearwatch.models import ChaseConfig, Extent

GAME_DIR = Path(__file__).parent
ASSETS_DIR = GAME_DIR / 'assets'

load_dotenv(GAME_DIR / '.env')


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 720)
FPS = _get_int('FPS', 60)

# Chase tuning (the 'classic' preset reads these)
AVATAR_EASE = _get_float('AVATAR_EASE', 0.2)
GUARDIAN_SPEED = _get_float('GUARDIAN_SPEED', 30.0)  # pixels per tick
CHASE_RADIUS = _get_float('CHASE_RADIUS', 200.0)
CATCH_RADIUS = _get_float('CATCH_RADIUS', 80.0)
FLASH_DURATION_MS = _get_int('FLASH_DURATION_MS', 200)
TARGET_COUNT = _get_int('TARGET_COUNT', 5)

# Sprite footprints (fox, bear, fish)
AVATAR_SIZE = Extent(width=_get_float('AVATAR_WIDTH', 90), height=_get_float('AVATAR_HEIGHT', 70))
GUARDIAN_SIZE = Extent(width=_get_float('GUARDIAN_WIDTH', 225), height=_get_float('GUARDIAN_HEIGHT', 180))
TARGET_SIZE = Extent(width=_get_float('TARGET_WIDTH', 80), height=_get_float('TARGET_HEIGHT', 50))

# Audio
AUDIO_ENABLED = _get_bool('AUDIO_ENABLED', True)
AMBIENT_VOLUME = _get_float('AMBIENT_VOLUME', 0.3)
ALERT_VOLUME = _get_float('ALERT_VOLUME', 0.3)
TENSION_VOLUME = _get_float('TENSION_VOLUME', 0.4)

# Alert button
ALERT_BUTTON_LABEL = os.getenv('ALERT_BUTTON_LABEL', 'Help Fish')
ALERT_BUTTON_MARGIN = _get_float('ALERT_BUTTON_MARGIN', 20.0)
ALERT_BUTTON_HEIGHT = 40
ALERT_BUTTON_PADDING = 20
ALERT_BUTTON_FONT_SIZE = 24

# Visual
BACKGROUND_COLOR = (34, 68, 40)
WATER_COLOR = (40, 90, 120)
AVATAR_COLOR = (230, 120, 40)
GUARDIAN_COLOR = (110, 70, 40)
TARGET_COLOR = (150, 200, 230)
FLASH_COLOR = (255, 255, 255)
ALERT_BUTTON_COLOR = (255, 0, 0)
ALERT_BUTTON_TEXT_COLOR = (0, 0, 0)
START_OVERLAY_COLOR = (0, 0, 0, 150)
START_PROMPT = "Click to Start"
START_PROMPT_FONT_SIZE = 48


# Pacing presets: the two shipped variants of the game differ only here.
PACING_PRESETS = {
    'classic': ChaseConfig(
        avatar_ease=AVATAR_EASE,
        guardian_speed=GUARDIAN_SPEED,
        chase_radius=CHASE_RADIUS,
        catch_radius=CATCH_RADIUS,
        flash_duration_ms=FLASH_DURATION_MS,
        target_count=TARGET_COUNT,
        avatar_size=AVATAR_SIZE,
        guardian_size=GUARDIAN_SIZE,
        target_size=TARGET_SIZE,
        alert_button_margin=ALERT_BUTTON_MARGIN,
    ),
    'gentle': ChaseConfig(
        avatar_ease=0.2,
        guardian_speed=25.0,
        chase_radius=150.0,
        catch_radius=80.0,
        flash_duration_ms=0,    # no flash, alert cues only
        target_count=5,
        avatar_size=AVATAR_SIZE,
        guardian_size=GUARDIAN_SIZE,
        target_size=TARGET_SIZE,
        alert_button_margin=ALERT_BUTTON_MARGIN,
    ),
}
