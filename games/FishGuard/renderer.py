"""
FishGuard - Frame rendering.

Draws a FrameView onto a pygame surface. Sprite images are optional: any
image missing from the assets directory is replaced by a drawn shape of the
same footprint.
"""
from pathlib import Path
from typing import Dict, Optional

import pygame

from bearwatch.logging import get_logger
from bearwatch.models import ChaseConfig, Extent, Point2D
from games.FishGuard import config
from games.FishGuard.world import FrameView

log = get_logger('fishguard.render')

SPRITE_FILES = {
    'background': 'forest.jpg',
    'avatar': 'fox.png',
    'guardian': 'bear.png',
    'target': 'fish.png',
    'flash': 'flash.jpg',
}


class FishGuardRenderer:
    """Draws frames for one chase configuration."""

    def __init__(self, chase: ChaseConfig, assets_dir: Optional[Path] = None):
        self._chase = chase
        self._assets_dir = assets_dir or config.ASSETS_DIR
        self._images: Optional[Dict[str, Optional[pygame.Surface]]] = None
        self._scaled: Dict[tuple, pygame.Surface] = {}
        self._fonts: Dict[int, pygame.font.Font] = {}

    # =========================================================================
    # Resources
    # =========================================================================

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _image(self, name: str) -> Optional[pygame.Surface]:
        if self._images is None:
            self._images = {key: self._load(filename) for key, filename in SPRITE_FILES.items()}
        return self._images.get(name)

    def _load(self, filename: str) -> Optional[pygame.Surface]:
        path = self._assets_dir / filename
        if not path.exists():
            return None
        try:
            return pygame.image.load(str(path))
        except pygame.error as e:
            log.warning("Could not load %s, drawing shapes instead: %s", path, e)
            return None

    def _sized(self, name: str, width: float, height: float) -> Optional[pygame.Surface]:
        image = self._image(name)
        if image is None:
            return None
        key = (name, int(width), int(height))
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.smoothscale(image, (int(width), int(height)))
        return self._scaled[key]

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw(self, screen: pygame.Surface, view: FrameView) -> None:
        """Draw one frame."""
        width, height = screen.get_size()
        self._draw_background(screen, width, height)

        if view.show_start_prompt:
            self._draw_start_prompt(screen, width, height)
            return

        if view.flashing:
            self._draw_flash(screen, width, height)
            return

        for target in view.targets:
            self._draw_sprite(screen, 'target', target, self._chase.target_size, config.TARGET_COLOR)
        self._draw_sprite(screen, 'avatar', view.avatar, self._chase.avatar_size, config.AVATAR_COLOR)
        self._draw_sprite(screen, 'guardian', view.guardian, self._chase.guardian_size, config.GUARDIAN_COLOR)

        if view.alert_button is not None:
            self._draw_alert_button(screen, view.alert_button)

        self._draw_hud(screen, view)

    def _draw_background(self, screen: pygame.Surface, width: int, height: int) -> None:
        image = self._sized('background', width, height)
        if image is not None:
            screen.blit(image, (0, 0))
            return
        screen.fill(config.BACKGROUND_COLOR)
        band = pygame.Rect(0, int(height * 0.4), width, int(height * 0.2))
        pygame.draw.rect(screen, config.WATER_COLOR, band)

    def _draw_sprite(self, screen: pygame.Surface, name: str, center: Point2D,
                     extent: Extent, color) -> None:
        rect = pygame.Rect(0, 0, int(extent.width), int(extent.height))
        rect.center = (int(center.x), int(center.y))
        image = self._sized(name, extent.width, extent.height)
        if image is not None:
            screen.blit(image, rect)
        else:
            pygame.draw.ellipse(screen, color, rect)
            pygame.draw.ellipse(screen, (0, 0, 0), rect, 2)

    def _draw_start_prompt(self, screen: pygame.Surface, width: int, height: int) -> None:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(config.START_OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

        text = self._font(config.START_PROMPT_FONT_SIZE).render(config.START_PROMPT, True, (255, 255, 255))
        screen.blit(text, text.get_rect(center=(width // 2, height // 2)))

    def _draw_flash(self, screen: pygame.Surface, width: int, height: int) -> None:
        image = self._sized('flash', width, height)
        if image is not None:
            screen.blit(image, (0, 0))
        else:
            screen.fill(config.FLASH_COLOR)

    def _draw_alert_button(self, screen: pygame.Surface, center: Point2D) -> None:
        text = self._font(config.ALERT_BUTTON_FONT_SIZE).render(
            config.ALERT_BUTTON_LABEL, True, config.ALERT_BUTTON_TEXT_COLOR)
        rect = pygame.Rect(0, 0, text.get_width() + config.ALERT_BUTTON_PADDING, config.ALERT_BUTTON_HEIGHT)
        rect.center = (int(center.x), int(center.y))
        pygame.draw.rect(screen, config.ALERT_BUTTON_COLOR, rect, border_radius=5)
        screen.blit(text, text.get_rect(center=rect.center))

    def _draw_hud(self, screen: pygame.Surface, view: FrameView) -> None:
        if view.captures == 0:
            return
        text = self._font(24).render(f"Caught: {view.captures}", True, (230, 230, 230))
        screen.blit(text, (20, 20))
