"""
FishGuard Game Mode

A fox follows the pointer toward a row of fish; a bear guarding the pond
walks over to whichever fish the fox goes for. When the bear reaches that
fish first the scene flashes, the forest goes quiet and eerie music plays
until the fox backs off.
"""
import random
import time
from typing import Callable, List, Optional

import pygame

from bearwatch.games import BaseGame, SessionState, get_pacing_preset
from bearwatch.games.input import InputEvent
from bearwatch.games.input.sources import MouseInputSource
from bearwatch.logging import create_sink_for_environment, get_logger, register_sink
from bearwatch.models import AlertState, ChaseConfig, Point2D
from games.FishGuard import config
from games.FishGuard.audio import AudioCues, PygameAudioCues, SilentAudioCues
from games.FishGuard.loop import RECORD_MODULE, InteractionLoop
from games.FishGuard.renderer import FishGuardRenderer
from games.FishGuard.world import FrameView

log = get_logger('fishguard')

PointerProvider = Callable[[], Optional[Point2D]]


class FishGuardMode(BaseGame):
    """FishGuard game mode - sneak the fox past the bear.

    Core mechanic:
    - The fox eases toward the pointer every frame
    - Getting close to a fish selects it (first fish in the row wins)
    - The bear walks to the selected fish, or home when none is selected
    - Bear within catch range of the selected fish = alert
    """

    NAME = "Fish Guard"
    DESCRIPTION = "Sneak the fox up to the fish before the bear gets there"
    VERSION = "1.0.0"
    AUTHOR = "Bearwatch Team"

    ARGUMENTS = [
        {
            'name': '--pacing',
            'type': str,
            'default': 'classic',
            'choices': list(config.PACING_PRESETS),
            'help': 'Tuning preset: classic (fast bear, flash) or gentle (slower bear, no flash)'
        },
        {
            'name': '--avatar-ease',
            'type': float,
            'default': None,
            'help': 'Fraction of the gap to the pointer the fox covers per frame (0-1]'
        },
        {
            'name': '--guardian-speed',
            'type': float,
            'default': None,
            'help': 'Bear speed in pixels per frame'
        },
        {
            'name': '--chase-radius',
            'type': float,
            'default': None,
            'help': 'Fox-to-fish distance that makes the bear move in'
        },
        {
            'name': '--catch-radius',
            'type': float,
            'default': None,
            'help': 'Bear-to-fish distance that counts as a catch'
        },
        {
            'name': '--flash-ms',
            'type': int,
            'default': None,
            'help': 'Capture flash length in milliseconds (0 = off)'
        },
        {
            'name': '--targets',
            'type': int,
            'default': None,
            'help': 'Number of fish'
        },
    ]

    def __init__(
        self,
        pacing: str = 'classic',
        avatar_ease: Optional[float] = None,
        guardian_speed: Optional[float] = None,
        chase_radius: Optional[float] = None,
        catch_radius: Optional[float] = None,
        flash_ms: Optional[int] = None,
        targets: Optional[int] = None,
        seed: Optional[int] = None,
        mute: bool = False,
        width: Optional[int] = None,
        height: Optional[int] = None,
        audio: Optional[AudioCues] = None,
        pointer_provider: Optional[PointerProvider] = None,
        clock: Callable[[], float] = time.monotonic,
        **kwargs,
    ):
        """Initialize the FishGuard game.

        Args:
            pacing: Preset name from config.PACING_PRESETS
            avatar_ease, guardian_speed, chase_radius, catch_radius,
            flash_ms, targets: Per-field overrides of the preset
            seed: Seed for home placement
            mute: Use silent audio
            width, height: Initial playfield size (default: config screen size)
            audio: Audio sink to use instead of the pygame mixer
            pointer_provider: Pointer sampler, e.g. InputManager.get_pointer
                (default: a MouseInputSource of its own)
            clock: Monotonic time source in seconds
        """
        super().__init__(**kwargs)
        self._chase = self._build_config(
            pacing,
            avatar_ease=avatar_ease,
            guardian_speed=guardian_speed,
            chase_radius=chase_radius,
            catch_radius=catch_radius,
            flash_duration_ms=flash_ms,
            target_count=targets,
        )

        if audio is None:
            audio = SilentAudioCues() if mute else PygameAudioCues()
        self._audio = audio
        self._pointer = pointer_provider or MouseInputSource().pointer_position
        self._clock = clock

        register_sink(RECORD_MODULE, create_sink_for_environment(RECORD_MODULE))

        self._loop = InteractionLoop(
            self._chase,
            width or config.SCREEN_WIDTH,
            height or config.SCREEN_HEIGHT,
            audio=self._audio,
            rng=random.Random(seed),
        )
        self._renderer = FishGuardRenderer(self._chase)
        self._view: Optional[FrameView] = None

        log.info("FishGuard ready (pacing=%s, ease=%.2f, speed=%.0f, chase=%.0f, catch=%.0f)",
                 pacing, self._chase.avatar_ease, self._chase.guardian_speed,
                 self._chase.chase_radius, self._chase.catch_radius)

    @staticmethod
    def _build_config(pacing: str, **overrides) -> ChaseConfig:
        preset = get_pacing_preset(config.PACING_PRESETS, pacing)
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return preset
        # Re-validate so overrides get the same range checks as the preset.
        return ChaseConfig(**{**preset.model_dump(), **changes})

    @property
    def chase_config(self) -> ChaseConfig:
        return self._chase

    @property
    def loop(self) -> InteractionLoop:
        return self._loop

    @property
    def alert_state(self) -> AlertState:
        return self._loop.alert_state

    def _get_internal_state(self) -> SessionState:
        return self._loop.session

    def get_score(self) -> int:
        """Catches this session."""
        return self._loop.world.captures

    def handle_input(self, events: List[InputEvent]) -> None:
        """Queue events; the loop drains them at the top of the next update."""
        for event in events:
            self._loop.submit(event)

    def update(self, dt: float) -> None:
        """Run one interaction-loop tick with a fresh pointer sample."""
        self._view = self._loop.tick(self._pointer(), self._clock())

    def render(self, screen: pygame.Surface) -> None:
        """Render the latest frame, tracking window resizes."""
        width, height = screen.get_size()
        self._loop.resize(width, height)
        view = self._view
        if view is None or (view.width, view.height) != (float(width), float(height)):
            # Sized for the old surface; rebuild without advancing the world.
            self._view = self._loop.view()
        self._renderer.draw(screen, self._view)

    def reset(self) -> None:
        self._loop.reset()
