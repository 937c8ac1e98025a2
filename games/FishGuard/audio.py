"""
Audio cues for FishGuard.

The interaction loop only ever talks to the AudioCues interface; it never
waits on playback. PygameAudioCues plays the three cues through the pygame
mixer, loading files from the assets directory when present and otherwise
synthesizing placeholder sounds.

Classes:
    AudioCues: Interface the game loop drives
    SilentAudioCues: No-op implementation (muted play, tests)
    PygameAudioCues: pygame.mixer implementation
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import pygame

from bearwatch.logging import get_logger
from bearwatch.models import Cue
from games.FishGuard import config

log = get_logger('fishguard.audio')

SAMPLE_RATE = 22050

CUE_FILES = {
    Cue.AMBIENT: ('nature.ogg', 'nature.wav', 'nature.mp3'),
    Cue.ALERT: ('glitch.ogg', 'glitch.wav', 'glitch.mp3'),
    Cue.TENSION: ('eerie.ogg', 'eerie.wav', 'eerie.mp3'),
}


class AudioCues(ABC):
    """Fire-and-forget control over the named cues."""

    @abstractmethod
    def play_once(self, cue: Cue) -> None:
        """Start a one-shot playback. Overlapping calls overlap."""
        pass

    @abstractmethod
    def loop(self, cue: Cue) -> None:
        """Loop a cue, resuming it if it was paused."""
        pass

    @abstractmethod
    def pause(self, cue: Cue) -> None:
        pass

    @abstractmethod
    def stop(self, cue: Cue) -> None:
        pass

    def stop_all(self) -> None:
        for cue in Cue:
            self.stop(cue)


class SilentAudioCues(AudioCues):
    """Audio sink that plays nothing."""

    def play_once(self, cue: Cue) -> None:
        pass

    def loop(self, cue: Cue) -> None:
        pass

    def pause(self, cue: Cue) -> None:
        pass

    def stop(self, cue: Cue) -> None:
        pass


class PygameAudioCues(AudioCues):
    """Plays cues through pygame.mixer.

    Looping cues keep the channel they started on so they can be paused and
    resumed. One-shots let the mixer pick any free channel, so repeated
    triggers overlap instead of cutting each other off.

    Attributes:
        audio_enabled: False when disabled by the caller or when the mixer
            could not be initialized
        sounds: Loaded or synthesized sound per cue
    """

    def __init__(self, audio_enabled: bool = True, sound_dir: Optional[Path] = None):
        self.audio_enabled = audio_enabled and config.AUDIO_ENABLED
        self.sounds: Dict[Cue, Optional[pygame.mixer.Sound]] = {}
        self._loop_channels: Dict[Cue, pygame.mixer.Channel] = {}
        self._paused: Dict[Cue, bool] = {}
        self._sound_dir = sound_dir or config.ASSETS_DIR

        if self.audio_enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            log.warning("Audio initialization failed, continuing muted: %s", e)
            self.audio_enabled = False
            return

        volumes = {
            Cue.AMBIENT: config.AMBIENT_VOLUME,
            Cue.ALERT: config.ALERT_VOLUME,
            Cue.TENSION: config.TENSION_VOLUME,
        }
        for cue in Cue:
            sound = self._load_sound(cue)
            if sound is not None:
                sound.set_volume(volumes[cue])
            self.sounds[cue] = sound

    def _load_sound(self, cue: Cue) -> Optional[pygame.mixer.Sound]:
        for filename in CUE_FILES[cue]:
            path = self._sound_dir / filename
            if path.exists():
                try:
                    return pygame.mixer.Sound(str(path))
                except pygame.error as e:
                    log.warning("Could not load %s: %s", path, e)
        try:
            return pygame.sndarray.make_sound(_synthesize(cue))
        except (pygame.error, ValueError) as e:
            log.warning("Could not synthesize %s cue: %s", cue.value, e)
            return None

    def play_once(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if not self.audio_enabled or sound is None:
            return
        sound.play()

    def loop(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if not self.audio_enabled or sound is None:
            return
        channel = self._loop_channels.get(cue)
        if channel is not None and self._paused.get(cue):
            channel.unpause()
        else:
            channel = sound.play(loops=-1)
            if channel is not None:
                self._loop_channels[cue] = channel
        self._paused[cue] = False

    def pause(self, cue: Cue) -> None:
        channel = self._loop_channels.get(cue)
        if not self.audio_enabled or channel is None:
            return
        channel.pause()
        self._paused[cue] = True

    def stop(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if not self.audio_enabled or sound is None:
            return
        sound.stop()
        self._loop_channels.pop(cue, None)
        self._paused.pop(cue, None)


# =============================================================================
# Placeholder sound synthesis
# =============================================================================

def _to_stereo(wave: np.ndarray, gain: float) -> np.ndarray:
    samples = (np.clip(wave, -1.0, 1.0) * 32767 * gain).astype(np.int16)
    return np.ascontiguousarray(np.column_stack((samples, samples)))


def _synthesize(cue: Cue, seed: int = 7) -> np.ndarray:
    """Generate a stereo int16 buffer standing in for a missing cue file."""
    rng = np.random.default_rng(seed)

    if cue == Cue.AMBIENT:
        # Two seconds of filtered noise with a slow swell: wind in leaves.
        n = SAMPLE_RATE * 2
        noise = rng.standard_normal(n)
        kernel = np.ones(64) / 64.0
        wave = np.convolve(noise, kernel, mode='same') * 4.0
        t = np.arange(n) / SAMPLE_RATE
        wave *= 0.6 + 0.4 * np.sin(2.0 * np.pi * 0.5 * t)
        return _to_stereo(wave, 0.3)

    if cue == Cue.ALERT:
        # 250ms of chopped square wave bursts.
        n = int(SAMPLE_RATE * 0.25)
        t = np.arange(n) / SAMPLE_RATE
        wave = np.sign(np.sin(2.0 * np.pi * 880.0 * t))
        gate = (np.floor(t * 40.0) % 2 == 0).astype(float)
        wave *= gate * rng.uniform(0.5, 1.0, n)
        return _to_stereo(wave, 0.35)

    # Tension: a low detuned drone, two seconds so the loop seam is rare.
    n = SAMPLE_RATE * 2
    t = np.arange(n) / SAMPLE_RATE
    wave = np.sin(2.0 * np.pi * 55.0 * t) + 0.7 * np.sin(2.0 * np.pi * 58.3 * t)
    return _to_stereo(wave / 1.7, 0.4)
