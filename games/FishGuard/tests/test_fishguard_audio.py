"""
Unit tests for FishGuard audio cues.

Playback itself is not audible in tests, so the mixer is mocked and the
tests check which pygame calls each cue operation makes.
"""

from unittest.mock import MagicMock, patch

import numpy as np
import pygame
import pytest

from bearwatch.models import Cue
from games.FishGuard import config
from games.FishGuard.audio import (
    AudioCues,
    PygameAudioCues,
    SilentAudioCues,
    _synthesize,
)


@pytest.fixture
def mock_mixer():
    """Mixer reports ready; every synthesized sound is a separate mock."""
    with patch('pygame.mixer.get_init', return_value=(22050, -16, 2)), \
         patch('pygame.mixer.init') as mock_init, \
         patch('pygame.sndarray.make_sound', side_effect=lambda _: MagicMock()) as mock_make:
        yield {'init': mock_init, 'make_sound': mock_make}


@pytest.fixture
def cues(mock_mixer, tmp_path, monkeypatch):
    monkeypatch.setattr(config, 'AUDIO_ENABLED', True)
    return PygameAudioCues(sound_dir=tmp_path)


class TestSetup:

    def test_interface_is_abstract(self):
        with pytest.raises(TypeError):
            AudioCues()  # type: ignore

    def test_silent_cues_do_nothing(self):
        silent = SilentAudioCues()
        silent.loop(Cue.AMBIENT)
        silent.play_once(Cue.ALERT)
        silent.pause(Cue.AMBIENT)
        silent.stop_all()

    def test_disabled_skips_mixer(self, mock_mixer, tmp_path):
        cues = PygameAudioCues(audio_enabled=False, sound_dir=tmp_path)

        assert cues.audio_enabled is False
        assert cues.sounds == {}
        mock_mixer['make_sound'].assert_not_called()
        cues.loop(Cue.AMBIENT)
        cues.stop_all()

    def test_config_can_disable_audio(self, mock_mixer, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'AUDIO_ENABLED', False)
        assert PygameAudioCues(sound_dir=tmp_path).audio_enabled is False

    def test_mixer_failure_continues_muted(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(config, 'AUDIO_ENABLED', True)
        with patch('pygame.mixer.get_init', return_value=None), \
             patch('pygame.mixer.init', side_effect=pygame.error("no audio device")):
            cues = PygameAudioCues(sound_dir=tmp_path)

        assert cues.audio_enabled is False
        assert "Audio initialization failed" in capsys.readouterr().out
        cues.play_once(Cue.ALERT)

    def test_mixer_initialized_when_needed(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'AUDIO_ENABLED', True)
        with patch('pygame.mixer.get_init', return_value=None), \
             patch('pygame.mixer.init') as mock_init, \
             patch('pygame.sndarray.make_sound', side_effect=lambda _: MagicMock()):
            PygameAudioCues(sound_dir=tmp_path)

        mock_init.assert_called_once()

    def test_missing_files_are_synthesized(self, cues, mock_mixer):
        assert set(cues.sounds) == set(Cue)
        assert mock_mixer['make_sound'].call_count == 3
        mock_mixer['init'].assert_not_called()

    def test_volumes_applied(self, cues):
        cues.sounds[Cue.AMBIENT].set_volume.assert_called_once_with(config.AMBIENT_VOLUME)
        cues.sounds[Cue.TENSION].set_volume.assert_called_once_with(config.TENSION_VOLUME)

    def test_files_preferred_over_synthesis(self, mock_mixer, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'AUDIO_ENABLED', True)
        (tmp_path / 'nature.ogg').write_bytes(b'')
        with patch('pygame.mixer.Sound') as mock_sound:
            cues = PygameAudioCues(sound_dir=tmp_path)

        mock_sound.assert_called_once_with(str(tmp_path / 'nature.ogg'))
        assert cues.sounds[Cue.AMBIENT] is mock_sound.return_value
        assert mock_mixer['make_sound'].call_count == 2

    def test_unreadable_file_falls_back(self, mock_mixer, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'AUDIO_ENABLED', True)
        (tmp_path / 'glitch.wav').write_bytes(b'not audio')
        with patch('pygame.mixer.Sound', side_effect=pygame.error("bad file")):
            cues = PygameAudioCues(sound_dir=tmp_path)

        assert cues.sounds[Cue.ALERT] is not None
        assert mock_mixer['make_sound'].call_count == 3

    def test_synthesis_failure_leaves_cue_silent(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, 'AUDIO_ENABLED', True)
        with patch('pygame.mixer.get_init', return_value=(22050, -16, 2)), \
             patch('pygame.sndarray.make_sound', side_effect=pygame.error("mixer closed")):
            cues = PygameAudioCues(sound_dir=tmp_path)

        assert cues.sounds[Cue.ALERT] is None
        cues.play_once(Cue.ALERT)
        cues.loop(Cue.AMBIENT)


class TestPlayback:

    def test_play_once(self, cues):
        cues.play_once(Cue.ALERT)
        cues.play_once(Cue.ALERT)

        assert cues.sounds[Cue.ALERT].play.call_count == 2
        cues.sounds[Cue.ALERT].play.assert_called_with()

    def test_loop_plays_forever(self, cues):
        cues.loop(Cue.AMBIENT)
        cues.sounds[Cue.AMBIENT].play.assert_called_once_with(loops=-1)

    def test_pause_then_loop_resumes(self, cues):
        sound = cues.sounds[Cue.AMBIENT]
        cues.loop(Cue.AMBIENT)
        channel = sound.play.return_value

        cues.pause(Cue.AMBIENT)
        channel.pause.assert_called_once()

        cues.loop(Cue.AMBIENT)
        channel.unpause.assert_called_once()
        sound.play.assert_called_once()

    def test_pause_without_loop_is_ignored(self, cues):
        cues.pause(Cue.TENSION)
        cues.sounds[Cue.TENSION].play.assert_not_called()

    def test_stop_forgets_channel(self, cues):
        sound = cues.sounds[Cue.TENSION]
        cues.loop(Cue.TENSION)
        cues.pause(Cue.TENSION)
        cues.stop(Cue.TENSION)
        sound.stop.assert_called_once()

        cues.loop(Cue.TENSION)
        assert sound.play.call_count == 2

    def test_stop_all(self, cues):
        cues.stop_all()
        for cue in Cue:
            cues.sounds[cue].stop.assert_called_once()


class TestSynthesis:

    @pytest.mark.parametrize("cue", list(Cue))
    def test_stereo_int16_buffer(self, cue):
        buffer = _synthesize(cue)

        assert buffer.dtype == np.int16
        assert buffer.ndim == 2 and buffer.shape[1] == 2
        assert buffer.flags['C_CONTIGUOUS']
        assert np.array_equal(buffer[:, 0], buffer[:, 1])
        assert np.abs(buffer).max() > 0

    def test_deterministic(self):
        assert np.array_equal(_synthesize(Cue.ALERT), _synthesize(Cue.ALERT))

    def test_alert_is_short(self):
        assert len(_synthesize(Cue.ALERT)) < len(_synthesize(Cue.AMBIENT))
