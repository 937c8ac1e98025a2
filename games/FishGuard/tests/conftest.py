"""Shared fixtures for FishGuard tests."""

import random

import pytest

from bearwatch.games.input import InputEvent
from bearwatch.logging import LogSink, close_all_sinks, register_sink
from bearwatch.models import ChaseConfig
from games.FishGuard.audio import AudioCues
from games.FishGuard.loop import RECORD_MODULE, InteractionLoop


class RecordingAudio(AudioCues):
    """AudioCues fake that records every call in order."""

    def __init__(self):
        self.calls = []

    def play_once(self, cue):
        self.calls.append(('play_once', cue))

    def loop(self, cue):
        self.calls.append(('loop', cue))

    def pause(self, cue):
        self.calls.append(('pause', cue))

    def stop(self, cue):
        self.calls.append(('stop', cue))

    def take(self):
        """Return and forget the calls recorded so far."""
        calls, self.calls = self.calls, []
        return calls


class RecordingSink(LogSink):
    def __init__(self):
        self.records = []

    def emit(self, module, record):
        self.records.append(record)

    def flush(self):
        pass

    def close(self):
        pass

    @property
    def types(self):
        return [r['type'] for r in self.records]


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def records():
    sink = RecordingSink()
    register_sink(RECORD_MODULE, sink)
    yield sink
    close_all_sinks()


@pytest.fixture
def make_loop(audio):
    """Factory for loops on a 600x600 playfield.

    Five targets land at x = 100..500 on y = 300. Keyword arguments
    override ChaseConfig fields.
    """
    def _make(width=600, height=600, seed=1, **overrides):
        return InteractionLoop(ChaseConfig(**overrides), width, height,
                               audio=audio, rng=random.Random(seed))
    return _make


@pytest.fixture
def start():
    """Start a loop's session with a click in the middle of the playfield."""
    def _start(loop, now=0.0):
        loop.submit(InputEvent.click(loop.world.width / 2, loop.world.height / 2, now))
        return loop.tick(None, now)
    return _start
