"""
FishGuard - Alert state machine.

Edge-triggered: side effects fire on the tick the capture predicate
changes, never while it holds steady.
"""
from typing import Optional

from bearwatch.models import AlertState, Cue
from games.FishGuard.audio import AudioCues


class AlertMachine:
    """Two-state Calm/Alert machine driving the audio cues.

    Calm -> Alert: pause ambient, play the alert sting, loop tension.
    Alert -> Calm: stop the sting, stop tension, loop ambient.
    The call order is part of the contract (audio layering).
    """

    def __init__(self, audio: AudioCues):
        self._audio = audio
        self.state = AlertState.CALM

    @property
    def is_alert(self) -> bool:
        return self.state == AlertState.ALERT

    def update(self, captured: bool) -> Optional[AlertState]:
        """Feed this tick's capture predicate.

        Returns:
            The state entered on a transition, or None when nothing changed
        """
        if captured and self.state == AlertState.CALM:
            self._audio.pause(Cue.AMBIENT)
            self._audio.play_once(Cue.ALERT)
            self._audio.loop(Cue.TENSION)
            self.state = AlertState.ALERT
            return self.state

        if not captured and self.state == AlertState.ALERT:
            self._audio.stop(Cue.ALERT)
            self._audio.stop(Cue.TENSION)
            self._audio.loop(Cue.AMBIENT)
            self.state = AlertState.CALM
            return self.state

        return None

    def reset(self) -> None:
        """Return to Calm without side effects; the caller silences audio."""
        self.state = AlertState.CALM
