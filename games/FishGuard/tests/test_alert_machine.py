"""
Tests for the edge-triggered Calm/Alert machine and its audio side effects.
"""

from bearwatch.models import AlertState, Cue
from games.FishGuard.alert import AlertMachine

ENTER_ALERT = [('pause', Cue.AMBIENT), ('play_once', Cue.ALERT), ('loop', Cue.TENSION)]
LEAVE_ALERT = [('stop', Cue.ALERT), ('stop', Cue.TENSION), ('loop', Cue.AMBIENT)]


class TestTransitions:

    def test_starts_calm(self, audio):
        machine = AlertMachine(audio)
        assert machine.state == AlertState.CALM
        assert not machine.is_alert

    def test_side_effects_fire_only_on_edges(self, audio):
        machine = AlertMachine(audio)
        per_tick = []
        for captured in [False, False, True, True, False]:
            machine.update(captured)
            per_tick.append(audio.take())

        assert per_tick == [[], [], ENTER_ALERT, [], LEAVE_ALERT]

    def test_update_returns_entered_state(self, audio):
        machine = AlertMachine(audio)
        results = [machine.update(c) for c in [False, True, True, False, False]]

        assert results == [None, AlertState.ALERT, None, AlertState.CALM, None]

    def test_repeated_alert_edges(self, audio):
        machine = AlertMachine(audio)
        for captured in [True, False, True]:
            machine.update(captured)

        assert audio.calls == ENTER_ALERT + LEAVE_ALERT + ENTER_ALERT
        assert machine.is_alert


class TestReset:

    def test_reset_returns_to_calm_silently(self, audio):
        machine = AlertMachine(audio)
        machine.update(True)
        audio.take()

        machine.reset()

        assert machine.state == AlertState.CALM
        assert audio.calls == []

    def test_capture_after_reset_alerts_again(self, audio):
        machine = AlertMachine(audio)
        machine.update(True)
        machine.reset()
        audio.take()

        assert machine.update(True) == AlertState.ALERT
        assert audio.calls == ENTER_ALERT
