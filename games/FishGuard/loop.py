"""
FishGuard - Interaction loop.

One tick = drain queued events, move the avatar toward the sampled pointer,
select a target, evaluate capture, move the guardian (unless capture already
holds), clamp, then step the alert machine. The loop never blocks and never
reads the clock itself; the host passes the pointer sample and the time.
"""
import random
from collections import deque
from typing import Deque, Optional

from bearwatch.games import SessionState
from bearwatch.games.input import InputEvent
from bearwatch.logging import emit_record, get_logger
from bearwatch.models import AlertState, ChaseConfig, Cue, EventType, Point2D
from games.FishGuard.alert import AlertMachine
from games.FishGuard.audio import AudioCues, SilentAudioCues
from games.FishGuard.movement import (
    clamp_to_playfield,
    distance,
    ease_toward,
    move_towards,
    point_in_box,
)
from games.FishGuard.targets import choose_home, layout_targets, select_target
from games.FishGuard.world import ChaseWorld, FrameView, avatar_start

log = get_logger('fishguard')

RECORD_MODULE = 'fishguard'


class InteractionLoop:
    """Owns one ChaseWorld and advances it one tick at a time.

    Attributes:
        config: Tuning in effect for this loop
        world: The session state being advanced
        alert: Calm/Alert machine wired to the audio cues
    """

    def __init__(
        self,
        chase: ChaseConfig,
        width: float,
        height: float,
        audio: Optional[AudioCues] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = chase
        self._audio = audio or SilentAudioCues()
        self._rng = rng or random.Random()
        self._events: Deque[InputEvent] = deque()

        self.world = ChaseWorld.create(chase, float(width), float(height), self._rng)
        self.alert = AlertMachine(self._audio)

    @property
    def session(self) -> SessionState:
        return self.world.session

    @property
    def alert_state(self) -> AlertState:
        return self.alert.state

    # =========================================================================
    # Host signals
    # =========================================================================

    def submit(self, event: InputEvent) -> None:
        """Queue a click, visibility change or reset for the next tick."""
        self._events.append(event)

    def resize(self, width: float, height: float) -> None:
        """Track a new playfield size.

        Clamping uses the new size from the next tick on. Targets and home
        are laid out again right away if no session is running, otherwise
        at the next reset.
        """
        width, height = float(width), float(height)
        if (width, height) == (self.world.width, self.world.height):
            return
        self.world.width, self.world.height = width, height
        log.debug("Playfield resized to %gx%g", width, height)
        if self.world.session == SessionState.NOT_STARTED:
            self._relayout()
            self.world.avatar = avatar_start(self.config, width, height)
            self.world.guardian = self.world.home

    def reset(self) -> None:
        """Reset the session immediately (same as a queued RESET)."""
        self._reset('requested')

    # =========================================================================
    # Tick
    # =========================================================================

    def tick(self, pointer: Optional[Point2D], now: float) -> FrameView:
        """Advance one frame.

        Args:
            pointer: Pointer sample for this frame, None if unavailable
            now: Monotonic clock time in seconds

        Returns:
            Snapshot for rendering
        """
        self._drain_events()
        world = self.world

        if world.suspended or world.session == SessionState.NOT_STARTED:
            return self.view()

        if world.flashing:
            if now - world.flash_started < self.config.flash_duration:
                return self.view()
            world.flashing = False

        chase = self.config
        world.ticks += 1

        if pointer is not None:
            world.avatar = ease_toward(world.avatar, pointer, chase.avatar_ease)
        world.avatar = clamp_to_playfield(world.avatar, chase.avatar_size, world.width, world.height)

        selected = select_target(world.avatar, world.targets, chase.chase_radius)
        if selected != world.selected:
            log.debug("Selected target: %s", selected)
        world.selected = selected

        captured = (selected is not None and
                    distance(world.guardian, world.targets[selected]) < chase.catch_radius)

        # Frozen at the point of capture until the alert resolves.
        if not captured:
            destination = world.home if selected is None else world.targets[selected]
            world.guardian = move_towards(world.guardian, destination, chase.guardian_speed)
        world.guardian = clamp_to_playfield(world.guardian, chase.guardian_size, world.width, world.height)

        transition = self.alert.update(captured)
        if transition == AlertState.ALERT:
            world.captures += 1
            if chase.flash_duration_ms > 0:
                world.flashing = True
                world.flash_started = now
            log.info("Alert: guardian caught target %d (capture #%d)", selected, world.captures)
            self._record('alert', target=selected)
        elif transition == AlertState.CALM:
            log.info("Calm: guardian released its target")
            self._record('calm')

        return self.view()

    # =========================================================================
    # Event handling
    # =========================================================================

    def _drain_events(self) -> None:
        while self._events:
            event = self._events.popleft()
            if event.event_type == EventType.CLICK:
                self._handle_click(event.position)
            elif event.event_type == EventType.VISIBILITY:
                self._set_visible(event.visible)
            elif event.event_type == EventType.RESET:
                self._reset('requested')

    def _handle_click(self, position: Point2D) -> None:
        world = self.world
        if world.suspended or not world.contains(position):
            return

        if world.session == SessionState.NOT_STARTED:
            world.session = SessionState.RUNNING
            self._audio.loop(Cue.AMBIENT)
            log.info("Session started")
            self._record('start')
            return

        if point_in_box(position, world.guardian, self.config.guardian_size):
            self._audio.play_once(Cue.ALERT)
            log.debug("Guardian clicked at %s", position)

    def _set_visible(self, visible: bool) -> None:
        world = self.world
        if not visible and not world.suspended:
            self._reset('hidden')
            world.suspended = True
            log.info("Playfield hidden, loop suspended")
        elif visible and world.suspended:
            world.suspended = False
            log.info("Playfield visible, waiting for start")

    def _relayout(self) -> None:
        world = self.world
        world.targets = layout_targets(self.config.target_count, world.width, world.height)
        world.home = choose_home(world.targets, self.config.guardian_size, world.width,
                                 world.height, self.config.home_separation, self._rng)
        world.layout_size = (world.width, world.height)

    def _reset(self, reason: str) -> None:
        world = self.world
        if world.layout_stale:
            self._relayout()

        world.session = SessionState.NOT_STARTED
        world.avatar = avatar_start(self.config, world.width, world.height)
        world.guardian = world.home
        world.selected = None
        world.flashing = False
        world.flash_started = 0.0
        world.captures = 0
        world.ticks = 0
        self.alert.reset()
        self._audio.stop_all()

        log.info("Session reset (%s)", reason)
        self._record('reset', reason=reason)

    # =========================================================================
    # Output
    # =========================================================================

    def view(self) -> FrameView:
        """Snapshot of the current world without advancing it."""
        world = self.world
        button = None
        if self.alert.is_alert and world.session == SessionState.RUNNING:
            guardian = world.guardian
            button = Point2D(
                x=guardian.x,
                y=guardian.y - self.config.guardian_size.half_height - self.config.alert_button_margin,
            )
        return FrameView(
            width=world.width,
            height=world.height,
            session=world.session,
            alert=self.alert.state,
            avatar=world.avatar,
            guardian=world.guardian,
            home=world.home,
            targets=world.targets,
            selected=world.selected,
            flashing=world.flashing,
            show_start_prompt=world.session == SessionState.NOT_STARTED,
            alert_button=button,
            captures=world.captures,
        )

    def _record(self, kind: str, **fields) -> None:
        world = self.world
        emit_record(RECORD_MODULE, {
            'type': kind,
            'tick': world.ticks,
            'alert': self.alert.state.value,
            'avatar': [world.avatar.x, world.avatar.y],
            'guardian': [world.guardian.x, world.guardian.y],
            **fields,
        })
