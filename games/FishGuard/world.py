"""
FishGuard - Session state.

ChaseWorld holds everything one session needs; the interaction loop owns
exactly one and mutates it tick by tick. FrameView is the read-only
snapshot handed to the renderer.
"""
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from bearwatch.games import SessionState
from bearwatch.models import AlertState, ChaseConfig, Point2D
from games.FishGuard.targets import choose_home, layout_targets


@dataclass
class ChaseWorld:
    """Mutable state of one chase session.

    Attributes:
        width, height: Current playfield size (tracks resizes immediately)
        layout_size: Playfield size the targets and home were laid out for
        avatar: Pointer-following entity
        guardian: Pursuing entity
        home: Guardian's idle point, clear of every target
        targets: Fixed target positions in left-to-right order
        session: NOT_STARTED until the start click
        selected: Index of the selected target this tick, None if none
        flashing: Capture flash overlay is showing
        flash_started: Clock time the flash began
        suspended: Host reported the playfield as not visible
        captures: Calm -> Alert transitions this session
        ticks: Simulated ticks this session
    """
    width: float
    height: float
    layout_size: Tuple[float, float]
    avatar: Point2D
    guardian: Point2D
    home: Point2D
    targets: Tuple[Point2D, ...]
    session: SessionState = SessionState.NOT_STARTED
    selected: Optional[int] = None
    flashing: bool = False
    flash_started: float = 0.0
    suspended: bool = False
    captures: int = 0
    ticks: int = 0

    @classmethod
    def create(
        cls,
        chase: ChaseConfig,
        width: float,
        height: float,
        rng: Optional[random.Random] = None,
    ) -> 'ChaseWorld':
        """Lay out targets, place home and build a fresh NOT_STARTED world."""
        targets = layout_targets(chase.target_count, width, height)
        home = choose_home(targets, chase.guardian_size, width, height,
                           chase.home_separation, rng)
        return cls(
            width=width,
            height=height,
            layout_size=(width, height),
            avatar=avatar_start(chase, width, height),
            guardian=home,
            home=home,
            targets=targets,
        )

    @property
    def layout_stale(self) -> bool:
        return self.layout_size != (self.width, self.height)

    def contains(self, point: Point2D) -> bool:
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height


def avatar_start(chase: ChaseConfig, width: float, height: float) -> Point2D:
    """Default avatar position: bottom centre, resting on the bottom edge."""
    return Point2D(x=width / 2.0, y=height - chase.avatar_size.half_height)


@dataclass(frozen=True)
class FrameView:
    """Everything the renderer needs for one frame."""
    width: float
    height: float
    session: SessionState
    alert: AlertState
    avatar: Point2D
    guardian: Point2D
    home: Point2D
    targets: Tuple[Point2D, ...]
    selected: Optional[int]
    flashing: bool
    show_start_prompt: bool
    alert_button: Optional[Point2D]
    captures: int
