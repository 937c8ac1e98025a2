"""
FishGuard - Target layout, home placement and target selection.
"""
import random
from typing import Optional, Sequence, Tuple

from bearwatch.logging import get_logger
from bearwatch.models import Extent, Point2D
from games.FishGuard.movement import distance

log = get_logger('fishguard')

HOME_PLACEMENT_ATTEMPTS = 1000


def layout_targets(count: int, width: float, height: float) -> Tuple[Point2D, ...]:
    """Space `count` targets evenly along the playfield's horizontal midline.

    Target i (1-based) sits at x = width / (count + 1) * i, so the gaps to
    both edges equal the gaps between targets.
    """
    gap = width / (count + 1)
    return tuple(Point2D(x=gap * i, y=height / 2.0) for i in range(1, count + 1))


def _axis_sample(rng: random.Random, lo: float, hi: float) -> float:
    if hi <= lo:
        return lo
    return rng.uniform(lo, hi)


def choose_home(
    targets: Sequence[Point2D],
    extent: Extent,
    width: float,
    height: float,
    min_separation: float,
    rng: Optional[random.Random] = None,
    attempts: int = HOME_PLACEMENT_ATTEMPTS,
) -> Point2D:
    """Pick a random home for the guardian away from every target.

    Samples uniformly inside the guardian's clamping bounds until a point is
    at least `min_separation` from every target. If no sample qualifies
    within `attempts` (playfield too small for the margin), the sample
    farthest from its nearest target is used and a warning is logged.
    """
    rng = rng or random.Random()
    best: Optional[Point2D] = None
    best_gap = -1.0

    for _ in range(attempts):
        candidate = Point2D(
            x=_axis_sample(rng, extent.half_width, width - extent.half_width),
            y=_axis_sample(rng, extent.half_height, height - extent.half_height),
        )
        gap = min((distance(candidate, t) for t in targets), default=float('inf'))
        if gap >= min_separation:
            return candidate
        if gap > best_gap:
            best, best_gap = candidate, gap

    log.warning("No home %.0fpx clear of targets on %gx%g playfield; using best (%.0fpx)",
                min_separation, width, height, best_gap)
    return best


def select_target(avatar: Point2D, targets: Sequence[Point2D], radius: float) -> Optional[int]:
    """Index of the FIRST target (in layout order) closer than radius, or None.

    Order wins over proximity: with targets 1 and 3 both in range, 1 is
    selected even when 3 is nearer.
    """
    for index, target in enumerate(targets):
        if distance(avatar, target) < radius:
            return index
    return None
