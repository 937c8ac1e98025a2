"""
FishGuard - Movement primitives.

Two distinct motion models: the avatar eases toward the pointer
(a fixed fraction of the remaining gap per tick), the guardian walks at a
constant speed and snaps onto its destination on the last step.
"""
import math

from bearwatch.models import Extent, Point2D


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def ease_toward(position: Point2D, target: Point2D, ease: float) -> Point2D:
    """Move a fraction `ease` of the way from position to target.

    Args:
        position: Current position
        target: Point being followed
        ease: Fraction in (0, 1]; 1 snaps straight onto the target

    Returns:
        The new position
    """
    return Point2D(
        x=position.x + ease * (target.x - position.x),
        y=position.y + ease * (target.y - position.y),
    )


def move_towards(position: Point2D, destination: Point2D, speed: float) -> Point2D:
    """Step at constant speed toward destination without overshooting.

    When the destination is within one step (including zero distance) the
    result is the destination itself.
    """
    dx = destination.x - position.x
    dy = destination.y - position.y
    d = math.hypot(dx, dy)
    if d <= speed:
        return destination
    return Point2D(x=position.x + speed * dx / d, y=position.y + speed * dy / d)


def clamp_to_playfield(position: Point2D, extent: Extent, width: float, height: float) -> Point2D:
    """Keep a sprite of the given extent fully inside the playfield.

    On a playfield smaller than the sprite the low bound wins, so the
    sprite hugs the top-left edge.
    """
    return Point2D(
        x=clamp(position.x, extent.half_width, width - extent.half_width),
        y=clamp(position.y, extent.half_height, height - extent.half_height),
    )


def point_in_box(point: Point2D, center: Point2D, extent: Extent) -> bool:
    """Inclusive bounding-box test around a sprite centre."""
    return (center.x - extent.half_width <= point.x <= center.x + extent.half_width and
            center.y - extent.half_height <= point.y <= center.y + extent.half_height)
