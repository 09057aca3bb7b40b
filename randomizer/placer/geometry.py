"""Low-level geometry helpers for the placer."""

from __future__ import annotations

from typing import Hashable, Iterable, Protocol

from shapely.geometry import box as shapely_box

from .models import Point, Rect, Size


class _HasRect(Protocol):
    handle: Hashable
    rect: Rect


def rect_at(origin: Point, size: Size) -> Rect:
    """Rectangle occupied by an item of *size* whose top-left is *origin*."""
    return Rect.from_origin(origin, size)


def rects_intersect(a: Rect, b: Rect, spacing: float = 0) -> bool:
    """Return True if *a* overlaps *b* grown by *spacing* on every side.

    Strict comparisons: rectangles that only touch the inflated
    boundary do not intersect.
    """
    return (
        a.p1.x < b.p2.x + spacing
        and a.p2.x > b.p1.x - spacing
        and a.p1.y < b.p2.y + spacing
        and a.p2.y > b.p1.y - spacing
    )


def is_isolated(
    candidate: Rect,
    others: Iterable[_HasRect],
    spacing: float,
    exclude: Hashable | None = None,
) -> bool:
    """Check that *candidate* clears every rectangle in *others*.

    Entries whose handle equals *exclude* are skipped, so an item is
    never tested against its own on-screen rectangle.  Each entry's
    ``rect`` is read here, at call time.
    """
    for other in others:
        if exclude is not None and other.handle == exclude:
            continue
        if rects_intersect(candidate, other.rect, spacing):
            return False
    return True


def clamp_origin(origin: Point, size: Size, container: Size) -> Point:
    """Pull a sampled origin back so the item's far edges stay inside.

    When the item would reach past the right (bottom) edge its width
    (height) is subtracted.  If the item fits in the container the
    result is additionally floored at zero; an item larger than the
    container is left hanging off the near edge.  The floor makes
    candidates for items wider (taller) than half the container bunch up
    at x = 0 (y = 0).
    """
    x, y = origin.x, origin.y
    if x + size.width >= container.width:
        x -= size.width
        if size.width <= container.width:
            x = max(x, 0)
    if y + size.height >= container.height:
        y -= size.height
        if size.height <= container.height:
            y = max(y, 0)
    return Point(x, y)


def rect_inside_container(rect: Rect, container: Size) -> bool:
    """Check if *rect* lies fully within the (0, 0)-(w, h) container."""
    outer = shapely_box(0, 0, container.width, container.height)
    return outer.covers(shapely_box(*rect.bounds))
