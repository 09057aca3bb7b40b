"""Pass validation — independent audit of a finished placement pass."""

from __future__ import annotations

from typing import Sequence

from shapely.geometry import box as shapely_box

from .geometry import rect_inside_container
from .models import Obstacle, PlacementPass, Rect


def _inflated(rect: Rect, spacing: float):
    x0, y0, x1, y1 = rect.bounds
    return shapely_box(x0 - spacing, y0 - spacing, x1 + spacing, y1 + spacing)


def _overlaps(a: Rect, b: Rect, spacing: float) -> bool:
    # Positive-area overlap only; touching the inflated edge is allowed.
    return shapely_box(*a.bounds).intersection(_inflated(b, spacing)).area > 0


def validate_pass(
    placement: PlacementPass, obstacles: Sequence[Obstacle] = (),
) -> list[str]:
    """Re-check a pass with shapely. Returns violation messages (empty = valid)."""
    errors: list[str] = []
    container = placement.container
    spacing = placement.config.spacing
    earlier: list[tuple[object, Rect]] = []

    for result in placement.placed:
        item = result.item
        rect = result.rect

        # ── Containment (only meaningful when the item fits) ──
        fits = (item.size.width <= container.width
                and item.size.height <= container.height)
        if fits and not rect_inside_container(rect, container):
            errors.append(
                f"Item '{item.handle}' at ({result.origin.x}, {result.origin.y}) "
                f"extends outside the {container.width}×{container.height} container"
            )

        # ── Clearance from obstacles ──
        for ob in obstacles:
            if ob.handle is not None and ob.handle == item.handle:
                continue
            if _overlaps(rect, ob.rect, spacing):
                errors.append(
                    f"Item '{item.handle}' is within {spacing} of obstacle "
                    f"'{ob.handle}'"
                )

        # ── Clearance from earlier items in the same pass ──
        for handle, other in earlier:
            if _overlaps(rect, other, spacing):
                errors.append(
                    f"Item '{item.handle}' is within {spacing} of placed "
                    f"item '{handle}'"
                )

        earlier.append((item.handle, rect))

    return errors
