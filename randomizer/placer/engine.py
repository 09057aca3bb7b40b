"""Main placement engine — random sampling with bounded retries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable, Sequence

from .geometry import clamp_origin, is_isolated, rect_at
from .hooks import PlacementHooks, notify
from .models import (
    Failed, Item, Obstacle, Placed, PlacementConfig, PlacementPass,
    PlacementResult, Point, Rect, Size,
)
from .sampler import CoordinateSource, RandomCoordinates


log = logging.getLogger(__name__)


@dataclass
class _Footprint:
    """An item placed earlier in the current pass.

    The handle is always None so the self-exclusion check never skips
    it, even when the same item appears twice in the input.
    """

    rect: Rect
    handle: Hashable = None


class Placer:
    """Scatters items inside a container, clear of obstacles.

    A Placer owns its configuration, coordinate source and hooks and
    holds no state between passes; several instances can be used side
    by side without affecting each other.
    """

    def __init__(
        self,
        config: PlacementConfig | None = None,
        *,
        coordinates: CoordinateSource | None = None,
        hooks: PlacementHooks | None = None,
    ) -> None:
        self.config = config or PlacementConfig()
        self.coordinates = coordinates or RandomCoordinates()
        self.hooks = hooks or PlacementHooks()

    # ── Public API ──────────────────────────────────────────────────

    def position_all(
        self,
        container: Size,
        items: Sequence[Item],
        obstacles: Sequence[Obstacle] = (),
    ) -> PlacementPass:
        """Place every item in input order.

        Each successfully placed item joins the obstacle set for the
        items after it.  Items that cannot be isolated within the retry
        budget come back as :class:`Failed`; they never stop the pass.

        Parameters
        ----------
        container : Size
            Extent of the area to scatter into, origin at (0, 0).
        items : sequence of Item
            Elements to position.
        obstacles : sequence of Obstacle
            Fixed rectangles to keep clear of.  Not modified.

        Returns
        -------
        PlacementPass
            One result per item, in input order.
        """
        active: list[Obstacle | _Footprint] = list(obstacles)
        placement = PlacementPass(container=container, config=self.config)

        for item in items:
            result = self._place_one(container, item, active)
            placement.results.append(result)

            if isinstance(result, Placed):
                active.append(_Footprint(rect=result.rect))
                log.info(
                    "Placed %s at (%.1f, %.1f) after %d attempt(s)",
                    item.handle, result.origin.x, result.origin.y,
                    result.attempts,
                )
                notify(self.hooks.on_success, item, result.origin)
            else:
                log.warning(
                    "Could not place %s (%.0f×%.0f) in %.0f×%.0f after "
                    "%d attempt(s)",
                    item.handle, item.size.width, item.size.height,
                    container.width, container.height, result.attempts,
                )
                notify(self.hooks.on_error, item)

        log.info(
            "Pass complete: %d placed, %d failed",
            len(placement.placed), len(placement.failed),
        )
        notify(self.hooks.on_complete, placement)
        return placement

    # ── Internals ──────────────────────────────────────────────────

    def _candidate(self, container: Size, size: Size) -> Point:
        raw = self.coordinates.sample(container.width, container.height)
        return clamp_origin(raw, size, container)

    def _place_one(
        self,
        container: Size,
        item: Item,
        active: Sequence[Obstacle | _Footprint],
    ) -> PlacementResult:
        spacing = self.config.spacing

        # One initial draw plus up to max_tries resamples.
        attempts = 0
        while True:
            origin = self._candidate(container, item.size)
            attempts += 1
            rect = rect_at(origin, item.size)
            if attempts > self.config.max_tries:
                break
            if is_isolated(rect, active, spacing, exclude=item.handle):
                break
            log.debug(
                "Candidate (%.1f, %.1f) for %s collides; retrying",
                origin.x, origin.y, item.handle,
            )

        # Obstacles may have moved while sampling, so test once more.
        if is_isolated(rect, active, spacing, exclude=item.handle):
            return Placed(item=item, origin=origin, attempts=attempts)
        return Failed(item=item, candidate=origin, attempts=attempts)


def position_all(
    container: Size,
    items: Sequence[Item],
    obstacles: Sequence[Obstacle] = (),
    config: PlacementConfig | None = None,
    *,
    coordinates: CoordinateSource | None = None,
    hooks: PlacementHooks | None = None,
) -> PlacementPass:
    """Run a single pass with a throwaway :class:`Placer`."""
    placer = Placer(config, coordinates=coordinates, hooks=hooks)
    return placer.position_all(container, items, obstacles)
