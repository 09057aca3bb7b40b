"""Randomizer controller — ties the placer to a live host layout.

The host supplies two callables:

  provider()          returns a fresh Layout (container, items, obstacles)
                      read from the host at call time.
  apply(item, point)  moves an item.  ``point`` is the placed origin,
                      ``OFFSCREEN`` to hide it, or ``None`` to restore the
                      host's original positioning.

Resize notifications are debounced: the pass runs once the host has been
quiet for ``config.delay_ms``.  Items are hidden first so stale overlapping
positions are never visible while the new pass runs.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from randomizer.config import DEFAULT_CONFIG, RandomizerConfig
from randomizer.placer import (
    OFFSCREEN, Item, Layout, Placed, Placer, PlacementHooks, PlacementPass,
    Point,
)
from randomizer.placer.hooks import notify
from randomizer.placer.sampler import CoordinateSource


log = logging.getLogger(__name__)


class Randomizer:
    """Owns one placer and its resize lifecycle for one container."""

    def __init__(
        self,
        provider: Callable[[], Layout],
        apply: Callable[[Item, Point | None], None],
        config: RandomizerConfig = DEFAULT_CONFIG,
        *,
        hooks: PlacementHooks | None = None,
        coordinates: CoordinateSource | None = None,
    ) -> None:
        self.provider = provider
        self.apply = apply
        self.config = config
        self.hooks = hooks or PlacementHooks()
        self.placer = Placer(
            config.placement(), coordinates=coordinates, hooks=self.hooks,
        )
        self.last_pass: PlacementPass | None = None
        self.enabled = False

        self._lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._items: list[Item] = []

    # ── Lifecycle ──────────────────────────────────────────────────

    def enable(self) -> PlacementPass | None:
        """Start managing the layout and run the first pass."""
        with self._lock:
            if self.enabled:
                return self.last_pass
            self.enabled = True
        return self.reposition()

    def disable(self) -> None:
        """Stop reacting to resizes and hand items back to the host."""
        with self._lock:
            self.enabled = False
            self._cancel_timer()
            self._generation += 1
            items, self._items = self._items, []
        for item in items:
            self.apply(item, None)
        log.info("Randomizer disabled; reset %d item(s)", len(items))

    # ── Resize handling ────────────────────────────────────────────

    def notify_resize(self) -> None:
        """Record a resize event; the pass runs after the quiet period."""
        with self._lock:
            if not self.enabled:
                return
            self._cancel_timer()
            self._timer = threading.Timer(self.config.delay_s, self._resize_end)
            self._timer.daemon = True
            self._timer.start()

    def flush_resize(self) -> PlacementPass | None:
        """Run a pending debounced resize now instead of waiting."""
        with self._lock:
            if self._timer is None:
                return None
            self._cancel_timer()
        return self._resize_end()

    @property
    def resize_pending(self) -> bool:
        return self._timer is not None

    def _resize_end(self) -> PlacementPass | None:
        with self._lock:
            self._timer = None
            if not self.enabled:
                return None
        log.debug("Resize settled; re-placing items")
        return self._run_pass(on_hidden=self.hooks.on_resize)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # ── Placement ──────────────────────────────────────────────────

    def reposition(self) -> PlacementPass | None:
        """Hide the current items, read the layout fresh and run one pass.

        A pass that finishes after a newer one has started is
        discarded rather than applied.
        """
        return self._run_pass()

    def _run_pass(
        self, on_hidden: Callable[[], None] | None = None,
    ) -> PlacementPass | None:
        with self._lock:
            if not self.enabled:
                return None
            self._generation += 1
            generation = self._generation
            shown = list(self._items)

        # Nothing is shown before the first pass after enable().
        self._hide(shown)
        if on_hidden is not None:
            notify(on_hidden)

        layout = self.provider()
        placement = self.placer.position_all(
            layout.container, layout.items, layout.obstacles,
        )

        with self._lock:
            if generation != self._generation:
                log.debug("Discarding superseded pass %d", generation)
                return None
            self._items = list(layout.items)
            self.last_pass = placement
            for result in placement.results:
                if isinstance(result, Placed):
                    self.apply(result.item, result.origin)
                else:
                    self.apply(result.item, OFFSCREEN)
        return placement

    def _hide(self, items: list[Item]) -> None:
        for item in items:
            self.apply(item, OFFSCREEN)
