"""Notification hooks fired around a placement pass."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .models import Item, PlacementPass, Point


log = logging.getLogger(__name__)


class PlacementHooks:
    """No-op base; subclass and override the events you care about.

    Hooks are notifications only.  Their return values are ignored and
    anything they raise is logged and discarded by the caller.
    """

    def on_resize(self) -> None:
        pass

    def on_success(self, item: Item, origin: Point) -> None:
        pass

    def on_error(self, item: Item) -> None:
        pass

    def on_complete(self, placement: PlacementPass) -> None:
        pass


class CallbackHooks(PlacementHooks):
    """Adapts plain, optional callables to :class:`PlacementHooks`."""

    def __init__(
        self,
        on_resize: Callable[[], None] | None = None,
        on_success: Callable[[Item, Point], None] | None = None,
        on_error: Callable[[Item], None] | None = None,
        on_complete: Callable[[PlacementPass], None] | None = None,
    ) -> None:
        self._on_resize = on_resize
        self._on_success = on_success
        self._on_error = on_error
        self._on_complete = on_complete

    def on_resize(self) -> None:
        if self._on_resize is not None:
            self._on_resize()

    def on_success(self, item: Item, origin: Point) -> None:
        if self._on_success is not None:
            self._on_success(item, origin)

    def on_error(self, item: Item) -> None:
        if self._on_error is not None:
            self._on_error(item)

    def on_complete(self, placement: PlacementPass) -> None:
        if self._on_complete is not None:
            self._on_complete(placement)


def notify(callback: Callable[..., None], *args) -> None:
    """Invoke a hook, logging instead of propagating anything it raises."""
    try:
        callback(*args)
    except Exception:
        log.exception("Hook %s raised; continuing", getattr(callback, "__name__", callback))
