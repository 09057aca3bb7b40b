"""Coordinate sources — where candidate origins come from.

The engine never calls :mod:`random` directly; it asks a
``CoordinateSource`` for a raw point inside ``[0, width) × [0, height)``
and clamps it itself.  Tests swap in :class:`SequenceCoordinates` to make
a pass fully deterministic.
"""

from __future__ import annotations

import math
import random
from typing import Iterable, Protocol

from .models import Point


class CoordinateSource(Protocol):
    def sample(self, width: float, height: float) -> Point:
        ...


class RandomCoordinates:
    """Uniform integer coordinates from a private ``random.Random``."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def sample(self, width: float, height: float) -> Point:
        return Point(
            math.floor(self._rng.random() * width),
            math.floor(self._rng.random() * height),
        )

    def reset(self) -> None:
        """Rewind to the initial seed (no-op effect for seed=None)."""
        self._rng = random.Random(self.seed)


class SequenceCoordinates:
    """Replays a fixed list of points, wrapping around at the end.

    The requested extent is ignored; the points are returned as given.
    """

    def __init__(self, points: Iterable[Point | tuple[float, float]]) -> None:
        self._points = [p if isinstance(p, Point) else Point(*p) for p in points]
        if not self._points:
            raise ValueError("SequenceCoordinates needs at least one point")
        self._index = 0

    @property
    def consumed(self) -> int:
        """Number of points handed out since the last reset."""
        return self._index

    def sample(self, width: float, height: float) -> Point:
        point = self._points[self._index % len(self._points)]
        self._index += 1
        return point

    def reset(self) -> None:
        self._index = 0
