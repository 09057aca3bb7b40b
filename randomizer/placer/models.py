"""Placer dataclasses — geometry primitives, inputs, and pass results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Union


# ── Geometry primitives ────────────────────────────────────────────


@dataclass(frozen=True)
class Size:
    """Footprint of an item or container."""

    width: float
    height: float


@dataclass(frozen=True)
class Point:
    """A candidate or chosen origin (top-left corner)."""

    x: float
    y: float


# Sentinel origin used to hide an item outside the visible area.
OFFSCREEN = Point(-9999, -9999)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by two opposite corners.

    ``p1`` is always the minimum corner and ``p2`` the maximum one.
    """

    p1: Point
    p2: Point

    def __post_init__(self) -> None:
        if self.p1.x > self.p2.x or self.p1.y > self.p2.y:
            raise ValueError(
                f"Rect corners out of order: {self.p1} / {self.p2}"
            )

    @classmethod
    def from_origin(cls, origin: Point, size: Size) -> Rect:
        return cls(origin, Point(origin.x + size.width, origin.y + size.height))

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Point(x, y), Point(x + width, y + height))

    @property
    def origin(self) -> Point:
        return self.p1

    @property
    def size(self) -> Size:
        return Size(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(minx, miny, maxx, maxy), the order shapely expects."""
        return (self.p1.x, self.p1.y, self.p2.x, self.p2.y)


# ── Placement inputs ───────────────────────────────────────────────


@dataclass
class Item:
    """A movable element to be scattered inside the container."""

    handle: Hashable
    size: Size


@dataclass
class Obstacle:
    """A fixed element that placed items must keep clear of.

    ``rect`` is read on every isolation test, so a caller may move the
    obstacle between tests and the placer will see the new position.
    """

    handle: Hashable
    rect: Rect


@dataclass(frozen=True)
class PlacementConfig:
    """Policy for one placement pass."""

    spacing: float = 75
    max_tries: int = 25

    def __post_init__(self) -> None:
        if self.spacing < 0:
            raise ValueError(f"spacing must be >= 0, got {self.spacing}")
        if self.max_tries < 0 or int(self.max_tries) != self.max_tries:
            raise ValueError(
                f"max_tries must be a non-negative integer, got {self.max_tries}"
            )


@dataclass
class Layout:
    """Everything a pass needs, as read from the host at one moment."""

    container: Size
    items: list[Item] = field(default_factory=list)
    obstacles: list[Obstacle] = field(default_factory=list)


class LayoutError(ValueError):
    """Raised when a layout description cannot be parsed."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid layout field '{field_name}': {reason}")


# ── Pass results ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Placed:
    """The item may be rendered at ``origin``."""

    item: Item
    origin: Point
    attempts: int

    @property
    def rect(self) -> Rect:
        return Rect.from_origin(self.origin, self.item.size)


@dataclass(frozen=True)
class Failed:
    """No isolated origin was found within the retry budget.

    ``candidate`` is the last origin tried; it is diagnostic only and
    must not be used to render the item.
    """

    item: Item
    candidate: Point
    attempts: int


PlacementResult = Union[Placed, Failed]


@dataclass
class PlacementPass:
    """Ordered results of one pass, one entry per input item."""

    container: Size
    config: PlacementConfig
    results: list[PlacementResult] = field(default_factory=list)

    @property
    def placed(self) -> list[Placed]:
        return [r for r in self.results if isinstance(r, Placed)]

    @property
    def failed(self) -> list[Failed]:
        return [r for r in self.results if isinstance(r, Failed)]

    @property
    def succeeded(self) -> bool:
        """True when every item received a position."""
        return not self.failed

    def origins(self) -> list[Point | None]:
        """Placed origin per item in input order, None for failures."""
        return [r.origin if isinstance(r, Placed) else None for r in self.results]
