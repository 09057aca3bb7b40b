"""Placer — scatters items at random inside a container.

Submodules:
  models        Geometry primitives, inputs, and pass results.
  geometry      Rectangle construction, intersection and isolation tests.
  sampler       Coordinate sources (seeded random, fixed sequence).
  hooks         Success / error / resize / complete notifications.
  engine        Main placement algorithm (random sampling, bounded retries).
  validation    Independent audit of a finished pass.
  serialization JSON conversion (parse_layout, pass_to_dict).
"""

from .models import (
    Size, Point, Rect, Item, Obstacle, Layout, LayoutError, OFFSCREEN,
    PlacementConfig, Placed, Failed, PlacementResult, PlacementPass,
)
from .geometry import rect_at, rects_intersect, is_isolated, clamp_origin, rect_inside_container
from .sampler import CoordinateSource, RandomCoordinates, SequenceCoordinates
from .hooks import PlacementHooks, CallbackHooks
from .engine import Placer, position_all
from .validation import validate_pass
from .serialization import parse_layout, layout_to_dict, pass_to_dict

__all__ = [
    # Models
    "Size", "Point", "Rect", "Item", "Obstacle", "Layout", "LayoutError",
    "OFFSCREEN", "PlacementConfig", "Placed", "Failed", "PlacementResult",
    "PlacementPass",
    # Geometry
    "rect_at", "rects_intersect", "is_isolated", "clamp_origin",
    "rect_inside_container",
    # Coordinates
    "CoordinateSource", "RandomCoordinates", "SequenceCoordinates",
    # Hooks
    "PlacementHooks", "CallbackHooks",
    # Engine
    "Placer", "position_all",
    # Validation / serialization
    "validate_pass", "parse_layout", "layout_to_dict", "pass_to_dict",
]
