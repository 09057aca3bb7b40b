"""Landing-page test fixture — a hardcoded layout for end-to-end placement.

A 1200 × 800 page with a header bar, a centred hero block and a footer.
Six decorative badges (two sizes) are scattered around them.

    header   (0, 0)      1200 × 100
    hero     (400, 250)  400 × 300
    footer   (0, 720)    1200 × 80

With spacing 20 there is plenty of free space left for every badge, so a
seeded pass is expected to place all of them.
"""

from __future__ import annotations

from randomizer.placer import Item, Layout, Obstacle, Rect, Size


def make_landing_layout() -> Layout:
    """Return the hardcoded landing-page Layout."""
    return Layout(
        container=Size(1200, 800),
        items=[
            Item("badge_1", Size(40, 40)),
            Item("badge_2", Size(40, 40)),
            Item("badge_3", Size(40, 40)),
            Item("badge_4", Size(60, 30)),
            Item("badge_5", Size(60, 30)),
            Item("badge_6", Size(60, 30)),
        ],
        obstacles=[
            Obstacle("header", Rect.from_xywh(0, 0, 1200, 100)),
            Obstacle("hero", Rect.from_xywh(400, 250, 400, 300)),
            Obstacle("footer", Rect.from_xywh(0, 720, 1200, 80)),
        ],
    )


def make_landing_dict() -> dict:
    """The same layout in its JSON form."""
    return {
        "container": {"width": 1200, "height": 800},
        "items": [
            {"id": "badge_1", "width": 40, "height": 40},
            {"id": "badge_2", "width": 40, "height": 40},
            {"id": "badge_3", "width": 40, "height": 40},
            {"id": "badge_4", "width": 60, "height": 30},
            {"id": "badge_5", "width": 60, "height": 30},
            {"id": "badge_6", "width": 60, "height": 30},
        ],
        "obstacles": [
            {"id": "header", "x": 0, "y": 0, "width": 1200, "height": 100},
            {"id": "hero", "x": 400, "y": 250, "width": 400, "height": 300},
            {"id": "footer", "x": 0, "y": 720, "width": 1200, "height": 80},
        ],
    }
