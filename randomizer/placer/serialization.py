"""Layout parsing and pass serialization — JSON conversion."""

from __future__ import annotations

from .models import (
    Failed, Item, Layout, LayoutError, Obstacle, PlacementPass, Rect, Size,
)


def _number(data: dict, key: str, where: str, *, minimum: float | None = None) -> float:
    if key not in data:
        raise LayoutError(f"{where}.{key}", "missing")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LayoutError(f"{where}.{key}", f"expected a number, got {value!r}")
    if minimum is not None and value < minimum:
        raise LayoutError(f"{where}.{key}", f"must be >= {minimum}, got {value}")
    return value


def _entry(raw, where: str) -> dict:
    if not isinstance(raw, dict):
        raise LayoutError(where, f"expected an object, got {raw!r}")
    return raw


def _entries(data: dict, key: str) -> list:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise LayoutError(key, f"expected a list, got {value!r}")
    return value


def _handle(data: dict, where: str) -> str:
    if "id" not in data:
        raise LayoutError(f"{where}.id", "missing")
    return str(data["id"])


def parse_layout(data: dict) -> Layout:
    """Parse a raw dict (from JSON / request body) into a Layout.

    Format::

        {"container": {"width": 800, "height": 600},
         "items": [{"id": "star", "width": 40, "height": 40}],
         "obstacles": [{"id": "logo", "x": 10, "y": 10,
                        "width": 200, "height": 80}]}

    ``obstacles`` is optional.
    """
    if not isinstance(data, dict):
        raise LayoutError("<root>", "expected a JSON object")
    if "container" not in data or not isinstance(data["container"], dict):
        raise LayoutError("container", "missing or not an object")

    c = data["container"]
    container = Size(
        width=_number(c, "width", "container", minimum=0),
        height=_number(c, "height", "container", minimum=0),
    )

    items = []
    for i, raw in enumerate(_entries(data, "items")):
        where = f"items[{i}]"
        raw = _entry(raw, where)
        items.append(Item(
            handle=_handle(raw, where),
            size=Size(
                width=_number(raw, "width", where, minimum=0),
                height=_number(raw, "height", where, minimum=0),
            ),
        ))

    obstacles = []
    for i, raw in enumerate(_entries(data, "obstacles")):
        where = f"obstacles[{i}]"
        raw = _entry(raw, where)
        obstacles.append(Obstacle(
            handle=_handle(raw, where),
            rect=Rect.from_xywh(
                _number(raw, "x", where),
                _number(raw, "y", where),
                _number(raw, "width", where, minimum=0),
                _number(raw, "height", where, minimum=0),
            ),
        ))

    return Layout(container=container, items=items, obstacles=obstacles)


def layout_to_dict(layout: Layout) -> dict:
    """Serialize a Layout back to the format :func:`parse_layout` reads."""
    return {
        "container": {
            "width": layout.container.width,
            "height": layout.container.height,
        },
        "items": [
            {"id": it.handle, "width": it.size.width, "height": it.size.height}
            for it in layout.items
        ],
        "obstacles": [
            {
                "id": ob.handle,
                "x": ob.rect.p1.x,
                "y": ob.rect.p1.y,
                "width": ob.rect.size.width,
                "height": ob.rect.size.height,
            }
            for ob in layout.obstacles
        ],
    }


def pass_to_dict(placement: PlacementPass) -> dict:
    """Serialize a PlacementPass to a JSON-safe dict."""
    results = []
    for r in placement.results:
        failed = isinstance(r, Failed)
        results.append({
            "id": r.item.handle,
            "status": "failed" if failed else "placed",
            "x": None if failed else r.origin.x,
            "y": None if failed else r.origin.y,
            "attempts": r.attempts,
        })
    return {
        "container": {
            "width": placement.container.width,
            "height": placement.container.height,
        },
        "spacing": placement.config.spacing,
        "tries": placement.config.max_tries,
        "results": results,
        "placed": len(placement.placed),
        "failed": len(placement.failed),
    }
