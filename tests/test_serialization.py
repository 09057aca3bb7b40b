"""Tests for layout parsing, pass serialization and pass validation."""

from __future__ import annotations

import json
import unittest

from randomizer.placer import (
    Failed, Item, LayoutError, Obstacle, Placed, PlacementConfig, PlacementPass,
    Point, Rect, SequenceCoordinates, Size,
    layout_to_dict, parse_layout, pass_to_dict, position_all, validate_pass,
)
from tests.layout_fixture import make_landing_dict, make_landing_layout


class TestParseLayout(unittest.TestCase):

    def test_fixture_parses(self):
        layout = parse_layout(make_landing_dict())
        expected = make_landing_layout()
        self.assertEqual(layout.container, expected.container)
        self.assertEqual(layout.items, expected.items)
        self.assertEqual(layout.obstacles, expected.obstacles)

    def test_obstacles_optional(self):
        layout = parse_layout({"container": {"width": 10, "height": 10},
                               "items": [{"id": "a", "width": 1, "height": 1}]})
        self.assertEqual(layout.obstacles, [])

    def test_missing_container(self):
        with self.assertRaises(LayoutError) as ctx:
            parse_layout({"items": []})
        self.assertEqual(ctx.exception.field_name, "container")

    def test_missing_item_field_named(self):
        with self.assertRaises(LayoutError) as ctx:
            parse_layout({"container": {"width": 10, "height": 10},
                          "items": [{"id": "a", "width": 1}]})
        self.assertIn("items[0].height", str(ctx.exception))

    def test_negative_size_rejected(self):
        with self.assertRaises(LayoutError):
            parse_layout({"container": {"width": -1, "height": 10}})

    def test_non_numeric_rejected(self):
        with self.assertRaises(LayoutError):
            parse_layout({"container": {"width": "wide", "height": 10}})

    def test_item_entry_must_be_object(self):
        with self.assertRaises(LayoutError) as ctx:
            parse_layout({"container": {"width": 10, "height": 10}, "items": [5]})
        self.assertEqual(ctx.exception.field_name, "items[0]")

    def test_items_must_be_list(self):
        with self.assertRaises(LayoutError) as ctx:
            parse_layout({"container": {"width": 10, "height": 10}, "items": 5})
        self.assertEqual(ctx.exception.field_name, "items")

    def test_obstacle_entry_must_be_object(self):
        with self.assertRaises(LayoutError) as ctx:
            parse_layout({"container": {"width": 10, "height": 10},
                          "obstacles": [{"id": "o", "x": 0, "y": 0, "width": 1, "height": 1}, None]})
        self.assertEqual(ctx.exception.field_name, "obstacles[1]")

    def test_obstacles_must_be_list(self):
        with self.assertRaises(LayoutError):
            parse_layout({"container": {"width": 10, "height": 10}, "obstacles": {"id": "o"}})

    def test_obstacle_may_sit_at_negative_offset(self):
        layout = parse_layout({
            "container": {"width": 10, "height": 10},
            "obstacles": [{"id": "o", "x": -5, "y": -5, "width": 10, "height": 10}],
        })
        self.assertEqual(layout.obstacles[0].rect, Rect.from_xywh(-5, -5, 10, 10))

    def test_layout_to_dict_round_trip(self):
        data = make_landing_dict()
        self.assertEqual(layout_to_dict(parse_layout(data)), data)


class TestPassToDict(unittest.TestCase):

    def test_placed_and_failed_entries(self):
        a, b = Item("a", Size(10, 10)), Item("b", Size(10, 10))
        placement = PlacementPass(
            container=Size(100, 100),
            config=PlacementConfig(spacing=5, max_tries=3),
            results=[
                Placed(item=a, origin=Point(1, 2), attempts=1),
                Failed(item=b, candidate=Point(3, 4), attempts=4),
            ],
        )
        d = pass_to_dict(placement)
        self.assertEqual(d["container"], {"width": 100, "height": 100})
        self.assertEqual(d["spacing"], 5)
        self.assertEqual(d["tries"], 3)
        self.assertEqual(d["placed"], 1)
        self.assertEqual(d["failed"], 1)
        self.assertEqual(d["results"][0],
                         {"id": "a", "status": "placed", "x": 1, "y": 2, "attempts": 1})
        self.assertEqual(d["results"][1],
                         {"id": "b", "status": "failed", "x": None, "y": None, "attempts": 4})

    def test_json_safe(self):
        layout = make_landing_layout()
        placement = position_all(
            layout.container, layout.items, layout.obstacles,
            PlacementConfig(spacing=20),
            coordinates=SequenceCoordinates([(150, 150), (900, 650), (100, 600)]),
        )
        json.dumps(pass_to_dict(placement))


class TestValidatePass(unittest.TestCase):

    def _pass(self, *placed: tuple[str, Point, Size], spacing: float = 0) -> PlacementPass:
        return PlacementPass(
            container=Size(100, 100),
            config=PlacementConfig(spacing=spacing, max_tries=0),
            results=[Placed(item=Item(h, s), origin=o, attempts=1) for h, o, s in placed],
        )

    def test_clean_pass(self):
        p = self._pass(("a", Point(0, 0), Size(10, 10)), ("b", Point(50, 50), Size(10, 10)))
        self.assertEqual(validate_pass(p), [])

    def test_out_of_container(self):
        p = self._pass(("a", Point(95, 0), Size(10, 10)))
        errors = validate_pass(p)
        self.assertEqual(len(errors), 1)
        self.assertIn("outside", errors[0])

    def test_oversized_item_not_reported_as_outside(self):
        p = self._pass(("huge", Point(-50, -50), Size(200, 200)))
        self.assertEqual(validate_pass(p), [])

    def test_obstacle_overlap_with_spacing(self):
        p = self._pass(("a", Point(0, 0), Size(10, 10)), spacing=5)
        obstacles = [Obstacle("o", Rect.from_xywh(12, 0, 10, 10))]
        errors = validate_pass(p, obstacles)
        self.assertEqual(len(errors), 1)
        self.assertIn("obstacle 'o'", errors[0])

    def test_own_obstacle_ignored(self):
        p = self._pass(("a", Point(0, 0), Size(10, 10)))
        self.assertEqual(validate_pass(p, [Obstacle("a", Rect.from_xywh(0, 0, 10, 10))]), [])

    def test_items_overlapping_each_other(self):
        p = self._pass(("a", Point(0, 0), Size(10, 10)), ("b", Point(5, 5), Size(10, 10)))
        errors = validate_pass(p)
        self.assertEqual(len(errors), 1)
        self.assertIn("placed item 'a'", errors[0])


if __name__ == "__main__":
    unittest.main()
