"""Tests for the JSON helpers."""

import json

import pytest

from selectorkit.objects import Rectangle, from_json, to_json


class Circle:
    def __init__(self, radius):
        raise AssertionError("from_json must not call __init__")

    def get_diameter(self):
        return self.radius * 2


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestToJSON:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_is_compact(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_nested_values_are_compact(self):
        assert to_json({"a": [1, {"b": 2}]}) == '{"a":[1,{"b":2}]}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object(self):
        assert json.loads(to_json(Point(1, 2))) == {"x": 1, "y": 2}

    def test_scalars(self):
        assert to_json("text") == '"text"'
        assert to_json(None) == "null"

    def test_unserializable_raises_type_error(self):
        with pytest.raises(TypeError):
            to_json({"value": object()})


class TestFromJSON:
    def test_rebuilds_plain_class_without_init(self):
        circle = from_json(Circle, '{"radius": 10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.get_diameter() == 20

    def test_rebuilds_frozen_dataclass(self):
        r = from_json(Rectangle, '{"width": 10, "height": 20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200
        assert r == Rectangle(10, 20)

    def test_round_trip_through_to_json(self):
        original = Point(3, 4)
        restored = from_json(Point, to_json(original))
        assert vars(restored) == vars(original)

    def test_extra_keys_become_attributes(self):
        p = from_json(Point, '{"x": 1, "y": 2, "label": "origin"}')
        assert p.label == "origin"

    def test_malformed_json_raises_value_error(self):
        with pytest.raises(ValueError, match="Failed to parse JSON for Point"):
            from_json(Point, '{"x": 1,')

    def test_non_object_payload_raises_value_error(self):
        with pytest.raises(ValueError, match="must be an object, got list"):
            from_json(Point, "[1, 2]")
