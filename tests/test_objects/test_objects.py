"""Tests for Rectangle and the JSON helpers."""

from dataclasses import dataclass

import pytest

from selector_builder.objects import Rectangle, from_json, get_json


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_diameter(self):
        return self.radius * 2


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).get_area() == 200
        assert Rectangle(0, 5).get_area() == 0


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_skips_methods(self):
        assert get_json(Circle(10)) == '{"radius":10}'

    def test_plain_object_skips_private_attributes(self):
        c = Circle(1)
        c._cache = "hidden"
        assert get_json(c) == '{"radius":1}'

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_become_null(self, value):
        assert get_json([1.5, value]) == "[1.5,null]"
        assert get_json({"x": value}) == '{"x":null}'

    def test_callable_values_dropped_from_objects(self):
        assert get_json({"f": len, "a": 1}) == '{"a":1}'

    def test_callable_items_become_null_in_arrays(self):
        assert get_json([1, len]) == "[1,null]"

    def test_top_level_callable(self):
        with pytest.raises(TypeError):
            get_json(len)

    def test_nested_objects(self):
        assert get_json({"shapes": [Rectangle(1, 2), Circle(3)]}) == (
            '{"shapes":[{"width":1,"height":2},{"radius":3}]}'
        )

    def test_unserializable(self):
        with pytest.raises(TypeError):
            get_json(object())


class TestFromJson:
    def test_restores_methods(self):
        r = from_json(Circle, '{"radius":10}')
        assert isinstance(r, Circle)
        assert r.radius == 10
        assert r.get_diameter() == 20

    def test_does_not_call_init(self):
        @dataclass
        class Strict:
            value: int

            def __post_init__(self):
                raise AssertionError("__init__ must not run")

        obj = from_json(Strict, '{"value": 3}')
        assert obj.value == 3

    def test_rectangle_round_trip(self):
        r = from_json(Rectangle, get_json(Rectangle(3, 4)))
        assert r == Rectangle(3, 4)
        assert r.get_area() == 12

    def test_non_object_payload(self):
        with pytest.raises(TypeError):
            from_json(Circle, "[1, 2, 3]")
