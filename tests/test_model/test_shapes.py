"""Tests for shape values."""
from __future__ import annotations

import math

from selectorkit.model import Circle, Rectangle


class TestRectangle:
    def test_fields(self) -> None:
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_get_area(self) -> None:
        assert Rectangle(10, 20).get_area() == 200

    def test_float_area(self) -> None:
        assert Rectangle(2.5, 4).get_area() == 10.0

    def test_zero_area(self) -> None:
        assert Rectangle(0, 7).get_area() == 0

    def test_to_dict_preserves_field_order(self) -> None:
        assert list(Rectangle(1, 2).to_dict()) == ["width", "height"]

    def test_from_dict(self) -> None:
        assert Rectangle.from_dict({"width": 3, "height": 4}) == Rectangle(3, 4)


class TestCircle:
    def test_get_area(self) -> None:
        assert Circle(10).get_area() == math.pi * 100

    def test_round_trip_dict(self) -> None:
        c = Circle(2)
        assert Circle.from_dict(c.to_dict()) == c
