"""Shape values: plain dataclasses with an area operation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """An axis-aligned rectangle.

    Inputs are not validated; any numeric type with ``*`` works.
    """

    width: Any
    height: Any

    def get_area(self) -> Any:
        return self.width * self.height

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rectangle:
        return cls(width=data["width"], height=data["height"])


@dataclass
class Circle:
    radius: Any

    def get_area(self) -> float:
        return math.pi * self.radius**2

    def to_dict(self) -> dict[str, Any]:
        return {"radius": self.radius}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Circle:
        return cls(radius=data["radius"])
