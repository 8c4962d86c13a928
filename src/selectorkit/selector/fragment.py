"""Fragment model: the typed pieces a simple selector is built from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kind of selector fragment.

    Each member carries its ordering rank, the prefix/suffix used when
    rendering, and whether it may occur at most once per simple selector.
    """

    ELEMENT = ("element", 0, "", "", True)
    ID = ("id", 1, "#", "", True)
    CLASS = ("class", 2, ".", "", False)
    ATTRIBUTE = ("attribute", 3, "[", "]", False)
    PSEUDO_CLASS = ("pseudo-class", 4, ":", "", False)
    PSEUDO_ELEMENT = ("pseudo-element", 5, "::", "", True)

    def __init__(
        self, label: str, rank: int, prefix: str, suffix: str, exclusive: bool
    ) -> None:
        self.label = label
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.exclusive = exclusive

    @classmethod
    def from_label(cls, label: str) -> FragmentKind:
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown fragment kind: {label!r}")


@dataclass(frozen=True)
class Fragment:
    """A single rendered piece of a selector, e.g. ``#main`` or ``::before``."""

    kind: FragmentKind
    value: str

    @property
    def text(self) -> str:
        return f"{self.kind.prefix}{self.value}{self.kind.suffix}"

    def __str__(self) -> str:
        return self.text
