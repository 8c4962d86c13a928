"""Error types for selector building and JSON decoding."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.fragment import FragmentKind

DUPLICATE_FRAGMENT = "duplicate exclusive fragment"
OUT_OF_ORDER = "out-of-order fragment"
UNKNOWN_COMBINATOR = "unknown combinator"


class SelectorkitError(Exception):
    """Base error for all selectorkit errors."""


class ValidationError(SelectorkitError):
    """Raised when a selector fragment breaks a uniqueness or ordering rule.

    Attributes:
        rule: The violated rule category, e.g. ``"out-of-order fragment"``.
        kind: The fragment kind that triggered the violation, if any.
    """

    def __init__(
        self, rule: str, message: str, kind: FragmentKind | None = None
    ) -> None:
        self.rule = rule
        self.kind = kind
        super().__init__(f"{rule}: {message}")


class ParseError(SelectorkitError, json.JSONDecodeError):
    """Raised when JSON text cannot be decoded.

    Keeps the decoder's ``msg``, ``doc``, ``pos``, ``lineno`` and ``colno``
    so it can be caught as a plain :class:`json.JSONDecodeError` too.
    """

    def __init__(self, msg: str, doc: str, pos: int) -> None:
        json.JSONDecodeError.__init__(self, msg, doc, pos)

    @property
    def line(self) -> int:
        return self.lineno

    @property
    def column(self) -> int:
        return self.colno
