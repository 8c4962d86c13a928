"""JSON round-trip helpers: compact encoding and factory-based decoding."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable, TypeVar

from selectorkit.errors import ParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT_SEPARATORS = (",", ":")


def _default(obj: Any) -> Any:
    """Fallback encoder for values the json module does not know."""
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact (``[1,2,3]``) unless *indent* is given. Key order
    follows insertion order. Objects exposing ``to_dict()`` and dataclass
    instances are encoded through their field mapping.
    """
    if indent is None:
        return json.dumps(obj, separators=_COMPACT_SEPARATORS, ensure_ascii=False, default=_default)
    return json.dumps(obj, indent=indent, ensure_ascii=False, default=_default)


def from_json(factory: Callable[..., T], text: str) -> T:
    """Decode *text* and build a typed value from it with *factory*.

    Resolution order:
      1. ``factory.from_dict(data)`` when the factory defines it.
      2. ``factory(**data)`` for dataclass factories given a JSON object.
      3. ``factory(data)`` otherwise (e.g. ``dict``, ``list``).

    Raises:
        ParseError: If *text* is not valid JSON.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Rejected malformed JSON at line %d column %d: %s", exc.lineno, exc.colno, exc.msg)
        raise ParseError(exc.msg, exc.doc, exc.pos) from exc

    from_dict = getattr(factory, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if dataclasses.is_dataclass(factory) and isinstance(data, dict):
        return factory(**data)
    return factory(data)
