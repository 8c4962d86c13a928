"""Chainable CSS selector builder with ordering and uniqueness checks.

A simple selector is assembled in this fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element may appear once; class, attribute and
pseudo-class may repeat. Simple selectors (or already combined ones) are
joined with :func:`combine`.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Protocol

from selectorkit.config import SelectorConfig
from selectorkit.errors import (
    DUPLICATE_FRAGMENT,
    OUT_OF_ORDER,
    UNKNOWN_COMBINATOR,
    ValidationError,
)
from selectorkit.selector.fragment import Fragment, FragmentKind

__all__ = [
    "Combinator",
    "CompoundSelector",
    "Renderable",
    "SelectorBuilder",
    "combine",
]

logger = logging.getLogger(__name__)

_ORDER_HINT = "element, id, class, attribute, pseudo-class, pseudo-element"


class Combinator(StrEnum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


class Renderable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulates fragments for one simple selector.

    Every fragment method returns the builder so calls can be chained.
    :meth:`stringify` is destructive: it returns the selector text and
    resets the builder. A rule violation also resets the builder before
    :class:`ValidationError` propagates.
    """

    def __init__(self) -> None:
        self._fragments: list[Fragment] = []
        self._has_element = False
        self._has_id = False
        self._has_pseudo_element = False
        self._max_rank = -1

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, name)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, value)

    def class_name(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append ``[value]``; *value* is the bracket interior, e.g. ``href$=".png"``."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        """Append a fragment of an arbitrary *kind*."""
        return self._append(kind, value)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text and reset the builder to empty."""
        result = "".join(fragment.text for fragment in self._fragments)
        self.clear()
        return result

    def clear(self) -> None:
        self._fragments = []
        self._has_element = False
        self._has_id = False
        self._has_pseudo_element = False
        self._max_rank = -1

    # --- read-only views ------------------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def is_empty(self) -> bool:
        return not self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        pending = "".join(fragment.text for fragment in self._fragments)
        return f"SelectorBuilder({pending!r})"

    # --- internals ------------------------------------------------------------

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        if kind.exclusive and self._is_used(kind):
            self._fail(
                ValidationError(
                    DUPLICATE_FRAGMENT,
                    f"{kind.label} may occur only once inside a selector",
                    kind=kind,
                )
            )
        if kind.rank < self._max_rank:
            self._fail(
                ValidationError(
                    OUT_OF_ORDER,
                    f"{kind.label} cannot follow a later part; "
                    f"order is {_ORDER_HINT}",
                    kind=kind,
                )
            )
        self._mark_used(kind)
        self._max_rank = kind.rank
        self._fragments.append(Fragment(kind=kind, value=value))
        logger.debug("Appended %s fragment %r", kind.label, value)
        return self

    def _is_used(self, kind: FragmentKind) -> bool:
        if kind is FragmentKind.ELEMENT:
            return self._has_element
        if kind is FragmentKind.ID:
            return self._has_id
        if kind is FragmentKind.PSEUDO_ELEMENT:
            return self._has_pseudo_element
        return False

    def _mark_used(self, kind: FragmentKind) -> None:
        if kind is FragmentKind.ELEMENT:
            self._has_element = True
        elif kind is FragmentKind.ID:
            self._has_id = True
        elif kind is FragmentKind.PSEUDO_ELEMENT:
            self._has_pseudo_element = True

    def _fail(self, error: ValidationError) -> None:
        logger.warning("Selector rejected: %s", error)
        self.clear()
        raise error


class CompoundSelector:
    """Two selectors joined by a combinator.

    Behaves like a builder for rendering purposes: :meth:`stringify`
    returns the text once and then yields ``""``.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    def stringify(self) -> str:
        result = self._text
        self._text = ""
        return result

    def __repr__(self) -> str:
        return f"CompoundSelector({self._text!r})"


def combine(
    left: Renderable,
    combinator: str,
    right: Renderable,
    config: SelectorConfig | None = None,
) -> CompoundSelector:
    """Join *left* and *right* with *combinator*.

    Both operands are rendered with ``stringify()`` and are therefore reset.
    The combinator is always padded with one space on each side, so the
    descendant combinator ``" "`` yields three spaces. Unknown combinators
    are passed through unless ``config.strict_combinators`` is set.
    """
    config = config or SelectorConfig()
    token = str(combinator)
    left_text = left.stringify()
    right_text = right.stringify()
    if config.strict_combinators and token not in {c.value for c in Combinator}:
        logger.warning("Selector rejected: unknown combinator %r", token)
        raise ValidationError(
            UNKNOWN_COMBINATOR,
            f"{token!r} is not one of ' ', '+', '~', '>'",
        )
    logger.debug("Combined %r %r %r", left_text, token, right_text)
    return CompoundSelector(f"{left_text} {token} {right_text}")
