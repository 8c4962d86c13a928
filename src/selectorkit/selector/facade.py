"""Facade handing out a fresh builder for every selector."""

from __future__ import annotations

from selectorkit.config import SelectorConfig
from selectorkit.selector.builder import (
    CompoundSelector,
    Renderable,
    SelectorBuilder,
    combine,
)


class SelectorFacade:
    """Entry point mirroring the builder's fragment methods.

    Each fragment call starts a new :class:`SelectorBuilder`, so separate
    selectors never share state::

        builder = SelectorFacade()
        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        # 'div#main + table#data'
    """

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()

    def new(self) -> SelectorBuilder:
        """Return an empty builder; fragment rules need no configuration."""
        return SelectorBuilder()

    def element(self, name: str) -> SelectorBuilder:
        return self.new().element(name)

    def id(self, value: str) -> SelectorBuilder:
        return self.new().id(value)

    def class_name(self, value: str) -> SelectorBuilder:
        return self.new().class_name(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.new().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CompoundSelector:
        return combine(left, combinator, right, config=self.config)


css_selector_builder = SelectorFacade()
