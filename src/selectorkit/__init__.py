"""selectorkit: shape values, JSON helpers, and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorConfig
from selectorkit.errors import ParseError, SelectorkitError, ValidationError
from selectorkit.model import Circle, Rectangle
from selectorkit.selector import (
    Combinator,
    CompoundSelector,
    Fragment,
    FragmentKind,
    SelectorBuilder,
    SelectorFacade,
    combine,
    css_selector_builder,
)
from selectorkit.serialization import from_json, get_json

__all__ = [
    "__version__",
    "Circle",
    "Combinator",
    "CompoundSelector",
    "Fragment",
    "FragmentKind",
    "ParseError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorConfig",
    "SelectorFacade",
    "SelectorkitError",
    "ValidationError",
    "combine",
    "css_selector_builder",
    "from_json",
    "get_json",
]
