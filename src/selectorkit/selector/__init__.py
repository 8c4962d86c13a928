from selectorkit.selector.builder import (
    Combinator,
    CompoundSelector,
    SelectorBuilder,
    combine,
)
from selectorkit.selector.facade import SelectorFacade, css_selector_builder
from selectorkit.selector.fragment import Fragment, FragmentKind

__all__ = [
    "Combinator",
    "CompoundSelector",
    "Fragment",
    "FragmentKind",
    "SelectorBuilder",
    "SelectorFacade",
    "combine",
    "css_selector_builder",
]
