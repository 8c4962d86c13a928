"""Tests for the fragment model."""

import pytest

from selectorkit.selector import Fragment, FragmentKind


class TestFragmentKind:
    def test_ranks_follow_selector_order(self):
        ranks = [kind.rank for kind in FragmentKind]
        assert ranks == [0, 1, 2, 3, 4, 5]

    def test_exclusive_kinds(self):
        exclusive = {kind for kind in FragmentKind if kind.exclusive}
        assert exclusive == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }

    def test_from_label(self):
        assert FragmentKind.from_label("pseudo-class") is FragmentKind.PSEUDO_CLASS
        assert FragmentKind.from_label("attribute") is FragmentKind.ATTRIBUTE

    def test_from_label_unknown(self):
        with pytest.raises(ValueError, match="Unknown fragment kind"):
            FragmentKind.from_label("universal")


class TestFragmentText:
    @pytest.mark.parametrize(
        "kind, value, expected",
        [
            (FragmentKind.ELEMENT, "div", "div"),
            (FragmentKind.ID, "main", "#main"),
            (FragmentKind.CLASS, "container", ".container"),
            (FragmentKind.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
            (FragmentKind.PSEUDO_CLASS, "nth-of-type(even)", ":nth-of-type(even)"),
            (FragmentKind.PSEUDO_ELEMENT, "before", "::before"),
        ],
    )
    def test_text(self, kind, value, expected):
        fragment = Fragment(kind=kind, value=value)
        assert fragment.text == expected
        assert str(fragment) == expected

    def test_frozen(self):
        fragment = Fragment(kind=FragmentKind.ID, value="a")
        with pytest.raises(AttributeError):
            fragment.value = "b"  # type: ignore[misc]
