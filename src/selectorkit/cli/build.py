"""CLI command: selectorkit build -- assemble a selector from tokens."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import ValidationError
from selectorkit.selector import Combinator, SelectorFacade
from selectorkit.selector.builder import Renderable
from selectorkit.selector.fragment import FragmentKind

# "descendant" stands in for the space combinator on the command line.
_COMBINATOR_TOKENS = {
    "descendant": Combinator.DESCENDANT.value,
    "+": Combinator.ADJACENT_SIBLING.value,
    "~": Combinator.GENERAL_SIBLING.value,
    ">": Combinator.CHILD.value,
}


def build_from_tokens(tokens: list[str], facade: SelectorFacade | None = None) -> str:
    """Fold ``kind:value`` and combinator tokens into a selector string.

    Each combinator joins everything built so far with the simple selector
    that follows it.
    """
    facade = facade or SelectorFacade()
    left: Renderable | None = None
    combinator = ""
    current = facade.new()

    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            if current.is_empty:
                raise click.BadParameter(
                    f"combinator {token!r} needs a selector before it",
                    param_hint="TOKENS",
                )
            left = current if left is None else facade.combine(left, combinator, current)
            combinator = _COMBINATOR_TOKENS[token]
            current = facade.new()
            continue
        if ":" not in token:
            raise click.BadParameter(
                f"expected KIND:VALUE or a combinator, got {token!r}",
                param_hint="TOKENS",
            )
        label, value = token.split(":", 1)
        try:
            kind = FragmentKind.from_label(label)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="TOKENS") from exc
        current.add(kind, value)

    if left is None:
        return current.stringify()
    if current.is_empty:
        raise click.BadParameter(
            "a combinator needs a selector after it", param_hint="TOKENS"
        )
    return facade.combine(left, combinator, current).stringify()


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from TOKENS.

    Each token is either KIND:VALUE (element, id, class, attribute,
    pseudo-class, pseudo-element) or a combinator (+, ~, >, descendant).

    \b
    Example:
        selectorkit build element:a 'attribute:href$=".png"' pseudo-class:focus
    """
    try:
        selector = build_from_tokens(list(tokens))
    except ValidationError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)
    click.echo(selector)
