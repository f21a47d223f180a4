"""CLI command: selector-builder build -- compose a selector from steps."""

from __future__ import annotations

import click

from selector_builder.builder import SelectorBuilder
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.model.category import Category, Combinator

_CATEGORIES = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}

# Shell-friendly names, e.g. combine=descendant instead of "combine= "
_COMBINATOR_NAMES = {c.name.lower().replace("_", "-"): c.value for c in Combinator}


def _split_step(step: str) -> tuple[str, str]:
    kind, sep, value = step.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {step!r}", param_hint="STEP")
    if kind != "combine" and kind not in _CATEGORIES:
        raise click.BadParameter(f"unknown kind {kind!r}", param_hint="STEP")
    return kind, value


@click.command()
@click.argument("steps", metavar="STEP...", nargs=-1, required=True)
@click.option(
    "--strict", is_flag=True, help="Only accept the combinators ' ', '+', '~' and '>'."
)
def build(steps: tuple[str, ...], strict: bool) -> None:
    """Build a CSS selector from KIND=VALUE steps and print it.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element or
    combine.  Steps after combine=OP describe the next selector in the chain;
    OP may also be descendant, child, next-sibling or subsequent-sibling.

    Example: build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    config = BuilderConfig(strict_combinators=strict)
    head = current = SelectorBuilder(config)
    links: list[tuple[str, SelectorBuilder]] = []

    try:
        for step in steps:
            kind, value = _split_step(step)
            if kind == "combine":
                current = SelectorBuilder(config)
                links.append((_COMBINATOR_NAMES.get(value, value), current))
                continue
            current.add(_CATEGORIES[kind], value)

        for symbol, right in links:
            head.combine(symbol, right)
    except SelectorError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(head.stringify())
