"""CLI command: selector-builder rectangle -- area or JSON of a rectangle."""

from __future__ import annotations

import click

from selector_builder.objects import Rectangle, get_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON.")
def rectangle(width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width, height)
    if as_json:
        click.echo(get_json(rect))
    else:
        click.echo(f"{rect.get_area():g}")
