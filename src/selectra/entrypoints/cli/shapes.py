"""``selectra shape`` and ``selectra decode`` — shape value objects on the CLI.

Examples
    $ selectra shape rectangle 10 20
    200
    $ selectra shape rectangle 10 20 --json
    {"width":10.0,"height":20.0}
    $ selectra decode rectangle '{"width":10,"height":20}'
    200
"""

from __future__ import annotations

import logging
from dataclasses import fields
from numbers import Real

import click
import click_extra as clickx

from selectra.adapters.json_codec import decode as decode_json
from selectra.adapters.json_codec import encode
from selectra.config import InvalidSettingError
from selectra.domain.errors import CodecError
from selectra.domain.shapes import Circle, Rectangle, Shape

from .helpers import ReportedError, warn

logger = logging.getLogger(__name__)

SHAPE_TYPES: dict[str, type[Shape]] = {"rectangle": Rectangle, "circle": Circle}

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the JSON encoding of the shape instead of its area.",
)


def _report(item: Shape, as_json: bool) -> None:
    if as_json:
        try:
            click.echo(encode(item))
        except (InvalidSettingError, CodecError) as e:
            raise ReportedError(str(e)) from e
    else:
        click.echo(f"{item.area():g}")


def _check_dimensions(item: Shape) -> None:
    for field in fields(item):
        value = getattr(item, field.name)
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ReportedError(
                f"{type(item).__name__} {field.name} must be a number, "
                f"got {type(value).__name__}."
            )


def _warn_negative(**dimensions: float) -> None:
    for name, value in dimensions.items():
        if value < 0:
            warn(f"Negative {name} ({value:g}); the area is computed as given.")


@click.group(cls=clickx.ExtraGroup)
def shape() -> None:
    """Shape value objects."""


@shape.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@json_option
def rectangle(width: float, height: float, as_json: bool) -> None:
    """Rectangle of WIDTH x HEIGHT."""
    _warn_negative(width=width, height=height)
    _report(Rectangle(width, height), as_json)


@shape.command()
@click.argument("radius", type=float)
@json_option
def circle(radius: float, as_json: bool) -> None:
    """Circle of RADIUS."""
    _warn_negative(radius=radius)
    _report(Circle(radius), as_json)


@click.command()
@click.argument("kind", type=click.Choice(sorted(SHAPE_TYPES), case_sensitive=False))
@click.argument("text")
def decode(kind: str, text: str) -> None:
    """Decode JSON TEXT into a KIND shape and print its area."""
    try:
        item = decode_json(SHAPE_TYPES[kind.lower()], text)
    except CodecError as e:
        raise ReportedError(str(e)) from e
    logger.info("Decoded %r", item)
    _check_dimensions(item)
    click.echo(f"{item.area():g}")
