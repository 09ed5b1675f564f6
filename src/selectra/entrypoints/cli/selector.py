"""``selectra selector`` — build a CSS selector from part tokens.

Tokens are ``KIND:VALUE`` parts (``element``, ``id``, ``class``, ``attr``,
``pseudo-class``, ``pseudo-element``) separated by optional combinator tokens
(``+``, ``~``, ``>``, ``descendant``). The selector goes to stdout; ordering and
duplicate violations are reported on stderr with exit code 1.

Examples
    $ selectra selector id:main class:container class:editable
    #main.container.editable
    $ selectra selector element:div id:main + element:table id:data
    div#main + table#data
"""

import logging

import click

from selectra.domain.errors import SelectorError

from .helpers import ReportedError, build_selector

logger = logging.getLogger(__name__)


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from TOKENS and print it."""
    logger.debug("Building selector from tokens: %s", tokens)
    try:
        built = build_selector(tokens)
    except SelectorError as e:
        logger.debug("Selector rejected: %s", e)
        raise ReportedError(str(e)) from e
    click.echo(built.stringify())
