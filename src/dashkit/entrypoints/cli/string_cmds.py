"""String commands for the dashkit CLI.

``dashkit case STYLE TEXT...`` converts each TEXT to a case style and
``dashkit words TEXT`` splits TEXT into words. Results go to stdout, one per
line, so the commands compose with other shell tools.
"""

import logging
import re
from collections.abc import Callable

import click

from dashkit.string import (
    camel_case,
    capitalize,
    kebab_case,
    snake_case,
    upper_first,
    words,
)

logger = logging.getLogger(__name__)

CASE_STYLES: dict[str, Callable[[str], str]] = {
    "camel": camel_case,
    "capitalize": capitalize,
    "kebab": kebab_case,
    "snake": snake_case,
    "upper-first": upper_first,
}


@click.command()
@click.argument("style", type=click.Choice(list(CASE_STYLES), case_sensitive=False))
@click.argument("texts", metavar="TEXT...", nargs=-1, required=True)
def case(style: str, texts: tuple[str, ...]) -> None:
    """Convert each TEXT to the case STYLE."""
    convert = CASE_STYLES[style.lower()]
    for text in texts:
        logger.debug("Converting %r with %s", text, convert.__name__)
        click.echo(convert(text))


@click.command(name="words")
@click.argument("text")
@click.option(
    "--pattern",
    "-p",
    default=None,
    help=(
        "Regular expression matching one word. By default words are split on "
        "punctuation, whitespace and case changes."
    ),
)
def words_cmd(text: str, pattern: str | None) -> None:
    """Split TEXT into words, printing one per line."""
    try:
        compiled = re.compile(pattern) if pattern is not None else None
    except re.error as e:
        raise click.BadParameter(f"Invalid pattern: {e}", param_hint="--pattern") from e
    found = words(text, compiled)
    logger.info("Found %d word(s)", len(found))
    for word in found:
        click.echo(word)
