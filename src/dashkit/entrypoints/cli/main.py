"""dashkit CLI entry point.

Defines the top-level ``dashkit`` command (via Click-Extra) and registers the
subcommands exposed by the project.

Currently available commands
- ``dashkit case``: convert text to camel/kebab/snake case and friends.
- ``dashkit words``: split text into words.

Notes
- The CLI version is sourced from `dashkit.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Logs go to stderr; command results go to stdout.

Examples
    $ dashkit case camel "foo bar"
    $ dashkit -v words "fooBar baz"
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from dashkit import __version__
from dashkit.config import get_cache_store_kind
from dashkit.errors import UnknownCacheStoreError
from dashkit.logging import config_console_handler, log_startup

from .helpers.log_level_parser import parse_log_level
from .string_cmds import case, words_cmd

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """dashkit command-line interface.

    dashkit is a toolkit of small, pure utility functions: type predicates,
    list and object helpers, numeric coercion, string casing and memoization.
    The CLI exposes the string helpers for use from the shell.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,  # repeatable option
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L dashkit.memoize=DEBUG -L click_extra=ERROR) or via "
        "the matching environment variable (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def dashkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """dashkit command-line interface."""

    # 0) fail fast on bad configuration
    try:
        get_cache_store_kind()
    except UnknownCacheStoreError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    # 1) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 2) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 3) configure root logger with configured handlers
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,  # override any existing logging config
    )

    # 4) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    # 6) ensure logging is cleanly shutdown on program exit
    ctx.call_on_close(logging.shutdown)


dashkit.add_command(case)
dashkit.add_command(words_cmd)
