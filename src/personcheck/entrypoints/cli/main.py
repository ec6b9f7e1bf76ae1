"""personcheck CLI entry point.

Defines the top-level ``personcheck`` group (via Click-Extra), wires logging
for every invocation, and registers the subcommands.

Commands
- ``personcheck locate``: print the fully-qualified name of the resolved class.
- ``personcheck check``: run every check and exit non-zero on any failure.

Examples
    $ personcheck --version
    $ PERSONCHECK_TARGET=myapp.models:Person personcheck check
    $ personcheck -v check --import myapp.models
"""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from personcheck import __version__
from personcheck.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .commands import check, locate

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = logging.WARNING
DEFAULT_LOG_PATH = (
    Path(user_log_dir("personcheck", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """personcheck command-line interface.

    personcheck locates a Person class at runtime (registry, configured target,
    well-known names, or a scan of loaded modules), builds an instance without
    knowing its constructor, and verifies its name, age, full-name, birthday
    and rename behaviour.
    """


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Shift the WARNING default one level per -v/-q, clamped to DEBUG..CRITICAL."""
    level = DEFAULT_LEVEL + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


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
    default=0,
    help="Show more on the console; repeat for INFO then DEBUG.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console; repeat for ERROR then CRITICAL.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="PERSONCHECK_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PERSONCHECK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent DEBUG records in memory and write them to --log-path "
        "when a warning or error is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
)
@clickx.pass_context
def personcheck(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
) -> None:
    """personcheck command-line interface."""
    level = console_level(verbose_count, quiet_count)

    handlers: list[logging.Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    recorder: MemoryHandler | None = None
    if flight_recorder:
        recorder = config_flight_recorder(
            log_path, capacity=flight_recorder_capacity, flush_on_close=force_flush
        )
        handlers.append(recorder)

    # root at DEBUG; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    ctx.call_on_close(logging.shutdown)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        recorder=recorder,
    )


personcheck.add_command(locate)
personcheck.add_command(check)
