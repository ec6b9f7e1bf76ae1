"""Logging helpers used by the personcheck CLI and the check runner.

Console output goes through Rich on stderr. A "flight recorder" keeps the
most recent records in memory at DEBUG granularity and writes them to a file
when something goes wrong (or on exit, if asked).

Records are tagged with the check that was running when they were emitted,
so a log line raised from inside the class under test can be traced back to
``birthday`` or ``rename``. Use `check_context` around a check to set the tag.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import numpy
from rich.console import Console
from rich.logging import RichHandler

from .config import IMPORTS_ENV, TARGET_ENV

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "personcheck"

CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s %(prefix)s%(message)s"
FILE_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d [check=%(check)s] %(message)s"
)

_current_check: ContextVar[str | None] = ContextVar("personcheck_check", default=None)


@contextmanager
def check_context(name: str) -> Iterator[None]:
    """Tag every record emitted inside the block with check `name`."""
    token = _current_check.set(name)
    try:
        yield
    finally:
        _current_check.reset(token)


class CheckContextFilter(logging.Filter):
    """Attach ``record.check`` and a short console ``record.prefix``.

    ``record.check`` is the running check's name, or ``-`` outside a check.
    The prefix shows the check name, plus the top-level package for records
    coming from outside personcheck (usually the class under test), e.g.
    ``[birthday] [demo] ``. Every record is let through.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        check = _current_check.get()
        record.check = check or "-"
        tags = [check] if check else []
        if not record.name.startswith(PROJECT_PREFIX):
            tags.append(record.name.split(".")[0])
        record.prefix = "".join(f"[{tag}] " for tag in tags)
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output; ignored in debug mode,
            which always logs DEBUG with source paths and timestamps.
        debug_mode: Enable debug formatting.
        color: Enable color output.
    """
    # mirrors click-extra's --color / --no-color
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    handler.addFilter(CheckContextFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a memory-buffered handler that writes to `path` on WARNING.

    The file is opened lazily and truncated, so a run that never flushes
    leaves no file behind and each run replaces the previous log.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records kept in memory.
        flush_on_close: Also flush when the handler is closed at exit.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    recorder = MemoryHandler(
        capacity=capacity,
        flushLevel=logging.WARNING,
        target=file_handler,
        flushOnClose=flush_on_close,
    )
    recorder.addFilter(CheckContextFilter())
    return recorder


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    recorder: MemoryHandler | None,
) -> None:
    """Log a one-line startup summary and DEBUG diagnostics.

    The diagnostics include the interpreter, NumPy (which provides the
    fixed-width numeric kinds), and the target configuration found in the
    environment.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        recorder: The flight recorder, if enabled.
    """
    logger.info(
        "PERSONCHECK %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recorder is not None else "OFF",
    )

    logger.debug("Python: %s (%s)", sys.version.split()[0], sys.executable)
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("NumPy: %s", numpy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    for name in (TARGET_ENV, IMPORTS_ENV):
        logger.debug("%s=%s", name, os.environ.get(name, "<unset>"))
    if recorder is not None:
        target = recorder.target
        logger.debug(
            "Flight recorder: path=%s, capacity=%s",
            getattr(target, "baseFilename", "<none>"),
            recorder.capacity,
        )
