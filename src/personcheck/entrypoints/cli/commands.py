"""personcheck subcommands: ``locate`` and ``check``.

Behavior
- The target is resolved through `personcheck.config.build_resolver`, so
  ``--target`` overrides ``PERSONCHECK_TARGET`` and ``--import`` adds to
  ``PERSONCHECK_IMPORTS``.
- Status lines go to **stderr**; ``locate`` writes the class name to
  **stdout** so it can be captured by scripts.

Failure modes
- No class found or malformed target → ``ClickException`` (exit 1) with the
  resolver's diagnostic.
- Any failed or errored check → exit 1 after the report.
"""

from __future__ import annotations

import logging

import click

from personcheck import config
from personcheck.checks import Outcome, run_checks
from personcheck.errors import ConfigurationError
from personcheck.target import TargetType

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

target_option = click.option(
    "--target",
    "-t",
    metavar="MODULE:CLASS",
    default=None,
    help="Class to test, e.g. 'myapp.models:Person'. Overrides PERSONCHECK_TARGET.",
)
import_option = click.option(
    "--import",
    "-i",
    "imports",
    metavar="MODULE",
    multiple=True,
    help=(
        "Import MODULE before scanning loaded modules for the class. "
        "Repeatable; adds to PERSONCHECK_IMPORTS."
    ),
)


def _resolve(target: str | None, imports: tuple[str, ...]) -> TargetType:
    try:
        return config.build_resolver(target, imports).resolve()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@target_option
@import_option
def locate(target: str | None, imports: tuple[str, ...]) -> None:
    """Print the fully-qualified name of the class under test."""
    resolved = _resolve(target, imports)
    click.echo(resolved.qualified_name)
    click.echo(f"found via {resolved.source.value}", err=True)


@click.command()
@target_option
@import_option
@click.pass_context
def check(ctx: click.Context, target: str | None, imports: tuple[str, ...]) -> None:
    """Run every check against the class under test."""
    resolved = _resolve(target, imports)
    results = run_checks(resolved)

    for result in results:
        match result.outcome:
            case Outcome.PASSED:
                success(result.name)
            case Outcome.FAILED:
                error(f"{result.name}: {result.message}")
            case Outcome.ERROR:
                warn(f"{result.name} (error): {result.message}")

    failed = [r for r in results if not r.passed]
    if failed:
        error(f"{len(failed)} of {len(results)} checks did not pass for {resolved}.")
        ctx.exit(1)
    success(f"All {len(results)} checks passed for {resolved}.")
