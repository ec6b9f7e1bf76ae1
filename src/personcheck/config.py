"""Configuration utilities for personcheck.

This module centralizes the environment variables the harness reads and the
helper that turns them (plus any explicit overrides) into a `TypeResolver`.
"""

import os
import re
from collections.abc import Iterable

from .resolver import TypeResolver
from .target import Candidate

TARGET_ENV = "PERSONCHECK_TARGET"  # pragma: no mutate
IMPORTS_ENV = "PERSONCHECK_IMPORTS"  # pragma: no mutate


def get_target() -> Candidate | None:
    """Get the configured target from the environment.

    Returns:
        The `Candidate` parsed from ``PERSONCHECK_TARGET``, or None if unset.

    Raises:
        InvalidTargetError: If the value is not of the form ``module:QualName``.
    """
    if not (value := os.environ.get(TARGET_ENV)):
        return None
    return Candidate.parse(value)


def split_modules(value: str | Iterable[str]) -> tuple[str, ...]:
    """Split comma/space separated module names, dropping empty fragments.

    Accepts a single string (e.g. from an env var) or an iterable of strings
    (e.g. a repeatable Click option).
    """
    values = [value] if isinstance(value, str) else list(value)
    return tuple(s for v in values for s in re.split(r"[,\s]+", v) if s)


def get_imports() -> tuple[str, ...]:
    """Get the modules to import before scanning, from ``PERSONCHECK_IMPORTS``."""
    return split_modules(os.environ.get(IMPORTS_ENV, ""))


def build_resolver(
    target: str | None = None, imports: Iterable[str] = ()
) -> TypeResolver:
    """Build a `TypeResolver` from explicit overrides and the environment.

    Args:
        target: ``module:QualName`` overriding ``PERSONCHECK_TARGET``.
        imports: Modules to import before scanning, added to
            ``PERSONCHECK_IMPORTS``.

    Returns:
        A resolver using the default registry, candidates and ``sys.modules``.

    Raises:
        InvalidTargetError: If a target reference is malformed.
    """
    configured = Candidate.parse(target) if target else get_target()
    modules = (*get_imports(), *split_modules(imports))
    return TypeResolver(target=configured, imports=modules)
