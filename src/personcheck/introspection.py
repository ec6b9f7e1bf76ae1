"""Signature and annotation helpers shared by construction and member lookup."""

from __future__ import annotations

import builtins
import datetime as dt
import inspect
import logging
import types
import typing
from collections.abc import Callable
from decimal import Decimal
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)

# Names an unresolvable string annotation may still be matched by.
_NAMED_TYPES: dict[str, type] = {
    "Decimal": Decimal,
    "decimal.Decimal": Decimal,
    "datetime": dt.datetime,
    "datetime.datetime": dt.datetime,
    "date": dt.date,
    "datetime.date": dt.date,
    "time": dt.time,
    "datetime.time": dt.time,
    "timedelta": dt.timedelta,
    "datetime.timedelta": dt.timedelta,
    "np.int16": np.int16,
    "np.int32": np.int32,
    "np.int64": np.int64,
    "np.float32": np.float32,
    "np.float64": np.float64,
}


def signature_of(func: Callable[..., Any]) -> inspect.Signature:
    """Return the signature of `func`, evaluating string annotations if possible.

    Raises:
        ValueError: If no signature can be provided for `func`.
        TypeError: If `func` is not a supported kind of callable.
    """
    try:
        return inspect.signature(func, eval_str=True)
    except (NameError, SyntaxError, AttributeError, TypeError) as exc:
        logger.debug("Falling back to raw annotations for %r: %s", func, exc)
        return inspect.signature(func)


def annotation_type(annotation: Any) -> Any:
    """Normalize a parameter annotation.

    Strings left over from failed evaluation are mapped to builtin or
    well-known types by name. ``inspect.Parameter.empty`` and anything
    unrecognized are returned unchanged.
    """
    if isinstance(annotation, str):
        name = annotation.strip()
        if name in _NAMED_TYPES:
            return _NAMED_TYPES[name]
        candidate = getattr(builtins, name, None)
        if isinstance(candidate, type):
            return candidate
    return annotation


def is_optional(annotation: Any) -> bool:
    """Return True if `annotation` is a union (``X | None``, ``Optional[X]``)."""
    return typing.get_origin(annotation) in (typing.Union, types.UnionType)


def positional_parameters(sig: inspect.Signature) -> list[inspect.Parameter]:
    """Return the parameters of `sig` that can be passed positionally."""
    return [
        p
        for p in sig.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]


def is_required(param: inspect.Parameter) -> bool:
    """Return True if `param` must be supplied by the caller."""
    return param.default is param.empty and param.kind not in (
        param.VAR_POSITIONAL,
        param.VAR_KEYWORD,
    )


def accepts(param: inspect.Parameter, predicate: Callable[[Any], bool]) -> bool:
    """Return True if `param` is unannotated or its annotation satisfies `predicate`."""
    if param.annotation is param.empty:
        return True
    return predicate(annotation_type(param.annotation))
