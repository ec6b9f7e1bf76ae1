"""Build instances of a class without knowing its constructor.

If the constructor can be called with no arguments it is; otherwise each
required parameter gets a synthesized value chosen by its annotation:

* ``str`` → ``""``
* ``bool`` → ``False``
* numeric kinds → zero of that exact type
* ``datetime`` / ``date`` / ``time`` → their ``.min``
* other value types → their zero value (first member for enums)
* unions and every other type → ``None``
"""

from __future__ import annotations

import datetime as dt
import inspect
import logging
from enum import Enum
from typing import Any

from . import numeric
from .errors import ConstructionError
from .introspection import annotation_type, is_optional, is_required, signature_of

logger = logging.getLogger(__name__)

# Immutable types whose no-argument call gives their zero value.
VALUE_TYPES: tuple[type, ...] = (bytes, complex, tuple, frozenset, dt.timedelta)


def default_for(annotation: Any) -> Any:
    """Return the synthesized default for a parameter annotated with `annotation`."""
    tp = annotation_type(annotation)
    if tp is str:
        return ""
    if tp is bool:
        return False
    if numeric.is_numeric(tp):
        return numeric.convert_to(tp, 0)
    if tp in (dt.datetime, dt.date, dt.time):
        return tp.min
    if is_optional(tp):
        return None
    if isinstance(tp, type) and issubclass(tp, Enum):
        return next(iter(tp), None)
    if tp in VALUE_TYPES:
        return tp()
    return None


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def create_instance(cls: type) -> Any:
    """Return a default-constructed instance of `cls`.

    Args:
        cls: The class to instantiate.

    Returns:
        A new instance of `cls`.

    Raises:
        ConstructionError: If `cls` is abstract, has no inspectable
            constructor, or its constructor raises.
    """
    name = _qualified_name(cls)
    if inspect.isabstract(cls):
        raise ConstructionError(name, "class is abstract")
    try:
        sig = signature_of(cls)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(name, "no accessible constructor") from exc

    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for param in sig.parameters.values():
        if not is_required(param):
            continue
        value = default_for(param.annotation)
        if param.kind is param.KEYWORD_ONLY:
            kwargs[param.name] = value
        else:
            args.append(value)

    if args or kwargs:
        logger.debug("Constructing %s with synthesized %r %r", name, args, kwargs)
    try:
        return cls(*args, **kwargs)
    except Exception as exc:
        raise ConstructionError(name, f"constructor raised {exc!r}") from exc
