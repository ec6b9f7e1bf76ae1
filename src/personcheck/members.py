"""Find required properties and methods on a target class by name.

Python classes expose data in several ways (properties, slots, dataclass
fields, class annotations, plain instance attributes set in ``__init__``),
so property lookup consults the class first and an instance last. Method
lookup inspects the raw class attribute to drop ``self``/``cls`` without
needing an instance.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .interfaces.person import GET_FULL_NAME, HAVE_BIRTHDAY, RENAME, MemberName
from .introspection import (
    accepts,
    annotation_type,
    is_required,
    positional_parameters,
    signature_of,
)
from .numeric import is_numeric

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class Method:
    """A method found on the target class.

    `parameters` are the positional parameters after ``self``/``cls``.
    """

    name: str
    parameters: tuple[inspect.Parameter, ...]
    required_keyword_only: bool = False

    @property
    def arity(self) -> int:
        """Number of positional parameters."""
        return len(self.parameters)


def _static(cls: type, name: str) -> Any:
    try:
        return inspect.getattr_static(cls, name)
    except AttributeError:
        return _MISSING


def _annotated_names(cls: type) -> set[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        names.update(inspect.get_annotations(klass))
    return names


def _is_readable(cls: type, name: str, instance: Any) -> bool:
    attr = _static(cls, name)
    if attr is not _MISSING:
        if isinstance(attr, property):
            return attr.fget is not None
        # plain functions, staticmethods and classmethods are methods, not data
        return not (
            inspect.isfunction(attr) or isinstance(attr, (staticmethod, classmethod))
        )
    if dataclasses.is_dataclass(cls) and name in {
        f.name for f in dataclasses.fields(cls)
    }:
        return True
    if name in _annotated_names(cls):
        return True
    if instance is not None:
        return name in getattr(instance, "__dict__", {})
    return False


def find_property(
    cls: type, member: MemberName, instance: Any = None
) -> str | None:
    """Return the spelling under which `member` is a readable property, or None."""
    for spelling in member.spellings:
        if _is_readable(cls, spelling, instance):
            return spelling
    return None


def property_type(cls: type, name: str) -> Any:
    """Return the declared type of property `name`, or None if undeclared."""
    attr = _static(cls, name)
    if isinstance(attr, property) and attr.fget is not None:
        ret = signature_of(attr.fget).return_annotation
        return None if ret is inspect.Signature.empty else annotation_type(ret)
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError, AttributeError) as exc:
        logger.debug("Cannot evaluate annotations of %r: %s", cls, exc)
        hints = {}
        for klass in reversed(cls.__mro__):
            hints.update(inspect.get_annotations(klass))
    return annotation_type(hints[name]) if name in hints else None


def _method(cls: type, name: str) -> Method | None:
    attr = _static(cls, name)
    if isinstance(attr, staticmethod):
        func, skip = attr.__func__, 0
    elif isinstance(attr, classmethod):
        func, skip = attr.__func__, 1
    elif inspect.isfunction(attr):
        func, skip = attr, 1
    else:
        return None
    try:
        sig = signature_of(func)
    except (TypeError, ValueError):
        return None
    required_kw = any(
        p.kind is p.KEYWORD_ONLY and is_required(p) for p in sig.parameters.values()
    )
    return Method(
        name=name,
        parameters=tuple(positional_parameters(sig)[skip:]),
        required_keyword_only=required_kw,
    )


def find_method(
    cls: type, member: MemberName, matches: Callable[[Method], bool]
) -> Method | None:
    """Return the first spelling of `member` that is a method satisfying `matches`."""
    for spelling in member.spellings:
        method = _method(cls, spelling)
        if method is not None and matches(method):
            return method
    return None


# ============================================================================
#                           Required signatures
# ============================================================================


def callable_without_arguments(method: Method) -> bool:
    """True if the method can be called with no arguments."""
    return not method.required_keyword_only and not any(
        is_required(p) for p in method.parameters
    )


def takes_optional_amount(method: Method) -> bool:
    """True for ``m()`` or ``m(amount)`` with a numeric (or unannotated) amount."""
    if method.required_keyword_only:
        return False
    if method.arity == 0:
        return True
    return method.arity == 1 and accepts(method.parameters[0], is_numeric)


def takes_two_strings(method: Method) -> bool:
    """True for ``m(a, b)`` where both parameters accept strings."""
    return (
        not method.required_keyword_only
        and method.arity == 2
        and all(accepts(p, lambda tp: tp is str) for p in method.parameters)
    )


SIGNATURES: dict[MemberName, tuple[Callable[[Method], bool], str]] = {
    GET_FULL_NAME: (callable_without_arguments, "be callable with no arguments"),
    HAVE_BIRTHDAY: (
        takes_optional_amount,
        "take no arguments or one numeric argument",
    ),
    RENAME: (takes_two_strings, "take exactly two string arguments"),
}
