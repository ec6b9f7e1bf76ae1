"""Value objects describing the class under test and where to look for it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing import Any

from .construction import create_instance
from .errors import InvalidTargetError

DEFAULT_CLASS_NAME = "Person"
PREFERRED_MODULE = "demo.app"

DEFAULT_TYPE_NAMES = ("demo.app.Person", "demo.Person", "Person")
DEFAULT_MODULES = ("demo.app", "demo", None)  # None => search without a module


class Source(Enum):
    """Where a target class was found."""

    REGISTRY = "registry"
    CONFIGURED = "configured"
    PREFERRED = "preferred"
    CANDIDATE = "candidate"
    SCAN = "scan"


@dataclass(frozen=True)
class Candidate:
    """One (type name, module) pair tried during resolution.

    With a module, `type_name` is looked up inside that module (a leading
    ``module.`` prefix is stripped). Without one, `type_name` is a dotted path
    whose longest importable prefix is the module.
    """

    type_name: str
    module: str | None = None

    def __str__(self) -> str:
        if self.module is None:
            return self.type_name
        return f"{self.module}:{self.type_name}"

    @classmethod
    def parse(cls, value: str) -> Candidate:
        """Parse an entry-point style reference, ``module:QualName``.

        Raises:
            InvalidTargetError: If `value` lacks either part.
        """
        module, sep, qualname = value.strip().partition(":")
        if not sep or not module or not qualname:
            raise InvalidTargetError(value)
        return cls(type_name=qualname, module=module)


PREFERRED = Candidate(DEFAULT_CLASS_NAME, PREFERRED_MODULE)


def default_candidates() -> tuple[Candidate, ...]:
    """Return the fallback candidates, type name outer and module inner."""
    return tuple(
        Candidate(type_name, module)
        for type_name, module in product(DEFAULT_TYPE_NAMES, DEFAULT_MODULES)
    )


@dataclass(frozen=True)
class TargetType:
    """A resolved reference to the class under test.

    Identity is the class alone; where it was found and the factory, when
    present, do not take part in equality. The factory replaces default
    construction.
    """

    cls: type
    source: Source = field(compare=False)
    factory: Callable[[], Any] | None = field(default=None, compare=False)

    @property
    def qualified_name(self) -> str:
        """``module.QualName`` of the class."""
        return f"{self.cls.__module__}.{self.cls.__qualname__}"

    def new_instance(self) -> Any:
        """Return a fresh instance, via the factory or default construction."""
        if self.factory is not None:
            return self.factory()
        return create_instance(self.cls)

    def __str__(self) -> str:
        return self.qualified_name

