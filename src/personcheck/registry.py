"""Explicit registration of the class under test.

Test setup code can register the target once instead of relying on
name-based discovery::

    from personcheck.registry import registry

    registry.register(Person)
    registry.register(Person, factory=lambda: Person("Ala", "Makota", 20))

or, as a class decorator::

    @registry.register
    class Person: ...

A registered target always wins over the name search and the module scan.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .target import Source, TargetType

logger = logging.getLogger(__name__)


class TargetRegistry:
    """Holds at most one registered target class and its optional factory."""

    def __init__(self) -> None:
        self._target: TargetType | None = None

    def register(self, cls: type, *, factory: Callable[[], Any] | None = None) -> type:
        """Register `cls` as the class under test and return it unchanged.

        Args:
            cls: The target class.
            factory: Optional zero-argument callable returning a fresh
                instance; used instead of default construction.

        Raises:
            TypeError: If `cls` is not a class.
        """
        if not isinstance(cls, type):
            raise TypeError(f"expected a class, got {type(cls).__name__}")
        if self._target is not None and self._target.cls is not cls:
            logger.warning(
                "Replacing registered target %s with %s",
                self._target.qualified_name,
                f"{cls.__module__}.{cls.__qualname__}",
            )
        self._target = TargetType(cls=cls, source=Source.REGISTRY, factory=factory)
        return cls

    def get(self) -> TargetType | None:
        """Return the registered target, or None."""
        return self._target

    def clear(self) -> None:
        """Forget the registered target."""
        self._target = None


registry = TargetRegistry()
