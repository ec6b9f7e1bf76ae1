"""Locate the class under test.

Resolution order
1. a class registered in :data:`personcheck.registry.registry`;
2. a configured ``module:QualName`` target (fatal if it does not resolve);
3. the preferred name, ``demo.app:Person``;
4. the candidate list (type names crossed with modules);
5. a scan of every loaded module for a public class named ``Person``.

The first hit is cached, so a resolver hands out the same `TargetType` for
the rest of its life.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from types import ModuleType
from typing import Any

from .errors import ConfigurationError, PersonTypeNotFoundError
from .registry import TargetRegistry
from .registry import registry as default_registry
from .target import (
    DEFAULT_CLASS_NAME,
    PREFERRED,
    Candidate,
    Source,
    TargetType,
    default_candidates,
)

logger = logging.getLogger(__name__)

Importer = Callable[[str], ModuleType]


def _is_public_class(obj: Any) -> bool:
    return inspect.isclass(obj) and not obj.__name__.startswith("_")


def _getattr_path(obj: Any, path: Sequence[str]) -> Any:
    for part in path:
        obj = getattr(obj, part, None)
        if obj is None:
            return None
    return obj


class TypeResolver:  # pylint: disable=too-many-instance-attributes
    """Resolve the target class from a registry, configured names, or a scan.

    Args:
        class_name: Simple class name the scan looks for.
        preferred: First name tried after the registry and configured target.
        candidates: Ordered fallback names; defaults to `default_candidates()`.
        target: Explicitly configured target; must resolve if given.
        imports: Modules imported before the scan so their classes are visible.
        registry: Registry consulted first.
        modules: Mapping of loaded modules to scan; defaults to ``sys.modules``.
        importer: Callable used to import modules by name.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        *,
        class_name: str = DEFAULT_CLASS_NAME,
        preferred: Candidate | None = PREFERRED,
        candidates: Iterable[Candidate] | None = None,
        target: Candidate | None = None,
        imports: Iterable[str] = (),
        registry: TargetRegistry | None = None,
        modules: Mapping[str, Any] | None = None,
        importer: Importer = importlib.import_module,
    ) -> None:
        self._class_name = class_name
        self._preferred = preferred
        self._candidates = (
            tuple(candidates) if candidates is not None else default_candidates()
        )
        self._target = target
        self._imports = tuple(imports)
        self._registry = registry if registry is not None else default_registry
        self._modules = modules
        self._importer = importer
        self._resolved: TargetType | None = None

    @property
    def modules(self) -> Mapping[str, Any]:
        """Loaded modules visible to lookups and the scan."""
        return self._modules if self._modules is not None else sys.modules

    def resolve(self) -> TargetType:
        """Return the target class, resolving it on first use.

        Raises:
            PersonTypeNotFoundError: If no step yields a public class.
            ConfigurationError: If a module listed in `imports` cannot be imported.
        """
        if self._resolved is None:
            self._resolved = self._resolve()
            logger.info(
                "Resolved %s from %s",
                self._resolved.qualified_name,
                self._resolved.source.value,
            )
        return self._resolved

    def reset(self) -> None:
        """Drop the cached resolution."""
        self._resolved = None

    def _resolve(self) -> TargetType:
        if (registered := self._registry.get()) is not None:
            return registered

        if self._target is not None:
            if (cls := self.lookup(self._target)) is None:
                raise PersonTypeNotFoundError(
                    self._target.type_name, self._target.module, [str(self._target)]
                )
            return TargetType(cls=cls, source=Source.CONFIGURED)

        tried: list[str] = []
        if self._preferred is not None:
            tried.append(str(self._preferred))
            if (cls := self.lookup(self._preferred)) is not None:
                return TargetType(cls=cls, source=Source.PREFERRED)

        for candidate in self._candidates:
            tried.append(str(candidate))
            if (cls := self.lookup(candidate)) is not None:
                return TargetType(cls=cls, source=Source.CANDIDATE)

        self._import_extra_modules()
        tried.append(f"scan of loaded modules for '{self._class_name}'")
        if (cls := self.scan()) is not None:
            return TargetType(cls=cls, source=Source.SCAN)

        module = self._preferred.module if self._preferred is not None else None
        raise PersonTypeNotFoundError(self._class_name, module, tried)

    def _import_extra_modules(self) -> None:
        for name in self._imports:
            try:
                self._importer(name)
            except ImportError as exc:
                raise ConfigurationError(
                    f"Cannot import module '{name}' requested for the scan: {exc}"
                ) from exc

    def _import(self, name: str) -> ModuleType | None:
        try:
            return self._importer(name)
        except ImportError:
            logger.debug("Module %s is not importable", name)
            return None

    def lookup(self, candidate: Candidate) -> type | None:
        """Return the public class named by `candidate`, or None."""
        if candidate.module is not None:
            if (module := self._import(candidate.module)) is None:
                return None
            type_name = candidate.type_name
            prefix = f"{candidate.module}."
            if type_name.startswith(prefix):
                type_name = type_name[len(prefix) :]
            obj = _getattr_path(module, type_name.split("."))
            return obj if _is_public_class(obj) else None

        parts = candidate.type_name.split(".")
        if len(parts) == 1:
            obj = _getattr_path(self.modules.get("__main__"), parts)
            return obj if _is_public_class(obj) else None

        # Longest importable prefix is the module, the rest is the attribute path.
        for split in range(len(parts) - 1, 0, -1):
            if (module := self._import(".".join(parts[:split]))) is None:
                continue
            obj = _getattr_path(module, parts[split:])
            if _is_public_class(obj):
                return obj
        return None

    def scan(self) -> type | None:
        """Return the first public class named `class_name` among loaded modules.

        Modules whose members cannot be enumerated are skipped.
        """
        for name, module in list(self.modules.items()):
            try:
                found = self._find_in_module(module)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                logger.debug("Skipping module %s during scan: %r", name, exc)
                continue
            if found is not None:
                logger.debug("Scan found %s in module %s", self._class_name, name)
                return found
        return None

    def _find_in_module(self, module: Any) -> type | None:
        members = vars(module)
        obj = members.get(self._class_name)
        if not (_is_public_class(obj) and obj.__name__ == self._class_name):
            return None
        exported = members.get("__all__")
        if exported is not None and self._class_name not in exported:
            return None
        return obj
