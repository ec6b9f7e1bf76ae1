"""Pytest fixtures for Person contract tests.

Provided fixtures
-----------------
- **person_type**: Parametrized over every conforming shape in
  `tests.fixtures.people.GOOD_PEOPLE`; overrides the plugin's resolved
  target so the shipped contract runs against each of them. Shapes are
  registered first, so they are found through the same resolver the plugin
  uses.
"""

from __future__ import annotations

import pytest

from personcheck.registry import TargetRegistry
from personcheck.resolver import TypeResolver
from personcheck.target import Source, TargetType
from tests.fixtures.people import GOOD_PEOPLE


@pytest.fixture(params=list(GOOD_PEOPLE))
def person_type(request: pytest.FixtureRequest) -> TargetType:
    """Return a freshly resolved target for the requested Person shape.

    Current params: the keys of `GOOD_PEOPLE` (``"plain"``, ``"dataclass"``,
    ``"pascal_case"`` ...). Add a shape there to run the contract against it.
    """
    match GOOD_PEOPLE.get(request.param):
        case type() as cls:
            registry = TargetRegistry()
            registry.register(cls)
            target = TypeResolver(registry=registry).resolve()
            assert target.source is Source.REGISTRY
            return target
        case _:
            raise ValueError(f"unknown person shape: {request.param}")
