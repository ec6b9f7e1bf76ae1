"""pytest plugin providing the class under test as fixtures.

Enable it with ``pytest_plugins = ["personcheck.pytest_plugin"]`` in a
``conftest.py`` or ``-p personcheck.pytest_plugin`` on the command line.

Provided fixtures
-----------------
- **person_resolver** (session): `TypeResolver` built from ``--person-target``,
  ``--person-import`` and the ``PERSONCHECK_*`` environment variables.
- **person_type** (session): the resolved `TargetType`; resolved once per run.
- **person_subject**: a `PersonSubject` over a fresh instance, per test.
"""

from __future__ import annotations

import pytest

from personcheck import config
from personcheck.resolver import TypeResolver
from personcheck.subject import PersonSubject
from personcheck.target import TargetType

# pylint: disable=redefined-outer-name


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the personcheck command-line options."""
    group = parser.getgroup("personcheck", "Person contract checks")
    group.addoption(
        "--person-target",
        action="store",
        default=None,
        metavar="MODULE:CLASS",
        help="Class to test, e.g. 'myapp.models:Person'. Overrides PERSONCHECK_TARGET.",
    )
    group.addoption(
        "--person-import",
        action="append",
        default=[],
        metavar="MODULE",
        help="Module to import before scanning for the class (repeatable).",
    )


@pytest.fixture(scope="session")
def person_resolver(request: pytest.FixtureRequest) -> TypeResolver:
    """Return the resolver configured from options and the environment."""
    return config.build_resolver(
        request.config.getoption("person_target"),
        request.config.getoption("person_import"),
    )


@pytest.fixture(scope="session")
def person_type(person_resolver: TypeResolver) -> TargetType:
    """Return the class under test, resolved once for the whole session."""
    return person_resolver.resolve()


@pytest.fixture
def person_subject(person_type: TargetType) -> PersonSubject:
    """Return a subject wrapping a fresh instance of the class under test."""
    return PersonSubject.create(person_type)
