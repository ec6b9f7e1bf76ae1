"""Global pytest configuration for personcheck.

Every test is marked with the layer its top-level folder names (``unit``,
``contract``, ``functional``) unless it already carries that mark, so
``pytest -m unit`` selects by folder without per-test decorators.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "personcheck.pytest_plugin",
    "tests.fixtures.modules",
    "pytester",
]

TESTS_ROOT = Path(__file__).parent.resolve()
LAYERS = ("unit", "contract", "functional")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default layer mark to items under `tests/<layer>/`."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        layer = path.relative_to(TESTS_ROOT).parts[0]
        if layer in LAYERS and not any(m.name == layer for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, layer))
