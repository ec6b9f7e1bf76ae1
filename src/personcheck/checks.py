"""Behavioural checks run against a resolved target class.

Every check builds its own instance, so checks are independent and can run
in any order. A check passes by returning and fails by raising
``AssertionError`` (`CheckFailedError`, `MissingMemberError`). Any other exception is a
setup error or comes from the target's own code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import partial

from .errors import CheckFailedError
from .interfaces.person import (
    FIRST_NAME,
    LAST_NAME,
    METHODS,
    PROPERTIES,
    MemberName,
)
from .logging import check_context
from .subject import PersonSubject
from .target import TargetType

logger = logging.getLogger(__name__)

FULL_NAME_VALUES = ("Ala", "Makota")
RENAME_VALUES = ("Jan", "Kowalski")
STARTING_AGE = 20

Check = Callable[[TargetType], None]


def expect(condition: bool, message: str) -> None:
    """Raise `CheckFailedError` with `message` unless `condition` holds."""
    if not condition:
        raise CheckFailedError(message)


# ============================================================================
#                           Existence checks
# ============================================================================


def check_class_exists(target: TargetType) -> None:
    """The resolved target is a class."""
    expect(isinstance(target.cls, type), f"{target} is not a class.")


def check_property_exists(target: TargetType, member: MemberName) -> None:
    """Property `member` exists and is readable."""
    PersonSubject.create(target).property_name(member)


def check_method_exists(target: TargetType, member: MemberName) -> None:
    """Method `member` exists with its required signature."""
    PersonSubject.create(target).method(member)


# ============================================================================
#                           Behaviour checks
# ============================================================================


def check_full_name(target: TargetType) -> None:
    """The full name contains both names, case-insensitively, in any order."""
    subject = PersonSubject.create(target)
    subject.property_name(FIRST_NAME)
    subject.property_name(LAST_NAME)
    first, last = FULL_NAME_VALUES
    subject.set_names(first, last)

    normalized = subject.get_full_name().lower()

    expect(first.lower() in normalized, f"{first!r} missing from {normalized!r}.")
    expect(last.lower() in normalized, f"{last!r} missing from {normalized!r}.")


def check_birthday(target: TargetType) -> None:
    """A birthday increases the age by exactly one."""
    subject = PersonSubject.create(target)
    subject.set_age(STARTING_AGE)
    before = subject.age

    subject.have_birthday()

    after = subject.age
    expect(
        after == before + 1,
        f"Age went from {before} to {after}, expected {before + 1}.",
    )


def check_rename(target: TargetType) -> None:
    """Rename overwrites both names exactly."""
    subject = PersonSubject.create(target)
    first, last = RENAME_VALUES

    subject.rename(first, last)

    actual_first, actual_last = subject.first_name, subject.last_name
    expect(actual_first == first, f"FirstName is {actual_first!r}, expected {first!r}.")
    expect(actual_last == last, f"LastName is {actual_last!r}, expected {last!r}.")


# ============================================================================
#                           Running every check
# ============================================================================


class Outcome(Enum):
    """Result of running one check."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one named check."""

    name: str
    outcome: Outcome
    message: str = ""

    @property
    def passed(self) -> bool:
        """True if the check passed."""
        return self.outcome is Outcome.PASSED


def all_checks() -> list[tuple[str, Check]]:
    """Return every check as ``(name, callable)`` in reporting order."""
    checks: list[tuple[str, Check]] = [("class_exists", check_class_exists)]
    checks += [
        (f"property_exists[{m.display}]", partial(check_property_exists, member=m))
        for m in PROPERTIES
    ]
    checks += [
        (f"method_exists[{m.display}]", partial(check_method_exists, member=m))
        for m in METHODS
    ]
    checks += [
        ("full_name", check_full_name),
        ("birthday", check_birthday),
        ("rename", check_rename),
    ]
    return checks


def run_check(name: str, check: Check, target: TargetType) -> CheckResult:
    """Run one check and classify its outcome.

    Records logged while the check runs, including any from the target's own
    code, are tagged with `name`.
    """
    with check_context(name):
        try:
            check(target)
        except AssertionError as exc:
            logger.debug("Check %s failed", name, exc_info=True)
            return CheckResult(name, Outcome.FAILED, str(exc))
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.debug("Check %s errored", name, exc_info=True)
            return CheckResult(name, Outcome.ERROR, f"{type(exc).__name__}: {exc}")
        logger.debug("Check %s passed", name)
    return CheckResult(name, Outcome.PASSED)


def run_checks(target: TargetType) -> list[CheckResult]:
    """Run every check against `target` and return the results in order."""
    results = [run_check(name, check, target) for name, check in all_checks()]
    failed = sum(1 for r in results if not r.passed)
    logger.info("%d/%d checks passed for %s", len(results) - failed, len(results), target)
    return results

