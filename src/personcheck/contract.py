"""Reusable pytest contract for Person-like classes.

Subclass `PersonContract` in a test module and provide a ``person_type``
fixture (the plugin in `personcheck.pytest_plugin` does so from the
resolver)::

    pytest_plugins = ["personcheck.pytest_plugin"]

    class TestPerson(PersonContract):
        pass

Every check becomes one test. A missing member or a wrong result fails the
test; a class that cannot be found or built errors it during setup.
"""

from __future__ import annotations

import pytest

from personcheck import checks
from personcheck.interfaces.person import METHODS, PROPERTIES, MemberName
from personcheck.target import TargetType


def _member_id(member: MemberName) -> str:
    return member.display


class PersonContract:
    """Behaviour every Person-like class must show."""

    def test_class_should_exist(self, person_type: TargetType) -> None:
        """The resolver yields a class."""
        checks.check_class_exists(person_type)

    @pytest.mark.parametrize("member", PROPERTIES, ids=_member_id)
    def test_required_properties_should_exist(
        self, person_type: TargetType, member: MemberName
    ) -> None:
        """FirstName, LastName and Age are readable."""
        checks.check_property_exists(person_type, member)

    @pytest.mark.parametrize("member", METHODS, ids=_member_id)
    def test_methods_should_exist(
        self, person_type: TargetType, member: MemberName
    ) -> None:
        """GetFullName, HaveBirthday and Rename exist with usable signatures."""
        checks.check_method_exists(person_type, member)

    def test_full_name_should_contain_first_and_last_name(
        self, person_type: TargetType
    ) -> None:
        """The full name mentions both names, in any order and case."""
        checks.check_full_name(person_type)

    def test_have_birthday_should_increase_age(self, person_type: TargetType) -> None:
        """A birthday adds exactly one year."""
        checks.check_birthday(person_type)

    def test_rename_should_change_names(self, person_type: TargetType) -> None:
        """Rename stores the new names verbatim."""
        checks.check_rename(person_type)
