"""Unit tests for personcheck.members."""

from __future__ import annotations

from decimal import Decimal

import numpy as np
import pytest

from personcheck.interfaces.person import (
    AGE,
    FIRST_NAME,
    GET_FULL_NAME,
    HAVE_BIRTHDAY,
    LAST_NAME,
    RENAME,
)
from personcheck.members import (
    callable_without_arguments,
    find_method,
    find_property,
    property_type,
    takes_optional_amount,
    takes_two_strings,
)
from tests.fixtures.people import (
    DataclassPerson,
    NoRenamePerson,
    PascalPerson,
    PlainPerson,
    PropertyPerson,
    SlotsPerson,
    WrongRenameSignaturePerson,
)

# pylint: disable=magic-value-comparison,too-few-public-methods,missing-function-docstring


# --- properties -------------------------------------------------------------


@pytest.mark.parametrize(
    "cls", [PropertyPerson, DataclassPerson, SlotsPerson], ids=lambda c: c.__name__
)
def test_class_level_properties_are_found_without_instance(cls):
    """Properties, dataclass fields and slots are visible on the class itself."""
    for member in (FIRST_NAME, LAST_NAME, AGE):
        assert find_property(cls, member) == member.canonical


def test_instance_attributes_need_an_instance():
    """Attributes assigned in __init__ are only visible on an instance."""
    assert find_property(PlainPerson, FIRST_NAME) is None
    assert find_property(PlainPerson, FIRST_NAME, PlainPerson()) == "first_name"


def test_pascal_case_alias_is_found():
    """FirstName is accepted when first_name is absent."""
    assert find_property(PascalPerson, FIRST_NAME, PascalPerson()) == "FirstName"


def test_annotated_class_attribute_counts_as_property():
    """A bare class annotation declares a readable attribute."""

    class Person:
        age: int

    assert find_property(Person, AGE) == "age"


def test_property_without_getter_is_not_readable():
    """A write-only property does not satisfy the requirement."""

    class Person:
        age = property(None, lambda self, value: None)

    assert find_property(Person, AGE) is None


def test_method_is_not_a_property():
    """A method called first_name is not a readable property."""

    class Person:
        def first_name(self):
            return "Ala"

    assert find_property(Person, FIRST_NAME, Person()) is None


@pytest.mark.parametrize(
    "cls,name,expected",
    [
        (PropertyPerson, "age", Decimal),
        (DataclassPerson, "age", np.int16),
        (PlainPerson, "age", None),
    ],
)
def test_property_type(cls, name, expected):
    """Declared types come from getters or class annotations."""
    assert property_type(cls, name) is expected


# --- methods ----------------------------------------------------------------


def test_method_parameters_exclude_self():
    """The reported parameters start after self."""
    method = find_method(PlainPerson, RENAME, takes_two_strings)
    assert method is not None
    assert method.name == "rename"
    assert [p.name for p in method.parameters] == ["first_name", "last_name"]


def test_pascal_case_methods_are_found():
    """GetFullName is accepted when get_full_name is absent."""
    method = find_method(PascalPerson, GET_FULL_NAME, callable_without_arguments)
    assert method is not None
    assert method.name == "GetFullName"


@pytest.mark.parametrize(
    "cls,arity",
    [(PlainPerson, 0), (PropertyPerson, 1), (DataclassPerson, 1), (SlotsPerson, 1)],
)
def test_both_birthday_variants_are_accepted(cls, arity):
    """have_birthday() and have_birthday(amount) both qualify."""
    method = find_method(cls, HAVE_BIRTHDAY, takes_optional_amount)
    assert method is not None
    assert method.arity == arity


def test_birthday_with_non_numeric_argument_is_rejected():
    """have_birthday(note: str) does not qualify."""

    class Person:
        def have_birthday(self, note: str) -> None: ...

    assert find_method(Person, HAVE_BIRTHDAY, takes_optional_amount) is None


def test_birthday_with_two_arguments_is_rejected():
    """have_birthday(years, months) does not qualify."""

    class Person:
        def have_birthday(self, years: int, months: int) -> None: ...

    assert find_method(Person, HAVE_BIRTHDAY, takes_optional_amount) is None


def test_static_and_class_methods_are_inspected():
    """staticmethod keeps all parameters; classmethod drops cls."""

    class Person:
        @staticmethod
        def rename(first_name: str, last_name: str) -> None: ...

        @classmethod
        def get_full_name(cls) -> str:
            return cls.__name__

    assert find_method(Person, RENAME, takes_two_strings) is not None
    assert find_method(Person, GET_FULL_NAME, callable_without_arguments) is not None


def test_full_name_with_optional_parameter_is_callable_without_arguments():
    """get_full_name(sep=' ') can be called with no arguments."""

    class Person:
        def get_full_name(self, sep: str = " ") -> str:
            return sep

    assert find_method(Person, GET_FULL_NAME, callable_without_arguments) is not None


def test_required_keyword_only_parameter_disqualifies():
    """get_full_name(*, sep) cannot be called with no arguments."""

    class Person:
        def get_full_name(self, *, sep: str) -> str:
            return sep

    assert find_method(Person, GET_FULL_NAME, callable_without_arguments) is None


@pytest.mark.parametrize(
    "cls", [NoRenamePerson, WrongRenameSignaturePerson], ids=lambda c: c.__name__
)
def test_rename_requires_two_string_parameters(cls):
    """A missing rename or one with the wrong shape is not found."""
    assert find_method(cls, RENAME, takes_two_strings) is None


def test_rename_with_non_string_annotation_is_rejected():
    """rename(first: str, last: int) does not qualify."""

    class Person:
        def rename(self, first_name: str, last_name: int) -> None: ...

    assert find_method(Person, RENAME, takes_two_strings) is None
