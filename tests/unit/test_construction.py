"""Unit tests for personcheck.construction."""

from __future__ import annotations

import abc
import datetime as dt
import enum
from decimal import Decimal

import numpy as np
import pytest

from personcheck.construction import create_instance, default_for
from personcheck.errors import ConstructionError
from tests.fixtures.people import DataclassPerson, PlainPerson, SlotsPerson, TwoArgPerson

# pylint: disable=magic-value-comparison,too-few-public-methods


class Color(enum.Enum):
    """Enum used as a value-type annotation."""

    RED = 1
    GREEN = 2


class Address:
    """A reference type."""


@pytest.mark.parametrize(
    "annotation,expected",
    [
        (str, ""),
        ("str", ""),
        (bool, False),
        (dt.datetime, dt.datetime.min),
        (dt.date, dt.date.min),
        (dt.time, dt.time.min),
        (dt.timedelta, dt.timedelta()),
        (bytes, b""),
        (tuple, ()),
        (Color, Color.RED),
    ],
)
def test_default_for_value_categories(annotation, expected):
    """Strings, booleans, dates and value types get their zero value."""
    assert default_for(annotation) == expected


@pytest.mark.parametrize("tp", [int, float, Decimal, np.int16, np.int64, np.float32])
def test_default_for_numeric_is_zero_of_exact_type(tp):
    """Numeric parameters get zero converted to the declared kind."""
    value = default_for(tp)
    assert type(value) is tp  # pylint: disable=unidiomatic-typecheck
    assert value == 0


@pytest.mark.parametrize("annotation", [Address, int | None, "Address", dict])
def test_default_for_reference_types_is_none(annotation):
    """Reference types, optionals and unresolvable names get None."""
    assert default_for(annotation) is None


def test_zero_argument_constructor_is_used():
    """A class constructible without arguments is constructed that way."""
    person = create_instance(PlainPerson)
    assert isinstance(person, PlainPerson)
    assert person.age == 0


def test_two_argument_constructor_gets_synthesized_defaults():
    """(first_name: str, age: int) is called with "" and 0."""
    person = create_instance(TwoArgPerson)
    assert person.first_name == ""
    assert person.age == 0
    assert type(person.age) is int  # pylint: disable=unidiomatic-typecheck


def test_dataclass_fields_are_synthesized_from_string_annotations():
    """Postponed annotations on dataclass fields are evaluated."""
    person = create_instance(DataclassPerson)
    assert person.first_name == ""
    assert person.last_name == ""
    assert type(person.age) is np.int16  # pylint: disable=unidiomatic-typecheck


def test_unannotated_parameters_get_none():
    """Parameters without annotations are treated as reference types."""
    person = create_instance(SlotsPerson)
    assert person.first_name is None
    assert person.age is None


def test_optional_and_keyword_only_parameters():
    """Defaults are left alone; required keyword-only parameters are passed by name."""

    class Person:
        """Mixed parameter kinds."""

        def __init__(self, name: str, *args, nickname: str = "x", born: dt.date, **kw):
            self.name = name
            self.args = args
            self.nickname = nickname
            self.born = born
            self.kw = kw

    person = create_instance(Person)
    assert person.name == ""
    assert person.args == ()
    assert person.nickname == "x"
    assert person.born == dt.date.min
    assert person.kw == {}


def test_abstract_class_cannot_be_constructed():
    """Abstract classes raise ConstructionError."""

    class Base(abc.ABC):
        """Abstract person."""

        @abc.abstractmethod
        def get_full_name(self) -> str:
            """Abstract."""

    with pytest.raises(ConstructionError, match="abstract"):
        create_instance(Base)


def test_constructor_failure_is_wrapped():
    """An exception raised by the constructor is chained into ConstructionError."""

    class Picky:
        """Rejects empty names."""

        def __init__(self, name: str) -> None:
            if not name:
                raise ValueError("name required")

    with pytest.raises(ConstructionError) as exc_info:
        create_instance(Picky)
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert "Picky" in str(exc_info.value)


def test_class_without_inspectable_constructor(monkeypatch):
    """Classes whose signature cannot be read raise ConstructionError."""

    def no_signature(func):
        raise ValueError(f"no signature found for {func!r}")

    monkeypatch.setattr("personcheck.construction.signature_of", no_signature)

    with pytest.raises(ConstructionError, match="no accessible constructor"):
        create_instance(PlainPerson)
