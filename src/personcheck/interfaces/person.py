"""The capability a Person-like class must offer.

`PersonLike` is what the behavioural checks talk to. A class can satisfy it
directly, or be wrapped by `personcheck.subject.PersonSubject`, which maps
each member to the spelling the class actually uses.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MemberName:
    """A required member and the spellings it may be found under."""

    canonical: str
    aliases: tuple[str, ...]

    @property
    def spellings(self) -> tuple[str, ...]:
        """Canonical spelling first, then the aliases."""
        return (self.canonical, *self.aliases)

    @property
    def display(self) -> str:
        """PascalCase name used in messages, e.g. ``FirstName``."""
        return self.aliases[0] if self.aliases else self.canonical


FIRST_NAME = MemberName("first_name", ("FirstName",))
LAST_NAME = MemberName("last_name", ("LastName",))
AGE = MemberName("age", ("Age",))
GET_FULL_NAME = MemberName("get_full_name", ("GetFullName",))
HAVE_BIRTHDAY = MemberName("have_birthday", ("HaveBirthday",))
RENAME = MemberName("rename", ("Rename",))

PROPERTIES = (FIRST_NAME, LAST_NAME, AGE)
METHODS = (GET_FULL_NAME, HAVE_BIRTHDAY, RENAME)


class PersonLike(abc.ABC):
    """Abstract view of a person used by the checks."""

    @property
    @abc.abstractmethod
    def first_name(self) -> Any:
        """Current first name."""

    @property
    @abc.abstractmethod
    def last_name(self) -> Any:
        """Current last name."""

    @property
    @abc.abstractmethod
    def age(self) -> int:
        """Current age as a plain int."""

    @abc.abstractmethod
    def get_full_name(self) -> str:
        """Return a string containing both names."""

    @abc.abstractmethod
    def have_birthday(self) -> None:
        """Increase the age by exactly one year."""

    @abc.abstractmethod
    def rename(self, first_name: str, last_name: str) -> None:
        """Overwrite both names."""
