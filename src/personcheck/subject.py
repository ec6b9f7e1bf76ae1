"""Reflection-backed adapter that presents any Person-like object as `PersonLike`.

The adapter resolves each member under whichever spelling the wrapped class
uses, converts numbers between the caller's ``int`` and the class's own
numeric kind, and raises `MissingMemberError` (an ``AssertionError``) when a
required member is absent.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from . import numeric
from .errors import MissingMemberError
from .interfaces.person import (
    AGE,
    FIRST_NAME,
    GET_FULL_NAME,
    HAVE_BIRTHDAY,
    LAST_NAME,
    RENAME,
    MemberName,
    PersonLike,
)
from .introspection import annotation_type
from .members import SIGNATURES, Method, find_method, find_property, property_type

if TYPE_CHECKING:
    from .target import TargetType

logger = logging.getLogger(__name__)


class PersonSubject(PersonLike):
    """Wrap one instance under test.

    Args:
        instance: The object to drive.
        cls: The class it was built from; defaults to ``type(instance)``.
    """

    def __init__(self, instance: Any, cls: type | None = None) -> None:
        self._instance = instance
        self._cls = cls if cls is not None else type(instance)

    @classmethod
    def create(cls, target: TargetType) -> PersonSubject:
        """Build a fresh instance of `target` and wrap it."""
        return cls(target.new_instance(), target.cls)

    @property
    def instance(self) -> Any:
        """The wrapped object."""
        return self._instance

    # ------------------------------------------------------------------
    # member lookup
    # ------------------------------------------------------------------

    def property_name(self, member: MemberName) -> str:
        """Return the spelling of readable property `member`.

        Raises:
            MissingMemberError: If the property does not exist or has no getter.
        """
        name = find_property(self._cls, member, self._instance)
        if name is None:
            raise MissingMemberError("Property", member.display, "have a getter")
        return name

    def method(self, member: MemberName) -> Method:
        """Return the method `member`, checked against its required signature.

        Raises:
            MissingMemberError: If no spelling has a matching signature.
        """
        matches, requirement = SIGNATURES[member]
        method = find_method(self._cls, member, matches)
        if method is None:
            raise MissingMemberError("Method", member.display, requirement)
        return method

    def get(self, member: MemberName) -> Any:
        """Read property `member`."""
        return getattr(self._instance, self.property_name(member))

    def try_set(self, member: MemberName, value: Any) -> bool:
        """Assign property `member` if the target allows it.

        Returns:
            True if the value was assigned, False for read-only properties,
            frozen dataclasses and similar.
        """
        name = self.property_name(member)
        try:
            setattr(self._instance, name, value)
        except AttributeError as exc:
            logger.debug("%s.%s is not settable: %s", self._cls.__name__, name, exc)
            return False
        return True

    def _text(self, member: MemberName) -> str:
        value = self.get(member)
        return "" if value is None else str(value)

    # ------------------------------------------------------------------
    # PersonLike
    # ------------------------------------------------------------------

    @property
    def first_name(self) -> str:
        return self._text(FIRST_NAME)

    @property
    def last_name(self) -> str:
        return self._text(LAST_NAME)

    @property
    def age(self) -> int:
        return numeric.to_int(self.get(AGE))

    def age_type(self) -> type:
        """Numeric type the target stores its age as (``int`` if unknown)."""
        name = self.property_name(AGE)
        declared = property_type(self._cls, name)
        if numeric.is_numeric(declared):
            return declared
        current = type(getattr(self._instance, name))
        return current if numeric.is_numeric(current) else int

    def set_age(self, years: int) -> bool:
        """Assign the age, converted to the target's numeric kind, if settable."""
        return self.try_set(AGE, numeric.convert_to(self.age_type(), years))

    def set_names(self, first_name: str, last_name: str) -> None:
        """Assign both names where the target allows it."""
        self.try_set(FIRST_NAME, first_name)
        self.try_set(LAST_NAME, last_name)

    def get_full_name(self) -> str:
        method = self.method(GET_FULL_NAME)
        result = getattr(self._instance, method.name)()
        return result if isinstance(result, str) else ""

    def have_birthday(self) -> None:
        method = self.method(HAVE_BIRTHDAY)
        bound = getattr(self._instance, method.name)
        if method.arity == 0:
            bound()
            return
        declared = annotation_type(method.parameters[0].annotation)
        amount_type = declared if numeric.is_numeric(declared) else int
        bound(numeric.convert_to(amount_type, 1))

    def rename(self, first_name: str, last_name: str) -> None:
        method = self.method(RENAME)
        getattr(self._instance, method.name)(first_name, last_name)
