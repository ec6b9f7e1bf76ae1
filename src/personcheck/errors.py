"""Error definitions for personcheck.

Setup errors (`ConfigurationError`, `ConstructionError`,
`UnsupportedNumericTypeError`) are fatal and surface as test errors.
`CheckFailedError` and its subclass `MissingMemberError` are
`AssertionError`s, so a wrong result or a missing member surfaces as an
ordinary test failure instead.
"""

# ============================================================================
#                           Setup errors
# ============================================================================


class PersonCheckError(Exception):
    """Base class for personcheck setup errors."""


class ConfigurationError(PersonCheckError):
    """Raised when the harness cannot be configured to reach the target class."""


class InvalidTargetError(ConfigurationError):
    """Raised when a target reference is not of the form ``module:QualName``."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid target {value!r}: expected 'module:QualName' "
            "(e.g. 'demo.app:Person')."
        )
        self.value = value


class PersonTypeNotFoundError(ConfigurationError):
    """Raised when no candidate, configured target, or scan yields the class."""

    def __init__(self, class_name: str, module: str | None, tried: list[str]) -> None:
        where = f"module '{module}'" if module else "any loaded module"
        super().__init__(
            f"No public class '{class_name}' found in {where}. "
            f"Make sure the package providing '{module or class_name}' is installed "
            "and importable, or point PERSONCHECK_TARGET at it "
            "(e.g. PERSONCHECK_TARGET=demo.app:Person). "
            f"Tried: {', '.join(tried) if tried else '<nothing>'}."
        )
        self.class_name = class_name
        self.module = module
        self.tried = tried


class ConstructionError(PersonCheckError):
    """Raised when an instance of the target class cannot be built."""

    def __init__(self, qualified_name: str, reason: str) -> None:
        super().__init__(f"Cannot construct {qualified_name}: {reason}")
        self.qualified_name = qualified_name
        self.reason = reason


class UnsupportedNumericTypeError(PersonCheckError):
    """Raised when a value or annotation is not one of the numeric kinds."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unsupported numeric type: {type_name}")
        self.type_name = type_name


# ============================================================================
#                           Check failures
# ============================================================================


class CheckFailedError(AssertionError):
    """Raised when a behavioural check observes the wrong result."""


class MissingMemberError(CheckFailedError):
    """Raised when the target lacks a required property or method."""

    def __init__(self, kind: str, name: str, requirement: str) -> None:
        super().__init__(f"{kind} {name} must exist and {requirement}.")
        self.kind = kind
        self.name = name
        self.requirement = requirement
