"""Error taxonomy for derived-key password records."""

from __future__ import annotations


class PasswordRecordError(ValueError):
    """Raised when a stored record or its parameters cannot be used.

    These errors are expected traffic during verification: a tampered,
    truncated, or foreign-format record. They are never fatal.
    """


class InvalidRecordFormat(PasswordRecordError):
    """Raised when a stored string cannot be split into parameters and a key."""


class InvalidParameterCount(PasswordRecordError):
    """Raised when a scheme receives the wrong number of parameters."""

    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} parameters, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidParameterValue(PasswordRecordError):
    """Raised when a parameter has the right arity but an unusable value."""


class SchemeProgrammingError(RuntimeError):
    """Raised when a scheme misbehaves while producing a new record.

    Default parameters and derivation over them must always succeed, so this
    points at a broken scheme or configuration, not at user input.
    """


class RecordFieldError(SchemeProgrammingError):
    """Raised when a scheme emits a field that cannot be serialized."""
